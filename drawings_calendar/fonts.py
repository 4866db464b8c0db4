"""
Font loading and the shared font-size ladder.
"""

# Standard Library
import dataclasses
import io
import pathlib

# PIP3 modules
import PIL.ImageFont

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.config
import drawings_calendar.errors


FontLoadError = dcal.errors.FontLoadError

FONT_DIR = dcal.config.FONT_DIR
FONT_EXTENSION = dcal.config.FONT_EXTENSION
FONT_SIZE_LADDER = dcal.config.FONT_SIZE_LADDER


@dataclasses.dataclass(frozen=True)
class FontLadder:
	sizes: tuple[int, ...]
	faces: tuple[PIL.ImageFont.FreeTypeFont, ...]

	def __len__(self) -> int:
		return len(self.faces)

	def face(self, rank: int) -> PIL.ImageFont.FreeTypeFont:
		return self.faces[rank]


#============================================
def font_path_for(font_name: str, font_dir: str = FONT_DIR) -> pathlib.Path:
	"""
	Build the font file path for a font name.

	Args:
		font_name: Font face name, like "Verdana".
		font_dir: Font directory.

	Returns:
		Path to the TrueType file.
	"""
	return pathlib.Path(font_dir) / f"{font_name}{FONT_EXTENSION}"


#============================================
def load_font_ladder(
	font_name: str,
	font_dir: str = FONT_DIR,
	sizes: tuple[int, ...] = FONT_SIZE_LADDER,
) -> FontLadder:
	"""
	Load one font file at every ladder size.

	Args:
		font_name: Font face name.
		font_dir: Font directory.
		sizes: Font sizes, largest first.

	Returns:
		FontLadder.

	Raises:
		FontLoadError: The font file cannot be read or parsed.
	"""
	font_path = font_path_for(font_name, font_dir)
	print(f"Loading fontfile {font_path}")
	try:
		font_bytes = font_path.read_bytes()
	except OSError as error:
		raise FontLoadError(f"Error while loading font file {font_path}: {error}") from error
	faces = []
	for size in sizes:
		try:
			face = PIL.ImageFont.truetype(io.BytesIO(font_bytes), size=size)
		except OSError as error:
			raise FontLoadError(f"Error while parsing font file {font_path}: {error}") from error
		faces.append(face)
	print(f"Fontfile {font_path} loaded")
	return FontLadder(sizes=tuple(sizes), faces=tuple(faces))
