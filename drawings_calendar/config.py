"""
Shared configuration and constants.
"""

import dataclasses
import datetime
import pathlib


CANVAS_WIDTH = 1920
CANVAS_HEIGHT = 1080
TEXT_COLUMN_WIDTH = 240
MIN_LEFT_MARGIN = 5

# largest first, the fitter walks toward the end
FONT_SIZE_LADDER = (40, 36, 32, 28, 24, 20, 16, 12)

FONT_DIR = "/Library/Fonts/"
FONT_EXTENSION = ".ttf"
DEFAULT_FONT_NAME = "Verdana"
DEFAULT_FOLDER = "."

OUTPUT_DIR_NAME = "out"
SOURCE_EXTENSION = ".jpg"
OUTPUT_FORMAT = "PNG"

BACKGROUND_COLOR = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)

FOOTER_TEXT = "www.piasprong.nl"

# baseline y and starting ladder rank per text slot
DAY_NAME_SLOT = (350, 0)
DAY_NUMBER_SLOT = (450, 0)
MONTH_NAME_SLOT = (550, 0)
YEAR_SLOT = (650, 0)
CAPTION_SLOT = (50, 2)
FOOTER_SLOT = (1060, 6)


@dataclasses.dataclass(frozen=True)
class DateFields:
	weekday_name: str
	day_number: str
	month_name: str
	year: str


@dataclasses.dataclass(frozen=True)
class FilenameMetadata:
	file_name: str
	date_text: str
	date: datetime.date
	caption: str


@dataclasses.dataclass(frozen=True)
class TextSpec:
	content: str
	preferred_size_rank: int
	vertical_offset: int


@dataclasses.dataclass(frozen=True)
class CalendarPage:
	day_name: TextSpec
	day_number: TextSpec
	month_name: TextSpec
	year: TextSpec
	caption: TextSpec
	footer: TextSpec
	source_path: pathlib.Path

	#============================================
	def text_specs(self) -> list[tuple[str, TextSpec]]:
		"""
		List the text fields in drawing order.

		Returns:
			List of (field_name, TextSpec) pairs.
		"""
		return [
			("day_name", self.day_name),
			("day_number", self.day_number),
			("month_name", self.month_name),
			("year", self.year),
			("caption", self.caption),
			("footer", self.footer),
		]


@dataclasses.dataclass(frozen=True)
class TextFit:
	rank: int
	origin_x: float


@dataclasses.dataclass(frozen=True)
class PlacedText:
	field_name: str
	spec: TextSpec
	fit: TextFit


@dataclasses.dataclass
class BatchResult:
	output_dir: pathlib.Path
	saved: list[str] = dataclasses.field(default_factory=list)
	skipped: list[str] = dataclasses.field(default_factory=list)


#============================================
def make_text_spec(content: str, slot: tuple[int, int]) -> TextSpec:
	"""
	Build a TextSpec for one of the fixed text slots.

	Args:
		content: Text to draw.
		slot: Slot tuple of (vertical_offset, preferred_size_rank).

	Returns:
		TextSpec.
	"""
	vertical_offset, rank = slot
	return TextSpec(content=content, preferred_size_rank=rank, vertical_offset=vertical_offset)
