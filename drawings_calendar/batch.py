"""
Batch processing of a folder of dated photos.
"""

# Standard Library
import pathlib
import shutil

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.config
import drawings_calendar.errors
import drawings_calendar.filename_parser
import drawings_calendar.fonts
import drawings_calendar.locale_tables
import drawings_calendar.render


BatchResult = dcal.config.BatchResult
FontLadder = dcal.fonts.FontLadder
LocaleTable = dcal.locale_tables.LocaleTable
InvalidDateFormat = dcal.errors.InvalidDateFormat
SourceFolderError = dcal.errors.SourceFolderError
OutputWriteError = dcal.errors.OutputWriteError
date_sort_key = dcal.filename_parser.date_sort_key
parse_filename = dcal.filename_parser.parse_filename

OUTPUT_DIR_NAME = dcal.config.OUTPUT_DIR_NAME
SOURCE_EXTENSION = dcal.config.SOURCE_EXTENSION


#============================================
def list_source_images(folder: pathlib.Path) -> list[str]:
	"""
	List the photo file names of a folder in date order.

	Names are read in name order first, so files sharing a date keep a
	stable order.

	Args:
		folder: Input folder.

	Returns:
		File names sorted by their embedded date.

	Raises:
		SourceFolderError: The folder cannot be listed.
	"""
	print(f"Loading images from {folder}")
	try:
		entries = sorted(folder.iterdir(), key=lambda path: path.name)
		file_names = [
			path.name for path in entries
			if path.is_file() and path.name.lower().endswith(SOURCE_EXTENSION)
		]
	except OSError as error:
		raise SourceFolderError(f"Error reading image folder {folder}: {error}") from error
	return sorted(file_names, key=date_sort_key)


#============================================
def prepare_output_dir(folder: pathlib.Path) -> pathlib.Path:
	"""
	Replace the output folder with a fresh empty one.

	Args:
		folder: Input folder.

	Returns:
		Output folder path.

	Raises:
		OutputWriteError: The folder cannot be removed or created.
	"""
	output_dir = folder / OUTPUT_DIR_NAME
	try:
		if output_dir.is_symlink() or output_dir.is_file():
			output_dir.unlink()
		elif output_dir.exists():
			shutil.rmtree(output_dir)
		output_dir.mkdir()
	except OSError as error:
		raise OutputWriteError(f"Error preparing output folder {output_dir}: {error}") from error
	return output_dir


#============================================
def render_calendar_file(
	folder: pathlib.Path,
	file_name: str,
	output_dir: pathlib.Path,
	ladder: FontLadder,
	locale: LocaleTable,
) -> pathlib.Path:
	"""
	Run the full pipeline for one photo.

	Args:
		folder: Input folder.
		file_name: Photo file name.
		output_dir: Output folder.
		ladder: Font ladder.
		locale: Locale table.

	Returns:
		Written output path, named like the input.
	"""
	metadata = parse_filename(file_name)
	source_path = folder / file_name
	page = dcal.render.build_calendar_page(metadata, source_path, locale)
	text_layer = dcal.render.render_text_layer(page, ladder)
	photo = dcal.render.load_source_photo(source_path)
	composed = dcal.render.compose_page(text_layer, photo)
	output_path = output_dir / file_name
	dcal.render.save_page(composed, output_path)
	return output_path


#============================================
def run_batch(
	folder: pathlib.Path,
	ladder: FontLadder,
	locale: LocaleTable,
) -> BatchResult:
	"""
	Render a calendar page for every dated photo in a folder.

	Files without a valid date are skipped with a warning. Every other
	failure ends the batch.

	Args:
		folder: Input folder.
		ladder: Font ladder.
		locale: Locale table.

	Returns:
		BatchResult.
	"""
	file_names = list_source_images(folder)
	print(f"Images found: {len(file_names)}")
	output_dir = prepare_output_dir(folder)
	result = BatchResult(output_dir=output_dir)
	for file_name in file_names:
		try:
			render_calendar_file(folder, file_name, output_dir, ladder, locale)
		except InvalidDateFormat as error:
			print(f"Skipping {file_name}: {error}")
			result.skipped.append(file_name)
			continue
		print(f"Image {file_name} saved")
		result.saved.append(file_name)
	return result
