"""
Text layer rendering and page composition.
"""

# Standard Library
import datetime
import pathlib

# PIP3 modules
import PIL.Image
import PIL.ImageDraw

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.config
import drawings_calendar.errors
import drawings_calendar.fonts
import drawings_calendar.locale_tables
import drawings_calendar.text_fit


CalendarPage = dcal.config.CalendarPage
DateFields = dcal.config.DateFields
FilenameMetadata = dcal.config.FilenameMetadata
PlacedText = dcal.config.PlacedText
FontLadder = dcal.fonts.FontLadder
LocaleTable = dcal.locale_tables.LocaleTable
SourceImageError = dcal.errors.SourceImageError
OutputWriteError = dcal.errors.OutputWriteError
make_text_spec = dcal.config.make_text_spec
fit_text = dcal.text_fit.fit_text

CANVAS_WIDTH = dcal.config.CANVAS_WIDTH
CANVAS_HEIGHT = dcal.config.CANVAS_HEIGHT
TEXT_COLUMN_WIDTH = dcal.config.TEXT_COLUMN_WIDTH
BACKGROUND_COLOR = dcal.config.BACKGROUND_COLOR
TEXT_COLOR = dcal.config.TEXT_COLOR
OUTPUT_FORMAT = dcal.config.OUTPUT_FORMAT
FOOTER_TEXT = dcal.config.FOOTER_TEXT
DAY_NAME_SLOT = dcal.config.DAY_NAME_SLOT
DAY_NUMBER_SLOT = dcal.config.DAY_NUMBER_SLOT
MONTH_NAME_SLOT = dcal.config.MONTH_NAME_SLOT
YEAR_SLOT = dcal.config.YEAR_SLOT
CAPTION_SLOT = dcal.config.CAPTION_SLOT
FOOTER_SLOT = dcal.config.FOOTER_SLOT


#============================================
def build_date_fields(day: datetime.date, locale: LocaleTable) -> DateFields:
	"""
	Derive the localized date text for a calendar date.

	Args:
		day: Calendar date.
		locale: Locale table.

	Returns:
		DateFields.
	"""
	return DateFields(
		weekday_name=locale.weekday_name(day),
		day_number=str(day.day),
		month_name=locale.month_name(day),
		year=f"{day.year:04d}",
	)


#============================================
def build_calendar_page(
	metadata: FilenameMetadata,
	source_path: pathlib.Path,
	locale: LocaleTable,
) -> CalendarPage:
	"""
	Bind the text fields of one file to their fixed slots.

	Args:
		metadata: Parsed file name metadata.
		source_path: Path to the source photo.
		locale: Locale table.

	Returns:
		CalendarPage.
	"""
	date_fields = build_date_fields(metadata.date, locale)
	return CalendarPage(
		day_name=make_text_spec(date_fields.weekday_name, DAY_NAME_SLOT),
		day_number=make_text_spec(date_fields.day_number, DAY_NUMBER_SLOT),
		month_name=make_text_spec(date_fields.month_name, MONTH_NAME_SLOT),
		year=make_text_spec(date_fields.year, YEAR_SLOT),
		caption=make_text_spec(metadata.caption, CAPTION_SLOT),
		footer=make_text_spec(FOOTER_TEXT, FOOTER_SLOT),
		source_path=source_path,
	)


#============================================
def layout_text(page: CalendarPage, ladder: FontLadder) -> list[PlacedText]:
	"""
	Fit every text field of a page into the text column.

	Args:
		page: Calendar page.
		ladder: Font ladder.

	Returns:
		Placed text for the fields that fit; the rest are left out.
	"""
	placed: list[PlacedText] = []
	for field_name, spec in page.text_specs():
		fit = fit_text(spec.content, spec.preferred_size_rank, TEXT_COLUMN_WIDTH, ladder)
		if fit is None:
			continue
		placed.append(PlacedText(field_name=field_name, spec=spec, fit=fit))
	return placed


#============================================
def render_text_layer(page: CalendarPage, ladder: FontLadder) -> PIL.Image.Image:
	"""
	Draw the text fields of a page onto a blank canvas.

	Args:
		page: Calendar page.
		ladder: Font ladder.

	Returns:
		White canvas with the fitted text drawn in black.
	"""
	image = PIL.Image.new("RGB", (CANVAS_WIDTH, CANVAS_HEIGHT), BACKGROUND_COLOR)
	draw = PIL.ImageDraw.Draw(image)
	placed = layout_text(page, ladder)
	for item in placed:
		draw.text(
			(item.fit.origin_x, item.spec.vertical_offset),
			item.spec.content,
			fill=TEXT_COLOR,
			font=ladder.face(item.fit.rank),
			anchor="ls",
		)
	placed_names = {item.field_name for item in placed}
	for field_name, spec in page.text_specs():
		if spec.content and field_name not in placed_names:
			print(f"Text omitted (no fit) in {page.source_path.name}: {field_name}={spec.content!r}")
	return image


#============================================
def compose_page(text_layer: PIL.Image.Image, source_photo: PIL.Image.Image) -> PIL.Image.Image:
	"""
	Combine the text column and the photo into one output canvas.

	The text column is pasted first, then the photo at the column edge.
	Anything outside the canvas is cropped.

	Args:
		text_layer: Rendered text layer.
		source_photo: Decoded source photo.

	Returns:
		Composed canvas of CANVAS_WIDTH x CANVAS_HEIGHT.
	"""
	canvas = PIL.Image.new("RGB", (CANVAS_WIDTH, CANVAS_HEIGHT), BACKGROUND_COLOR)
	column = text_layer.convert("RGB").crop((0, 0, TEXT_COLUMN_WIDTH, CANVAS_HEIGHT))
	canvas.paste(column, (0, 0))
	photo_region = (CANVAS_WIDTH - TEXT_COLUMN_WIDTH, CANVAS_HEIGHT)
	photo = source_photo.convert("RGB")
	if photo.width > photo_region[0] or photo.height > photo_region[1]:
		photo = photo.crop((0, 0, min(photo.width, photo_region[0]), min(photo.height, photo_region[1])))
	canvas.paste(photo, (TEXT_COLUMN_WIDTH, 0))
	return canvas


#============================================
def load_source_photo(path: pathlib.Path) -> PIL.Image.Image:
	"""
	Decode a source photo.

	Args:
		path: Photo path.

	Returns:
		Decoded RGB image.

	Raises:
		SourceImageError: The file cannot be opened or decoded.
	"""
	try:
		with PIL.Image.open(path) as image:
			image.load()
			return image.convert("RGB")
	except (OSError, PIL.Image.DecompressionBombError) as error:
		raise SourceImageError(f"Error while decoding file {path}: {error}") from error


#============================================
def save_page(image: PIL.Image.Image, path: pathlib.Path) -> None:
	"""
	Encode a composed page as PNG.

	The format is fixed, so the file name extension is not consulted.

	Args:
		image: Composed page.
		path: Output path.

	Raises:
		OutputWriteError: The file cannot be created or encoded.
	"""
	try:
		with path.open("wb") as handle:
			image.save(handle, format=OUTPUT_FORMAT)
	except OSError as error:
		raise OutputWriteError(f"Error while writing image {path}: {error}") from error
