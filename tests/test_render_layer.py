import datetime
import pathlib

import drawings_calendar.config
import drawings_calendar.filename_parser
import drawings_calendar.locale_tables
import drawings_calendar.render as render

CANVAS_WIDTH = drawings_calendar.config.CANVAS_WIDTH
CANVAS_HEIGHT = drawings_calendar.config.CANVAS_HEIGHT
TEXT_COLUMN_WIDTH = drawings_calendar.config.TEXT_COLUMN_WIDTH
FOOTER_TEXT = drawings_calendar.config.FOOTER_TEXT
DUTCH_LOCALE = drawings_calendar.locale_tables.DUTCH_LOCALE
parse_filename = drawings_calendar.filename_parser.parse_filename


#============================================
def build_page(file_name: str) -> drawings_calendar.config.CalendarPage:
	metadata = parse_filename(file_name)
	return render.build_calendar_page(metadata, pathlib.Path(file_name), DUTCH_LOCALE)


#============================================
def test_date_fields_match_locale_lookups() -> None:
	"""
	2023-07-04 was a Tuesday.
	"""
	fields = render.build_date_fields(datetime.date(2023, 7, 4), DUTCH_LOCALE)
	assert fields.weekday_name == "dinsdag"
	assert fields.day_number == "4"
	assert fields.month_name == "juli"
	assert fields.year == "2023"


#============================================
def test_page_slots_are_fixed() -> None:
	page = build_page("2024-02-29-Schrikkeldag.jpg")
	assert page.day_name.content == "donderdag"
	assert page.day_number.content == "29"
	assert page.month_name.content == "februari"
	assert page.year.content == "2024"
	assert page.caption.content == "Schrikkeldag"
	assert page.footer.content == FOOTER_TEXT
	offsets = [spec.vertical_offset for _name, spec in page.text_specs()]
	assert offsets == [350, 450, 550, 650, 50, 1060]
	ranks = [spec.preferred_size_rank for _name, spec in page.text_specs()]
	assert ranks == [0, 0, 0, 0, 2, 6]


#============================================
def test_layout_places_all_fields(font_ladder) -> None:
	page = build_page("2023-07-04-Summer Trip.jpg")
	placed = render.layout_text(page, font_ladder)
	names = [item.field_name for item in placed]
	assert names == ["day_name", "day_number", "month_name", "year", "caption", "footer"]
	for item in placed:
		assert item.fit.rank >= item.spec.preferred_size_rank
		assert item.fit.origin_x > 5


#============================================
def test_layout_omits_empty_caption(font_ladder) -> None:
	page = build_page("2023-07-04.jpg")
	placed = render.layout_text(page, font_ladder)
	names = [item.field_name for item in placed]
	assert "caption" not in names
	assert len(names) == 5


#============================================
def test_layout_omits_caption_that_never_fits(font_ladder) -> None:
	page = build_page("2023-07-04-" + "W" * 80 + ".jpg")
	placed = render.layout_text(page, font_ladder)
	assert "caption" not in [item.field_name for item in placed]


#============================================
def test_text_layer_stays_in_column(font_ladder) -> None:
	page = build_page("2023-07-04-Summer Trip.jpg")
	image = render.render_text_layer(page, font_ladder)
	assert image.size == (CANVAS_WIDTH, CANVAS_HEIGHT)
	column = image.crop((0, 0, TEXT_COLUMN_WIDTH, CANVAS_HEIGHT)).convert("L")
	assert column.getextrema()[0] < 128
	rest = image.crop((TEXT_COLUMN_WIDTH, 0, CANVAS_WIDTH, CANVAS_HEIGHT)).convert("L")
	assert rest.getextrema() == (255, 255)


#============================================
def test_text_layer_without_caption_renders(font_ladder) -> None:
	page = build_page("2023-07-04.jpg")
	image = render.render_text_layer(page, font_ladder)
	# caption slot baseline is y=50, nothing should be drawn above the day name
	top_band = image.crop((0, 0, TEXT_COLUMN_WIDTH, 100)).convert("L")
	assert top_band.getextrema() == (255, 255)
