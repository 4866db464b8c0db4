"""
Date and caption extraction from photo file names.

File names follow the pattern ``...YYYY-MM-DD[-<caption>]<ext>``. The date is
required; the caption is optional.
"""

# Standard Library
import datetime
import re

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.config
import drawings_calendar.errors


FilenameMetadata = dcal.config.FilenameMetadata
InvalidDateFormat = dcal.errors.InvalidDateFormat

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
CAPTION_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}-\s*([^\n\r]*)")
DATE_FORMAT = "%Y-%m-%d"


#============================================
def find_date_text(file_name: str) -> str | None:
	"""
	Find the first YYYY-MM-DD substring in a file name.

	Args:
		file_name: File name to search.

	Returns:
		Date substring or None.
	"""
	match = DATE_PATTERN.search(file_name)
	if match is None:
		return None
	return match.group(0)


#============================================
def date_sort_key(file_name: str) -> str:
	"""
	Sort key for file names: the embedded date text, or empty.

	Args:
		file_name: File name.

	Returns:
		Date substring, or "" when the name has none.
	"""
	return find_date_text(file_name) or ""


#============================================
def parse_date(file_name: str) -> datetime.date:
	"""
	Parse the embedded date of a file name.

	Args:
		file_name: File name.

	Returns:
		Parsed calendar date.

	Raises:
		InvalidDateFormat: No date substring, or month/day out of range.
	"""
	date_text = find_date_text(file_name)
	if date_text is None:
		raise InvalidDateFormat(f"No YYYY-MM-DD date in {file_name!r}", file_name)
	try:
		parsed = datetime.datetime.strptime(date_text, DATE_FORMAT)
	except ValueError as error:
		raise InvalidDateFormat(f"Invalid date {date_text!r} in {file_name!r}: {error}", file_name) from error
	return parsed.date()


#============================================
def strip_extension(value: str) -> str:
	"""
	Remove the text from the last dot onward.

	Args:
		value: Name with an optional extension.

	Returns:
		Name without its extension.
	"""
	head, dot, _extension = value.rpartition(".")
	if not dot:
		return value
	return head


#============================================
def extract_caption(file_name: str) -> str:
	"""
	Extract the caption that follows the date in a file name.

	Args:
		file_name: File name.

	Returns:
		Caption without extension, or "" when there is none.
	"""
	match = CAPTION_PATTERN.search(file_name)
	if match is None:
		return ""
	return strip_extension(match.group(1))


#============================================
def parse_filename(file_name: str) -> FilenameMetadata:
	"""
	Parse date and caption metadata from a file name.

	Args:
		file_name: File name.

	Returns:
		FilenameMetadata.

	Raises:
		InvalidDateFormat: The date is missing or invalid.
	"""
	day = parse_date(file_name)
	return FilenameMetadata(
		file_name=file_name,
		date_text=date_sort_key(file_name),
		date=day,
		caption=extract_caption(file_name),
	)
