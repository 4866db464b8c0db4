"""
Typed failures raised by the calendar pipeline.
"""


#============================================


class CalendarError(RuntimeError):
	"""
	Base class for pipeline failures.
	"""


class InvalidDateFormat(CalendarError):
	"""
	Raised when a file name has no valid YYYY-MM-DD date.
	"""

	def __init__(self, message: str, file_name: str = "") -> None:
		super().__init__(message)
		self.file_name = file_name


class FontLoadError(CalendarError):
	"""
	Raised when the font file cannot be read or parsed.
	"""


class SourceFolderError(CalendarError):
	"""
	Raised when the input folder cannot be listed.
	"""


class SourceImageError(CalendarError):
	"""
	Raised when a source photo cannot be opened or decoded.
	"""


class OutputWriteError(CalendarError):
	"""
	Raised when the output folder or an output file cannot be written.
	"""
