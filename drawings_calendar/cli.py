"""
CLI entry point for calendar page generation.
"""

# Standard Library
import argparse
import pathlib
import time

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.batch
import drawings_calendar.config
import drawings_calendar.errors
import drawings_calendar.fonts
import drawings_calendar.locale_tables


BatchResult = dcal.config.BatchResult
CalendarError = dcal.errors.CalendarError

DEFAULT_FONT_NAME = dcal.config.DEFAULT_FONT_NAME
DEFAULT_FOLDER = dcal.config.DEFAULT_FOLDER
DUTCH_LOCALE = dcal.locale_tables.DUTCH_LOCALE


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render dated photos into calendar pages.")
	parser.add_argument(
		"-f", "--font", dest="font_name", default=DEFAULT_FONT_NAME,
		help=f"Font name in the system font folder [{DEFAULT_FONT_NAME}].",
	)
	parser.add_argument(
		"-d", "--folder", dest="folder", default=DEFAULT_FOLDER,
		help=f"Source folder with .jpg photos [{DEFAULT_FOLDER}].",
	)
	args = parser.parse_args(argv)
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> BatchResult:
	"""
	Load the font ladder and render every photo in the folder.

	Args:
		args: Parsed argparse namespace.

	Returns:
		BatchResult.
	"""
	print(f"font name = {args.font_name}")
	print(f"folder = {args.folder}")

	start_time = time.perf_counter()
	ladder = dcal.fonts.load_font_ladder(args.font_name)
	result = dcal.batch.run_batch(pathlib.Path(args.folder), ladder, DUTCH_LOCALE)
	total_time = time.perf_counter() - start_time

	print(f"Pages written: {len(result.saved)}")
	if result.skipped:
		print(f"Files skipped: {len(result.skipped)}")
	print(f"Output folder: {result.output_dir}")
	print(f"Timing: total={total_time:.2f}s")
	return result


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	try:
		run_pipeline(args)
	except CalendarError as error:
		raise SystemExit(f"Error: {error}") from error
