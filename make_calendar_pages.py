#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render a folder of dated photos into calendar page images.

Examples:
	python make_calendar_pages.py --folder ~/Pictures/calendar
	python make_calendar_pages.py --folder ~/Pictures/calendar --font Arial
"""

import pathlib
import sys


#============================================
def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = pathlib.Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	import drawings_calendar.cli

	drawings_calendar.cli.main()


if __name__ == "__main__":
	main()
