"""
Pytest configuration for local imports and shared fixtures.
"""

# Standard Library
import os
import pathlib
import sys

# PIP3 modules
import PIL.Image
import PIL.ImageFont
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import drawings_calendar as dcal  # noqa: E402
import drawings_calendar.config  # noqa: E402
import drawings_calendar.fonts  # noqa: E402


#============================================
@pytest.fixture
def font_ladder() -> "dcal.fonts.FontLadder":
	"""
	Font ladder built from the scalable font bundled with Pillow.
	"""
	sizes = dcal.config.FONT_SIZE_LADDER
	faces = tuple(PIL.ImageFont.load_default(size=size) for size in sizes)
	return dcal.fonts.FontLadder(sizes=tuple(sizes), faces=faces)


#============================================
@pytest.fixture
def write_jpeg():
	"""
	Return a helper that writes a solid color JPEG.
	"""
	def _write(
		path: pathlib.Path,
		size: tuple[int, int] = (320, 200),
		color: tuple[int, int, int] = (40, 120, 200),
	) -> pathlib.Path:
		image = PIL.Image.new("RGB", size, color)
		image.save(path, format="JPEG")
		return path
	return _write
