import pathlib

import pytest

import drawings_calendar.cli as cli
import drawings_calendar.errors
import drawings_calendar.fonts


#============================================
def test_parse_args_defaults() -> None:
	args = cli.parse_args([])
	assert args.font_name == "Verdana"
	assert args.folder == "."


#============================================
def test_parse_args_options() -> None:
	args = cli.parse_args(["--font", "Arial", "--folder", "/photos"])
	assert args.font_name == "Arial"
	assert args.folder == "/photos"
	args = cli.parse_args(["-f", "Georgia", "-d", "pics"])
	assert args.font_name == "Georgia"
	assert args.folder == "pics"


#============================================
def test_missing_font_exits_nonzero(tmp_path: pathlib.Path) -> None:
	with pytest.raises(SystemExit) as info:
		cli.main(["--font", "NoSuchFontFace-xyz", "--folder", str(tmp_path)])
	assert info.value.code != 0
	assert "NoSuchFontFace-xyz" in str(info.value.code)
	assert not (tmp_path / "out").exists()


#============================================
def test_missing_folder_exits_nonzero(tmp_path: pathlib.Path, font_ladder, monkeypatch) -> None:
	monkeypatch.setattr(drawings_calendar.fonts, "load_font_ladder", lambda font_name: font_ladder)
	with pytest.raises(SystemExit) as info:
		cli.main(["--folder", str(tmp_path / "missing")])
	assert info.value.code != 0


#============================================
def test_run_pipeline_renders_folder(tmp_path: pathlib.Path, font_ladder, write_jpeg, monkeypatch) -> None:
	monkeypatch.setattr(drawings_calendar.fonts, "load_font_ladder", lambda font_name: font_ladder)
	write_jpeg(tmp_path / "2023-07-04-Summer Trip.jpg")
	args = cli.parse_args(["--folder", str(tmp_path)])
	result = cli.run_pipeline(args)
	assert result.saved == ["2023-07-04-Summer Trip.jpg"]
	assert (tmp_path / "out" / "2023-07-04-Summer Trip.jpg").is_file()


#============================================
def test_font_loader_reports_bad_font_file(tmp_path: pathlib.Path) -> None:
	(tmp_path / "Broken.ttf").write_bytes(b"not a font")
	with pytest.raises(drawings_calendar.errors.FontLoadError):
		drawings_calendar.fonts.load_font_ladder("Broken", font_dir=str(tmp_path))


#============================================
def test_font_loader_builds_full_ladder() -> None:
	"""
	Load a system TrueType font when one is available.
	"""
	candidates = [
		pathlib.Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
		pathlib.Path("/Library/Fonts/Verdana.ttf"),
	]
	found = [path for path in candidates if path.exists()]
	if not found:
		return
	font_path = found[0]
	ladder = drawings_calendar.fonts.load_font_ladder(font_path.stem, font_dir=str(font_path.parent))
	assert len(ladder) == 8
	assert ladder.sizes == (40, 36, 32, 28, 24, 20, 16, 12)
	assert ladder.face(0).size == 40
	assert ladder.face(7).size == 12
