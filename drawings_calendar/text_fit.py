"""
Largest-size-first text fitting against a fixed width.
"""

# local repo modules
import drawings_calendar as dcal
import drawings_calendar.config
import drawings_calendar.fonts


FontLadder = dcal.fonts.FontLadder
TextFit = dcal.config.TextFit

MIN_LEFT_MARGIN = dcal.config.MIN_LEFT_MARGIN


#============================================
def fit_text(
	text: str,
	starting_rank: int,
	max_width: float,
	ladder: FontLadder,
) -> TextFit | None:
	"""
	Find the largest ladder size at which centered text clears the margin.

	Sizes are tried from starting_rank toward the smallest face. The first
	size whose centered origin is greater than MIN_LEFT_MARGIN wins.

	Args:
		text: Text to fit.
		starting_rank: Ladder index to start from.
		max_width: Width of the area the text is centered in.
		ladder: Font ladder.

	Returns:
		TextFit with the chosen rank and x origin, or None when nothing fits.
	"""
	if not text:
		return None
	if starting_rank < 0:
		return None
	for rank in range(starting_rank, len(ladder)):
		measured_width = ladder.face(rank).getlength(text)
		origin_x = (max_width - measured_width) / 2.0
		if origin_x > MIN_LEFT_MARGIN:
			return TextFit(rank=rank, origin_x=origin_x)
	return None
