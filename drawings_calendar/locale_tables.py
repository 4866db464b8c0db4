"""
Weekday and month names for the calendar text.
"""

# Standard Library
import dataclasses
import datetime


@dataclasses.dataclass(frozen=True)
class LocaleTable:
	# Monday first, same order as date.weekday()
	weekday_names: tuple[str, ...]
	# January first
	month_names: tuple[str, ...]

	#============================================
	def weekday_name(self, day: datetime.date) -> str:
		"""
		Look up the weekday name for a date.

		Args:
			day: Calendar date.

		Returns:
			Localized weekday name.
		"""
		return self.weekday_names[day.weekday()]

	#============================================
	def month_name(self, day: datetime.date) -> str:
		"""
		Look up the month name for a date.

		Args:
			day: Calendar date.

		Returns:
			Localized month name.
		"""
		return self.month_names[day.month - 1]


DUTCH_LOCALE = LocaleTable(
	weekday_names=(
		"maandag",
		"dinsdag",
		"woensdag",
		"donderdag",
		"vrijdag",
		"zaterdag",
		"zondag",
	),
	month_names=(
		"januari",
		"februari",
		"maart",
		"april",
		"mei",
		"juni",
		"juli",
		"augustus",
		"september",
		"oktober",
		"november",
		"december",
	),
)
