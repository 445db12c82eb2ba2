"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import DeviceType

# date.weekday() numbering (Monday=0): Tuesday, Wednesday, Friday.
# Read with Sunday=0 numbering the same indices mean Monday, Tuesday, Thursday;
# set SCHEDULED_BREAK_WEEKDAYS=0,1,3 to run that schedule.
SCHEDULED_BREAK_WEEKDAYS = (1, 2, 4)
SCHEDULED_BREAK_MINUTES = 120

STANDARD_DAY_MINUTES = 8 * 60

DEFAULT_DEVICE = DeviceType.TABLET
DEFAULT_LOCATION = "Zeiterfassungsterminal"
DEFAULT_EMPLOYEE_NAME = "Teammitglied"
DEFAULT_TIMEZONE = "Europe/Berlin"

RECENT_DAYS = 7

WEEKDAY_NAMES = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")
MONTH_NAMES = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)
