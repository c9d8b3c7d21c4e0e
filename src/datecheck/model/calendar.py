"""Proleptic Gregorian calendar helpers.

Everything here works over the full year range 1 through 9999 without
relying on the standard library's calendar functions, so results do not
depend on any platform limits.
"""

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Ordered to match Zeller's congruence, where 0 is Saturday.
WEEKDAY_NAMES = (
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Centurial years are leap years only when divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, not {month}.")


def days_in_month(month: int, year: int) -> int:
    """Number of days in the month, with February adjusted for leap years."""
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def month_name(month: int) -> str:
    """English name of a month numbered 1 through 12."""
    _check_month(month)
    return MONTH_NAMES[month - 1]


def day_of_week(day: int, month: int, year: int) -> str:
    """English weekday name for a date, computed with Zeller's congruence.

    January and February are treated as months 13 and 14 of the previous
    year. The caller is responsible for passing a real date.
    """
    if month < 3:
        month += 12
        year -= 1
    century, year_of_century = divmod(year, 100)
    index = (
        day
        + 13 * (month + 1) // 5
        + year_of_century
        + year_of_century // 4
        + century // 4
        + 5 * century
    ) % 7
    return WEEKDAY_NAMES[index]
