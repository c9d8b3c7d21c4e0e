"""Decide whether a day, month and year denote a real calendar date.

Two entry points are provided. `validate_components` takes the day, month and
year as separate strings, exactly as typed into three input fields.
`validate_free_text` takes a single string in one of the formats listed in
`DATE_FORMATS`, pulls the three components out of it and hands them to
`validate_components`.

Both functions always return a `ValidationResult`. Bad input is an expected
outcome, so nothing in this module raises for it.

Slash-separated dates such as 03/04/2024 are ambiguous between day-first and
month-first. They are always read day-first (3 April 2024). The locale is
never consulted.
"""

import dataclasses
import datetime
import enum
import re
from typing import Any, Optional

from datecheck.model import calendar


MIN_YEAR = 1
MAX_YEAR = 9999

_INTEGER_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class ResultKind(enum.StrEnum):
    """Severity of a validation outcome, used to pick a display style."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class ResultCode(enum.StrEnum):
    """Reason for a validation outcome."""

    VALID = "valid"
    MISSING_INPUT = "missing_input"
    NOT_A_NUMBER = "not_a_number"
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    INVALID_COMBINATION = "invalid_combination"
    UNRECOGNIZED_FORMAT = "unrecognized_format"


@dataclasses.dataclass(frozen=True)
class DateInfo:
    """Facts about a valid date."""

    day_of_week: str
    is_leap_year: bool
    days_in_month: int


@dataclasses.dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation call.

    date_info is set if and only if is_valid is True.
    """

    is_valid: bool
    message: str
    kind: ResultKind
    code: ResultCode
    date_info: Optional[DateInfo] = None

    @classmethod
    def failure(
        cls, message: str, code: ResultCode, kind: ResultKind = ResultKind.ERROR
    ) -> "ValidationResult":
        """Build a result for a date that did not validate."""
        return cls(is_valid=False, message=message, kind=kind, code=code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary with camelCase keys."""
        result: dict[str, Any] = {
            "isValid": self.is_valid,
            "message": self.message,
            "type": self.kind.value,
            "code": self.code.value,
        }
        if self.date_info is not None:
            result["dateInfo"] = {
                "dayOfWeek": self.date_info.day_of_week,
                "isLeapYear": self.date_info.is_leap_year,
                "daysInMonth": self.date_info.days_in_month,
            }
        return result


@dataclasses.dataclass(frozen=True)
class DateFormat:
    """An accepted free-text layout and the order of its components."""

    name: str
    pattern: re.Pattern[str]
    order: tuple[str, str, str]

    def extract(self, text: str) -> Optional[dict[str, str]]:
        """Return day, month and year text if the whole string matches."""
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        return dict(zip(self.order, match.groups()))


# Tried in order; the first match wins.
DATE_FORMATS = (
    DateFormat(
        "DD/MM/YYYY",
        re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})"),
        ("day", "month", "year"),
    ),
    DateFormat(
        "YYYY-MM-DD",
        re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})"),
        ("year", "month", "day"),
    ),
    DateFormat(
        "DD-MM-YYYY",
        re.compile(r"([0-9]{1,2})-([0-9]{1,2})-([0-9]{4})"),
        ("day", "month", "year"),
    ),
)


def parse_integer(text: str) -> Optional[int]:
    """Read the integer at the start of field text, or None if there is none.

    Leading whitespace and a sign are allowed. Anything after the leading
    ASCII digits is ignored, so "12abc" reads as 12 and "1.5" as 1.
    """
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def validate_components(day: str, month: str, year: str) -> ValidationResult:
    """Validate a date given as separate day, month and year text."""
    if not day or not month or not year:
        return ValidationResult.failure(
            "Please fill in all date fields",
            ResultCode.MISSING_INPUT,
            kind=ResultKind.INFO,
        )

    day_num = parse_integer(day)
    month_num = parse_integer(month)
    year_num = parse_integer(year)
    if day_num is None or month_num is None or year_num is None:
        return ValidationResult.failure(
            "Please enter valid numbers", ResultCode.NOT_A_NUMBER
        )

    if not MIN_YEAR <= year_num <= MAX_YEAR:
        return ValidationResult.failure(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
            ResultCode.YEAR_OUT_OF_RANGE,
        )
    if not 1 <= month_num <= 12:
        return ValidationResult.failure(
            "Month must be between 1 and 12", ResultCode.MONTH_OUT_OF_RANGE
        )

    leap_year = calendar.is_leap_year(year_num)
    max_days = calendar.days_in_month(month_num, year_num)
    if not 1 <= day_num <= max_days:
        return ValidationResult.failure(
            f"Day must be between 1 and {max_days} for "
            f"{calendar.month_name(month_num)} {year_num}",
            ResultCode.DAY_OUT_OF_RANGE,
        )

    # Duplicates the range check above. Kept as a second opinion from datetime.
    if not _is_real_date(day_num, month_num, year_num):
        return ValidationResult.failure(
            "Invalid date combination", ResultCode.INVALID_COMBINATION
        )

    weekday = calendar.day_of_week(day_num, month_num, year_num)
    return ValidationResult(
        is_valid=True,
        message=f"Valid date! This is a {weekday}.",
        kind=ResultKind.SUCCESS,
        code=ResultCode.VALID,
        date_info=DateInfo(
            day_of_week=weekday,
            is_leap_year=leap_year,
            days_in_month=max_days,
        ),
    )


def _is_real_date(day: int, month: int, year: int) -> bool:
    """Check that datetime builds the same date without adjusting it."""
    try:
        date = datetime.date(year, month, day)
    except ValueError:
        return False
    return (date.year, date.month, date.day) == (year, month, day)


def validate_free_text(text: str) -> ValidationResult:
    """Validate a date typed as a single string."""
    if not text:
        return ValidationResult.failure(
            "Please enter a date", ResultCode.MISSING_INPUT, kind=ResultKind.INFO
        )
    for date_format in DATE_FORMATS:
        components = date_format.extract(text)
        if components is not None:
            return validate_components(**components)
    return ValidationResult.failure(
        "Invalid date format. Try DD/MM/YYYY, MM/DD/YYYY, or YYYY-MM-DD",
        ResultCode.UNRECOGNIZED_FORMAT,
    )
