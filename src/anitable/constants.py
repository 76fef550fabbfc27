"""Constants used throughout the application."""

from datetime import date
from enum import Enum
from typing import Optional


DEFAULT_BASE_URL = "https://www.anissia.net/anitime"

# Wire formats
DATE_FORMAT = "%Y%m%d"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
EMPTY_DATE = "00000000"

# Endpoint paths and form parameter names
LIST_PATH = "/list"
CAPTION_PATH = "/cap"
LIST_PARAM = "w"
CAPTION_PARAM = "i"

DEFAULT_CONFIG_PATH = "data/config.yaml"


class DaySelector(str, Enum):
    """Schedule table selector (weekday or special category)."""

    SUNDAY = "sun"
    MONDAY = "mon"
    TUESDAY = "tue"
    WEDNESDAY = "wed"
    THURSDAY = "thu"
    FRIDAY = "fri"
    SATURDAY = "sat"
    ETC = "etc"
    NEW = "new"

    @property
    def code(self) -> int:
        """Integer sent as the `w` request parameter."""
        return DAY_CODES[self]

    @property
    def label(self) -> str:
        return DAY_LABELS[self]

    @property
    def is_weekday(self) -> bool:
        return self.code < 7

    @classmethod
    def from_code(cls, code: int) -> "DaySelector":
        """Look up a selector by its request code."""
        for day, value in DAY_CODES.items():
            if value == code:
                return day
        raise ValueError(f"Unknown day selector code: {code!r}")

    @classmethod
    def today(cls, today: Optional[date] = None) -> "DaySelector":
        """Selector for the given (or current local) date."""
        today = today or date.today()
        # date.weekday() is Monday=0, the service counts from Sunday
        return cls.from_code((today.weekday() + 1) % 7)


# Stable mapping, independent of declaration order above
DAY_CODES = {
    DaySelector.SUNDAY: 0,
    DaySelector.MONDAY: 1,
    DaySelector.TUESDAY: 2,
    DaySelector.WEDNESDAY: 3,
    DaySelector.THURSDAY: 4,
    DaySelector.FRIDAY: 5,
    DaySelector.SATURDAY: 6,
    DaySelector.ETC: 7,
    DaySelector.NEW: 8,
}

DAY_LABELS = {
    DaySelector.SUNDAY: "일",
    DaySelector.MONDAY: "월",
    DaySelector.TUESDAY: "화",
    DaySelector.WEDNESDAY: "수",
    DaySelector.THURSDAY: "목",
    DaySelector.FRIDAY: "금",
    DaySelector.SATURDAY: "토",
    DaySelector.ETC: "기타",
    DaySelector.NEW: "신작",
}

WEEKDAYS = [day for day in DaySelector if day.is_weekday]
