# motorph/attendance/periods.py

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum

from motorph.errors import ConfigurationError

WEEKS_PER_MONTH = 4
HALVES_PER_MONTH = 2
FIRST_HALF_LAST_DAY = 15


class PayrollCycle(Enum):
    WEEKLY = 'weekly'
    FIRST_HALF = 'first_half'
    SECOND_HALF = 'second_half'


@dataclass(frozen=True)
class PayPeriod:
    """A slice of one calendar month used to select attendance entries.

    Weeks are 7-day blocks starting on the 1st; week 4 absorbs the days after
    the 28th so the four weeks cover the whole month. Halves split at the 15th.
    """
    year: int
    month: int
    cycle: PayrollCycle = PayrollCycle.WEEKLY
    week: int = None

    def __post_init__(self):
        if not isinstance(self.cycle, PayrollCycle):
            raise ConfigurationError(f"Unknown payroll cycle: {self.cycle!r}")
        if not isinstance(self.year, int) or self.year < 1:
            raise ConfigurationError(f"Invalid year: {self.year!r}")
        if not isinstance(self.month, int) or not 1 <= self.month <= 12:
            raise ConfigurationError("Month must be between 1 and 12")
        if self.cycle is PayrollCycle.WEEKLY:
            if not isinstance(self.week, int) or not 1 <= self.week <= WEEKS_PER_MONTH:
                raise ConfigurationError("Week must be between 1-4")
        elif self.week is not None:
            raise ConfigurationError("Week is only valid for a weekly payroll cycle")

    @classmethod
    def weekly(cls, year, month, week):
        return cls(year, month, PayrollCycle.WEEKLY, week)

    @classmethod
    def half_month(cls, year, month, first_half=True):
        cycle = PayrollCycle.FIRST_HALF if first_half else PayrollCycle.SECOND_HALF
        return cls(year, month, cycle)

    @property
    def periods_per_month(self):
        return WEEKS_PER_MONTH if self.cycle is PayrollCycle.WEEKLY else HALVES_PER_MONTH

    @property
    def start_date(self):
        if self.cycle is PayrollCycle.WEEKLY:
            return date(self.year, self.month, 1 + (self.week - 1) * 7)
        if self.cycle is PayrollCycle.FIRST_HALF:
            return date(self.year, self.month, 1)
        return date(self.year, self.month, FIRST_HALF_LAST_DAY + 1)

    @property
    def end_date(self):
        last_day = calendar.monthrange(self.year, self.month)[1]
        if self.cycle is PayrollCycle.WEEKLY:
            if self.week == WEEKS_PER_MONTH:
                return date(self.year, self.month, last_day)
            return date(self.year, self.month, self.week * 7)
        if self.cycle is PayrollCycle.FIRST_HALF:
            return date(self.year, self.month, FIRST_HALF_LAST_DAY)
        return date(self.year, self.month, last_day)

    def contains(self, day):
        return self.start_date <= day <= self.end_date

    __contains__ = contains

    def label(self):
        if self.cycle is PayrollCycle.WEEKLY:
            return f"{self.year}-{self.month:02d} week {self.week}"
        half = 'first half' if self.cycle is PayrollCycle.FIRST_HALF else 'second half'
        return f"{self.year}-{self.month:02d} {half}"

    def __str__(self):
        return self.label()
