# motorph/payroll/holidays.py

from datetime import date
from decimal import Decimal

from motorph.errors import ConfigurationError
from motorph.models.records import HolidayEntry, HolidayCategory

# --- PAY MULTIPLIERS ---
# Regular holidays pay 200%, special non-working days 130%
REGULAR_HOLIDAY_MULTIPLIER = Decimal('2.0')
SPECIAL_DAY_MULTIPLIER = Decimal('1.3')
ORDINARY_DAY_MULTIPLIER = Decimal('1.0')

MULTIPLIERS = {
    HolidayCategory.REGULAR: REGULAR_HOLIDAY_MULTIPLIER,
    HolidayCategory.SPECIAL_NON_WORKING: SPECIAL_DAY_MULTIPLIER,
}

# --- PHILIPPINE HOLIDAYS 2024 ---
PH_HOLIDAYS_2024 = (
    HolidayEntry(date(2024, 1, 1), HolidayCategory.REGULAR, "New Year's Day"),
    HolidayEntry(date(2024, 4, 9), HolidayCategory.REGULAR, 'Araw ng Kagitingan'),
    HolidayEntry(date(2024, 4, 10), HolidayCategory.REGULAR, "Eid'l Fitr"),
    HolidayEntry(date(2024, 5, 1), HolidayCategory.REGULAR, 'Labor Day'),
    HolidayEntry(date(2024, 6, 12), HolidayCategory.REGULAR, 'Independence Day'),
    HolidayEntry(date(2024, 6, 17), HolidayCategory.REGULAR, "Eid'l Adha"),
    HolidayEntry(date(2024, 8, 26), HolidayCategory.REGULAR, 'National Heroes Day'),
    HolidayEntry(date(2024, 11, 30), HolidayCategory.REGULAR, 'Bonifacio Day'),
    HolidayEntry(date(2024, 12, 25), HolidayCategory.REGULAR, 'Christmas Day'),
    HolidayEntry(date(2024, 12, 30), HolidayCategory.REGULAR, 'Rizal Day'),
    HolidayEntry(date(2024, 2, 10), HolidayCategory.SPECIAL_NON_WORKING, 'Chinese New Year'),
    HolidayEntry(date(2024, 3, 28), HolidayCategory.SPECIAL_NON_WORKING, 'Maundy Thursday'),
    HolidayEntry(date(2024, 3, 29), HolidayCategory.SPECIAL_NON_WORKING, 'Good Friday'),
    HolidayEntry(date(2024, 3, 30), HolidayCategory.SPECIAL_NON_WORKING, 'Black Saturday'),
    HolidayEntry(date(2024, 8, 21), HolidayCategory.SPECIAL_NON_WORKING, 'Ninoy Aquino Day'),
    HolidayEntry(date(2024, 11, 1), HolidayCategory.SPECIAL_NON_WORKING, "All Saints' Day"),
    HolidayEntry(date(2024, 12, 8), HolidayCategory.SPECIAL_NON_WORKING, 'Feast of the Immaculate Conception'),
    HolidayEntry(date(2024, 12, 31), HolidayCategory.SPECIAL_NON_WORKING, "New Year's Eve"),
)


class HolidayCalendar:
    """Fixed holiday schedule for a single tax year."""

    def __init__(self, year, holidays=(), multipliers=None):
        self.year = year
        self.multipliers = dict(MULTIPLIERS if multipliers is None else multipliers)
        self._by_date = {}
        for holiday in holidays:
            if holiday.date.year != year:
                raise ConfigurationError(f"Holiday {holiday.name!r} on {holiday.date} is outside {year}")
            self._by_date[holiday.date] = holiday

    @classmethod
    def philippines_2024(cls):
        return cls(2024, PH_HOLIDAYS_2024)

    def classify(self, day):
        """Returns the HolidayCategory for the date, or None on an ordinary day."""
        holiday = self._by_date.get(day)
        return holiday.category if holiday else None

    def is_holiday(self, day):
        return day in self._by_date

    def pay_multiplier(self, day):
        return self.multipliers.get(self.classify(day), ORDINARY_DAY_MULTIPLIER)

    def holidays(self):
        return sorted(self._by_date.values(), key=lambda h: h.date)

    def __repr__(self):
        return f'<HolidayCalendar {self.year} ({len(self._by_date)} days)>'
