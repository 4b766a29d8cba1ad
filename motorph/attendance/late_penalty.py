# motorph/attendance/late_penalty.py

import logging
from datetime import datetime, time, timedelta
from decimal import Decimal

from motorph.errors import ConfigurationError
from motorph.validation import require_employee_id, require_positive_rate, require_period

logger = logging.getLogger(__name__)

GRACE_PERIOD_MINUTES = 15
SHIFT_8AM = time(8, 0)
SHIFT_9AM = time(9, 0)
SHIFT_10AM = time(10, 0)
PERMITTED_SHIFT_STARTS = (SHIFT_8AM, SHIFT_9AM, SHIFT_10AM)


def parse_shift_start(value):
    """Accepts a time or an "H:MM" string and checks it against the permitted shifts."""
    if isinstance(value, time):
        shift = value
    else:
        try:
            shift = datetime.strptime(str(value).strip(), '%H:%M').time()
        except ValueError:
            raise ConfigurationError(f"Invalid shift start time: {value!r}") from None
    if shift not in PERMITTED_SHIFT_STARTS:
        raise ConfigurationError("Shift must be exactly 8:00, 9:00, or 10:00 AM")
    return shift


class LatePenaltyCalculator:
    """Deducts a per-minute share of the hourly rate for clock-ins past the grace period."""

    def __init__(self, ledger, employee_id, period, hourly_rate,
                 shift_start=SHIFT_8AM, grace_period_minutes=GRACE_PERIOD_MINUTES,
                 supported_year=None):
        self.employee_id = require_employee_id(employee_id)
        self.period = require_period(period, supported_year)
        self.hourly_rate = require_positive_rate(hourly_rate)
        self.shift_start = parse_shift_start(shift_start)
        self.grace_period_minutes = grace_period_minutes
        self.ledger = ledger

    @property
    def late_threshold(self):
        start = datetime.combine(datetime.min.date(), self.shift_start)
        return (start + timedelta(minutes=self.grace_period_minutes)).time()

    def minutes_late(self, entry):
        """Whole minutes between the grace threshold and the clock-in, or 0.

        Night-shift clock-ins are not measured against a day shift start.
        """
        if entry.is_night_shift:
            return 0
        threshold = self.late_threshold
        if entry.time_in <= threshold:
            return 0
        late = datetime.combine(entry.date, entry.time_in) - datetime.combine(entry.date, threshold)
        return int(late.total_seconds()) // 60

    def calculate(self):
        per_minute = self.hourly_rate / Decimal(60)
        total = Decimal('0')
        for entry in self.ledger.entries_for(self.employee_id, self.period):
            deduction = per_minute * self.minutes_late(entry)
            total += max(Decimal('0'), deduction)
        logger.debug('Late deduction for %s in %s: %s', self.employee_id, self.period, total)
        return total
