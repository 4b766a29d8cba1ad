# motorph/attendance/ledger.py

import logging
from decimal import Decimal

from motorph.models.records import AttendanceEntry
from motorph.sources import read_rows, parse_date, parse_employee_number, parse_time
from motorph.errors import DataIntegrityError

logger = logging.getLogger(__name__)

# Column headers of the attendance export
COL_EMPLOYEE = 'Employee #'
COL_DATE = 'Date'
COL_LOG_IN = 'Log In'
COL_LOG_OUT = 'Log Out'


def hours_worked(entry):
    return entry.hours_worked()


class AttendanceLedger:
    """Read-only collection of attendance entries, scanned linearly per query."""

    def __init__(self, entries=()):
        self._entries = tuple(entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def entries_for(self, employee_id, period=None):
        """Entries for one employee, optionally restricted to a pay period."""
        return [
            entry for entry in self._entries
            if entry.employee_id == employee_id
            and (period is None or period.contains(entry.date))
        ]

    def total_hours(self, employee_id, period):
        total = Decimal('0')
        for entry in self.entries_for(employee_id, period):
            total += hours_worked(entry)
        return total

    def __repr__(self):
        return f'<AttendanceLedger {len(self._entries)} entries>'


def load_attendance(path):
    """Builds a ledger from an attendance export.

    Rows missing a clock-in or clock-out are skipped here so aggregation never
    has to deal with them.
    """
    entries = []
    skipped = 0
    for line_no, row in enumerate(read_rows(path), start=2):
        employee_id = parse_employee_number(row.get(COL_EMPLOYEE, ''))
        if not employee_id:
            skipped += 1
            logger.warning('Skipping attendance row %s with no employee number', line_no)
            continue
        work_date = parse_date(row.get(COL_DATE, ''))
        if work_date is None:
            raise DataIntegrityError(f"Unreadable date on attendance row {line_no}: {row.get(COL_DATE)!r}")
        time_in = parse_time(row.get(COL_LOG_IN, ''))
        time_out = parse_time(row.get(COL_LOG_OUT, ''))
        if time_in is None or time_out is None:
            skipped += 1
            logger.warning('Skipping attendance row %s with missing time values: %s', line_no, employee_id)
            continue
        entries.append(AttendanceEntry(employee_id, work_date, time_in, time_out))

    logger.info('Loaded %d attendance records (%d skipped) from %s', len(entries), skipped, path)
    return AttendanceLedger(entries)
