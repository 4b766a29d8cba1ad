# motorph/models/records.py

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum

# Night work window used for the overtime rate (10:00 PM - 6:00 AM)
NIGHT_SHIFT_START = time(22, 0)
NIGHT_SHIFT_END = time(6, 0)


@dataclass(frozen=True)
class Employee:
    """One row of the employee master sheet."""
    employee_id: str
    last_name: str
    first_name: str
    hourly_rate: Decimal
    birthday: str = ''
    address: str = ''
    phone_number: str = ''
    sss_number: str = ''
    philhealth_number: str = ''
    tin_number: str = ''
    pagibig_number: str = ''
    status: str = ''
    position: str = ''
    immediate_supervisor: str = ''
    basic_salary: Decimal = Decimal('0')
    rice_subsidy: Decimal = Decimal('0')
    phone_allowance: Decimal = Decimal('0')
    clothing_allowance: Decimal = Decimal('0')
    gross_semi_monthly_rate: Decimal = Decimal('0')

    @property
    def full_name(self):
        return f"{self.last_name}, {self.first_name}"

    def summary(self):
        return {
            'employee_id': self.employee_id,
            'last_name': self.last_name,
            'first_name': self.first_name,
        }

    def as_dict(self):
        return {
            'employee_id': self.employee_id,
            'last_name': self.last_name,
            'first_name': self.first_name,
            'birthday': self.birthday,
            'address': self.address,
            'phone_number': self.phone_number,
            'sss_number': self.sss_number,
            'philhealth_number': self.philhealth_number,
            'tin_number': self.tin_number,
            'pagibig_number': self.pagibig_number,
            'status': self.status,
            'position': self.position,
            'immediate_supervisor': self.immediate_supervisor,
            'basic_salary': str(self.basic_salary),
            'rice_subsidy': str(self.rice_subsidy),
            'phone_allowance': str(self.phone_allowance),
            'clothing_allowance': str(self.clothing_allowance),
            'gross_semi_monthly_rate': str(self.gross_semi_monthly_rate),
            'hourly_rate': str(self.hourly_rate),
        }

    def __repr__(self):
        return f'<Employee {self.employee_id}>'


@dataclass(frozen=True)
class AttendanceEntry:
    """A single day's clock-in/clock-out pair. Both times are always present."""
    employee_id: str
    date: date
    time_in: time
    time_out: time

    def hours_worked(self):
        """Decimal hours between clock-in and clock-out, counted in whole minutes.

        A clock-out earlier than the clock-in is an overnight shift, so 24 hours
        are added to the clock-out before subtracting.
        """
        start = datetime.combine(self.date, self.time_in)
        end = datetime.combine(self.date, self.time_out)
        if end < start:
            end += timedelta(hours=24)
        minutes = int((end - start).total_seconds()) // 60
        return Decimal(minutes) / Decimal(60)

    @property
    def is_night_shift(self):
        return self.time_in >= NIGHT_SHIFT_START or self.time_in < NIGHT_SHIFT_END

    def __repr__(self):
        return f'<Attendance {self.employee_id} on {self.date} {self.time_in}-{self.time_out}>'


class HolidayCategory(Enum):
    REGULAR = 'Regular'
    SPECIAL_NON_WORKING = 'SpecialNonWorking'


@dataclass(frozen=True)
class HolidayEntry:
    date: date
    category: HolidayCategory
    name: str = ''

    def __repr__(self):
        return f'<Holiday {self.name} on {self.date}>'
