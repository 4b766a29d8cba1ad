import pytest
from datetime import date, time
from decimal import Decimal

from motorph import create_app
from motorph.attendance.ledger import AttendanceLedger
from motorph.employee.directory import EmployeeDirectory
from motorph.models.records import AttendanceEntry, Employee
from motorph.payroll.holidays import HolidayCalendar
from motorph.reference import ReferenceData


def entry(employee_id, day, time_in, time_out):
    """Shorthand: entry('10001', '2024-06-10', '08:00', '17:00')."""
    h_in, m_in = (int(p) for p in time_in.split(':'))
    h_out, m_out = (int(p) for p in time_out.split(':'))
    return AttendanceEntry(employee_id, date.fromisoformat(day), time(h_in, m_in), time(h_out, m_out))


@pytest.fixture
def employees():
    return EmployeeDirectory([
        Employee('10001', 'Garcia', 'Manuel III', hourly_rate=Decimal('100')),
        Employee('10002', 'Lim', 'Antonio', hourly_rate=Decimal('357.14')),
        Employee('10009', 'Unpaid', 'Intern', hourly_rate=Decimal('0')),
    ])


@pytest.fixture
def make_reference(employees):
    """Builds ReferenceData around a synthetic attendance ledger."""
    def _make(entries=(), calendar=None):
        return ReferenceData(
            employees=employees,
            ledger=AttendanceLedger(entries),
            calendar=calendar or HolidayCalendar.philippines_2024(),
        )
    return _make


@pytest.fixture
def week_two_entries():
    # June 2024, week 2 covers the 8th to the 14th
    return [
        entry('10001', '2024-06-10', '08:00', '17:00'),
        entry('10001', '2024-06-11', '08:20', '16:20'),
        entry('10002', '2024-06-10', '09:00', '18:00'),
    ]


@pytest.fixture
def app(make_reference, week_two_entries):
    app = create_app('testing', reference_data=make_reference(week_two_entries))
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
