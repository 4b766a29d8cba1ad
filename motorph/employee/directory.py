# motorph/employee/directory.py

import logging
from decimal import Decimal, InvalidOperation

from motorph.errors import NotFoundError
from motorph.models.records import Employee
from motorph.sources import parse_employee_number, read_rows

logger = logging.getLogger(__name__)

# Column headers of the employee master sheet, in sheet order
EMPLOYEE_COLUMNS = {
    'employee_id': 'Employee #',
    'last_name': 'Last Name',
    'first_name': 'First Name',
    'birthday': 'Birthday',
    'address': 'Address',
    'phone_number': 'Phone Number',
    'sss_number': 'SSS #',
    'philhealth_number': 'Philhealth #',
    'tin_number': 'TIN #',
    'pagibig_number': 'Pag-ibig #',
    'status': 'Status',
    'position': 'Position',
    'immediate_supervisor': 'Immediate Supervisor',
    'basic_salary': 'Basic Salary',
    'rice_subsidy': 'Rice Subsidy',
    'phone_allowance': 'Phone Allowance',
    'clothing_allowance': 'Clothing Allowance',
    'gross_semi_monthly_rate': 'Gross Semi-monthly Rate',
    'hourly_rate': 'Hourly Rate',
}
MONEY_FIELDS = ('basic_salary', 'rice_subsidy', 'phone_allowance', 'clothing_allowance',
                'gross_semi_monthly_rate', 'hourly_rate')


def parse_money(value):
    text = str(value).replace(',', '').strip()
    try:
        amount = Decimal(text)
    except InvalidOperation:
        logger.warning('Unreadable amount %r; using 0', value)
        return Decimal('0')
    return amount if amount.is_finite() else Decimal('0')


def employee_from_row(row):
    values = {field: row.get(column, '') for field, column in EMPLOYEE_COLUMNS.items()}
    values = {field: (v if isinstance(v, str) else str(v)) for field, v in values.items()}
    values['employee_id'] = parse_employee_number(values['employee_id'])
    for field in MONEY_FIELDS:
        values[field] = parse_money(values[field])
    return Employee(**values)


class EmployeeDirectory:
    """Read-only employee lookup keyed by employee number."""

    def __init__(self, employees=()):
        self._employees = {}
        for employee in employees:
            self._employees[employee.employee_id] = employee

    def find(self, employee_id):
        """Returns the employee or raises NotFoundError."""
        employee = self._employees.get(str(employee_id).strip())
        if employee is None:
            raise NotFoundError(f"Employee ID {employee_id} not found.")
        return employee

    def all(self):
        return list(self._employees.values())

    def __len__(self):
        return len(self._employees)

    def __repr__(self):
        return f'<EmployeeDirectory {len(self._employees)} employees>'


def load_employees(path):
    employees = []
    for line_no, row in enumerate(read_rows(path), start=2):
        if not str(row.get(EMPLOYEE_COLUMNS['employee_id'], '')).strip():
            logger.warning('Skipping employee row %s with no employee number', line_no)
            continue
        employees.append(employee_from_row(row))
    logger.info('Loaded %d employees from %s', len(employees), path)
    return EmployeeDirectory(employees)
