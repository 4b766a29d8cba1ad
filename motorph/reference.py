# motorph/reference.py

import logging
from dataclasses import dataclass, field

from flask import current_app

from motorph.attendance.ledger import AttendanceLedger, load_attendance
from motorph.employee.directory import EmployeeDirectory, load_employees
from motorph.payroll.brackets import ContributionTable, TaxTable
from motorph.payroll.calculator import PayrollService
from motorph.payroll.holidays import HolidayCalendar
from motorph.payroll import tables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceData:
    """Everything a calculation reads. Built once and never mutated."""
    employees: EmployeeDirectory
    ledger: AttendanceLedger
    calendar: HolidayCalendar = field(default_factory=HolidayCalendar.philippines_2024)
    sss: ContributionTable = field(default_factory=tables.sss_table)
    philhealth: ContributionTable = field(default_factory=tables.philhealth_table)
    pagibig: ContributionTable = field(default_factory=tables.pagibig_table)
    tax_table: TaxTable = field(default_factory=tables.withholding_tax_table)


def build_reference_data(config):
    """Loads employees, attendance and contribution tables named in a Flask config mapping."""
    employees = load_employees(config['EMPLOYEE_DATA_FILE'])
    ledger = load_attendance(config['ATTENDANCE_DATA_FILE'])
    calendar = HolidayCalendar.philippines_2024()
    if config.get('PAYROLL_YEAR', calendar.year) != calendar.year:
        logger.warning('PAYROLL_YEAR %s has no holiday schedule; using %s',
                       config.get('PAYROLL_YEAR'), calendar.year)
    return ReferenceData(
        employees=employees,
        ledger=ledger,
        calendar=calendar,
        sss=tables.sss_table(config.get('SSS_TABLE_FILE')),
        philhealth=tables.philhealth_table(config.get('PHILHEALTH_TABLE_FILE')),
        pagibig=tables.pagibig_table(config.get('PAGIBIG_TABLE_FILE')),
        tax_table=tables.withholding_tax_table(),
    )


class PayrollReference:
    """Flask extension holding the reference data loaded at startup.

    The data lives in ``app.extensions`` so one extension object can serve
    several applications.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app, data=None):
        if data is None:
            data = build_reference_data(app.config)
        app.extensions['motorph'] = data
        app.logger.info('Payroll reference data ready: %r, %r', data.employees, data.ledger)

    @property
    def data(self):
        return current_app.extensions['motorph']

    @property
    def service(self):
        return PayrollService(self.data)
