# motorph/payroll/cli.py

import click
from flask import current_app
from flask.cli import AppGroup

from motorph.attendance.periods import PayPeriod, PayrollCycle
from motorph.errors import PayrollError
from motorph.models.payslip import to_money
from .calculator import PayrollService

payroll_cli = AppGroup('payroll', help='Employee lookup and payroll calculations.')

RULE = '-' * 42

NET_LINES = (
    ('Total Hours', 'hours_worked'),
    ('Gross Wage', 'gross_pay'),
    None,
    ('SSS Deduction', 'sss_deduction'),
    ('Philhealth Deduction', 'philhealth_deduction'),
    ('Pag-Ibig Deduction', 'pagibig_deduction'),
    ('Late Deductions', 'late_deduction'),
    None,
    ('Total Deductions', 'total_deductions'),
    ('Taxable Income', 'taxable_income'),
    ('Withholding Tax', 'withholding_tax'),
    None,
    ('Net Wage', 'net_pay'),
)

GROSS_LINES = (
    ('Total Hours Worked', 'hours_worked'),
    ('Regular Pay', 'regular_pay'),
    ('Overtime Pay', 'overtime_pay'),
    ('Holiday Premium', 'holiday_premium'),
    ('Gross Wage', 'gross'),
)


def period_options(f):
    f = click.option('--week', type=click.IntRange(1, 4), help='Week of the month (weekly cycle).')(f)
    f = click.option('--cycle', type=click.Choice([c.value for c in PayrollCycle]),
                     default=PayrollCycle.WEEKLY.value, show_default=True)(f)
    f = click.option('--month', type=click.IntRange(1, 12), required=True)(f)
    f = click.option('--year', type=int, help='Defaults to PAYROLL_YEAR.')(f)
    return f


def _period(year, month, cycle, week):
    cycle = PayrollCycle(cycle)
    return PayPeriod(year or current_app.config['PAYROLL_YEAR'], month, cycle,
                     week if cycle is PayrollCycle.WEEKLY else None)


def _echo_lines(lines, values):
    for line in lines:
        if line is None:
            click.echo()
            continue
        label, key = line
        click.echo(f"{label}: {to_money(values[key])}")


def _echo_header(employee, title):
    click.echo(f"\n{title}:")
    click.echo(RULE)
    click.echo(f"Employee ID: {employee.employee_id}")
    click.echo(f"Employee Name: {employee.full_name}")
    click.echo(RULE)


@payroll_cli.command('employees')
@click.argument('employee_id', required=False)
def show_employees(employee_id):
    """List all employees, or show one employee's details."""
    directory = current_app.extensions['motorph'].employees
    if employee_id is None:
        click.echo(RULE)
        click.echo('|     Employee List     |')
        click.echo(RULE)
        for employee in directory.all():
            click.echo(f"{employee.employee_id:<15} {employee.last_name:<20} {employee.first_name:<20}")
        click.echo(RULE)
        return
    try:
        employee = directory.find(employee_id)
    except PayrollError as e:
        raise click.ClickException(str(e))
    click.echo(f"Employee Details for Employee ID {employee_id}:")
    click.echo(RULE)
    for key, value in employee.as_dict().items():
        click.echo(f"{key.replace('_', ' ').title()}: {value}")


@payroll_cli.command('holidays')
def show_holidays():
    """List the holidays and pay multipliers of the supported year."""
    calendar = current_app.extensions['motorph'].calendar
    click.echo(f"Holidays {calendar.year}:")
    click.echo(RULE)
    for holiday in calendar.holidays():
        multiplier = calendar.pay_multiplier(holiday.date)
        click.echo(f"{holiday.date.isoformat()}  {holiday.category.value:<18} x{multiplier}  {holiday.name}")
    click.echo(RULE)


@payroll_cli.command('gross')
@click.argument('employee_id')
@period_options
def gross_command(employee_id, year, month, cycle, week):
    """Show the gross wage breakdown for one pay period."""
    data = current_app.extensions['motorph']
    try:
        employee = data.employees.find(employee_id)
        period = _period(year, month, cycle, week)
        result = PayrollService(data).calculate_gross(employee_id, period)
    except PayrollError as e:
        raise click.ClickException(str(e))
    _echo_header(employee, period.label())
    _echo_lines(GROSS_LINES, result.rounded())


@payroll_cli.command('net')
@click.argument('employee_id')
@period_options
@click.option('--shift-start', default=None, help='Scheduled shift start (08:00, 09:00 or 10:00).')
def net_command(employee_id, year, month, cycle, week, shift_start):
    """Show the full payslip breakdown for one pay period."""
    data = current_app.extensions['motorph']
    shift = shift_start or current_app.config['DEFAULT_SHIFT_START']
    try:
        employee = data.employees.find(employee_id)
        period = _period(year, month, cycle, week)
        result = PayrollService(data).calculate_net(employee_id, period, shift)
    except PayrollError as e:
        raise click.ClickException(str(e))
    _echo_header(employee, period.label())
    _echo_lines(NET_LINES, result.rounded())
    click.echo(RULE)


@payroll_cli.command('monthly')
@click.argument('employee_id')
@click.option('--year', type=int, help='Defaults to PAYROLL_YEAR.')
@click.option('--month', type=click.IntRange(1, 12), required=True)
@click.option('--shift-start', default=None)
def monthly_command(employee_id, year, month, shift_start):
    """Show payslips for the first and second half of a month."""
    data = current_app.extensions['motorph']
    shift = shift_start or current_app.config['DEFAULT_SHIFT_START']
    year = year or current_app.config['PAYROLL_YEAR']
    service = PayrollService(data)
    try:
        employee = data.employees.find(employee_id)
        for first_half in (True, False):
            period = PayPeriod.half_month(year, month, first_half)
            result = service.calculate_net(employee_id, period, shift)
            _echo_header(employee, 'First Half of the Month' if first_half else 'Second Half of the Month')
            _echo_lines(NET_LINES, result.rounded())
            click.echo(RULE)
    except PayrollError as e:
        raise click.ClickException(str(e))
