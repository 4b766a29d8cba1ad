# motorph/payroll/calculator.py

import logging
from decimal import Decimal

from motorph.attendance.late_penalty import LatePenaltyCalculator, SHIFT_8AM, parse_shift_start
from motorph.attendance.ledger import hours_worked as hours_worked_for
from motorph.errors import DataIntegrityError
from motorph.models.payslip import GrossResult, PayrollResult
from motorph.validation import require_employee_id, require_positive_rate, require_period

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
STANDARD_HOURS_PER_DAY = Decimal('8')
OVERTIME_MULTIPLIER = Decimal('1.25')
NIGHT_SHIFT_OVERTIME_MULTIPLIER = Decimal('1.10')
# Highest premium a day can legitimately earn, as a share of base pay
PREMIUM_SANITY_MULTIPLIER = Decimal('1.3')


def overtime_multiplier(entry):
    return NIGHT_SHIFT_OVERTIME_MULTIPLIER if entry.is_night_shift else OVERTIME_MULTIPLIER


def split_daily_hours(daily_hours):
    regular = min(daily_hours, STANDARD_HOURS_PER_DAY)
    overtime = max(ZERO, daily_hours - STANDARD_HOURS_PER_DAY)
    return regular, overtime


# --- GROSS WAGE ---

class GrossWageCalculator:
    """Regular, overtime and holiday pay for one employee over one pay period."""

    def __init__(self, reference, employee_id, period):
        self.reference = reference
        self.employee_id = require_employee_id(employee_id)
        self.period = require_period(period, reference.calendar.year)

    def calculate(self):
        employee = self.reference.employees.find(self.employee_id)
        rate = require_positive_rate(employee.hourly_rate)
        calendar = self.reference.calendar

        hours_worked = regular_hours = overtime_hours = ZERO
        regular_pay = overtime_pay = holiday_premium = ZERO

        for entry in self.reference.ledger.entries_for(self.employee_id, self.period):
            daily_hours = hours_worked_for(entry)
            regular_hrs, overtime_hrs = split_daily_hours(daily_hours)
            ot_rate = rate * overtime_multiplier(entry)

            if calendar.is_holiday(entry.date):
                multiplier = calendar.pay_multiplier(entry.date)
                premium_rate = (multiplier - 1) * rate
                regular_pay += regular_hrs * rate * multiplier
                overtime_pay += overtime_hrs * ot_rate + overtime_hrs * premium_rate
                holiday_premium += premium_rate * (regular_hrs + overtime_hrs)
            else:
                regular_pay += regular_hrs * rate
                overtime_pay += overtime_hrs * ot_rate

            hours_worked += daily_hours
            regular_hours += regular_hrs
            overtime_hours += overtime_hrs

        if hours_worked < 0:
            raise DataIntegrityError(
                f"Invalid hours worked for Employee ID {self.employee_id}: {hours_worked}")

        premium_ceiling = (regular_hours + overtime_hours) * rate * PREMIUM_SANITY_MULTIPLIER
        if holiday_premium > premium_ceiling:
            raise DataIntegrityError(
                f"Holiday premium {holiday_premium} exceeds the ceiling {premium_ceiling} "
                f"for Employee ID {self.employee_id} in {self.period}")

        gross = regular_pay + overtime_pay
        logger.debug('Gross for %s in %s: %s over %s hours', self.employee_id, self.period, gross, hours_worked)
        return GrossResult(
            hourly_rate=rate,
            hours_worked=hours_worked,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            holiday_premium=holiday_premium,
            gross=gross,
        )


# --- STATUTORY DEDUCTIONS & TAX ---

def statutory_deductions(reference, gross, period):
    """SSS, PhilHealth and Pag-IBIG shares for the period.

    Each table gives a monthly share for a monthly compensation, so the period
    gross is scaled up to a month for the lookup and the share is split evenly
    across the sub-periods.
    """
    divisor = Decimal(period.periods_per_month)
    monthly_gross = gross * divisor
    return (
        reference.sss.contribution(monthly_gross) / divisor,
        reference.philhealth.contribution(monthly_gross) / divisor,
        reference.pagibig.contribution(monthly_gross) / divisor,
    )


def withholding_tax(reference, taxable_income):
    return reference.tax_table.tax(taxable_income)


# --- NET WAGE ---

class NetWageCalculator:
    """Runs the whole pipeline for one employee and period and returns a PayrollResult.

    Deductions are always settled before the tax, since taxable income is gross
    less every deduction including the late penalty.
    """

    def __init__(self, reference, employee_id, period, shift_start=SHIFT_8AM):
        self.reference = reference
        self.employee_id = require_employee_id(employee_id)
        self.period = require_period(period, reference.calendar.year)
        self.shift_start = parse_shift_start(shift_start)

    def calculate(self):
        gross_result = GrossWageCalculator(self.reference, self.employee_id, self.period).calculate()
        return self.from_gross(gross_result)

    def from_gross(self, gross_result):
        gross = gross_result.gross
        if gross < 0 or gross_result.hours_worked < 0:
            raise DataIntegrityError(f"Negative gross or hours for Employee ID {self.employee_id}")

        sss, philhealth, pagibig = statutory_deductions(self.reference, gross, self.period)
        late = LatePenaltyCalculator(
            self.reference.ledger,
            self.employee_id,
            self.period,
            gross_result.hourly_rate,
            shift_start=self.shift_start,
            supported_year=self.reference.calendar.year,
        ).calculate()

        total_deductions = sss + philhealth + pagibig + late
        taxable_income = gross - total_deductions
        tax = withholding_tax(self.reference, taxable_income)
        net_pay = gross - total_deductions - tax

        return PayrollResult(
            hours_worked=gross_result.hours_worked,
            regular_pay=gross_result.regular_pay,
            overtime_pay=gross_result.overtime_pay,
            holiday_premium=gross_result.holiday_premium,
            gross_pay=gross,
            sss_deduction=sss,
            philhealth_deduction=philhealth,
            pagibig_deduction=pagibig,
            late_deduction=late,
            total_deductions=total_deductions,
            taxable_income=taxable_income,
            withholding_tax=tax,
            net_pay=net_pay,
        )


class PayrollService:
    """Entry points used by the HTTP and CLI layers."""

    def __init__(self, reference):
        self.reference = reference

    def calculate_gross(self, employee_id, period):
        return GrossWageCalculator(self.reference, employee_id, period).calculate()

    def calculate_net(self, employee_id, period, shift_start=SHIFT_8AM):
        return NetWageCalculator(self.reference, employee_id, period, shift_start).calculate()
