# motorph/models/payslip.py

from dataclasses import dataclass, fields
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal('0.01')


def to_money(value):
    """Rounds a full-precision amount for presentation only."""
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class _Presentable:

    def rounded(self):
        return {f.name: to_money(getattr(self, f.name)) for f in fields(self)}

    def as_dict(self):
        """JSON-friendly view with every amount rounded to two places."""
        return {name: str(value) for name, value in self.rounded().items()}


@dataclass(frozen=True)
class GrossResult(_Presentable):
    hourly_rate: Decimal
    hours_worked: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    holiday_premium: Decimal
    gross: Decimal


@dataclass(frozen=True)
class PayrollResult(_Presentable):
    """Full payslip breakdown for one employee and one pay period."""
    hours_worked: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    holiday_premium: Decimal
    gross_pay: Decimal
    sss_deduction: Decimal
    philhealth_deduction: Decimal
    pagibig_deduction: Decimal
    late_deduction: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    withholding_tax: Decimal
    net_pay: Decimal
