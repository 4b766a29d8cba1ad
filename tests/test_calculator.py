"""
Tests for gross and net wage computation.

Employee 10001 earns 100/hour so the expected amounts read off directly.
"""

import pytest
from datetime import date, time
from decimal import Decimal

from conftest import entry
from motorph.attendance.periods import PayPeriod
from motorph.errors import ConfigurationError, DataIntegrityError, NotFoundError
from motorph.models.payslip import GrossResult, to_money
from motorph.models.records import AttendanceEntry, HolidayCategory, HolidayEntry
from motorph.payroll.calculator import (
    GrossWageCalculator,
    NetWageCalculator,
    PayrollService,
    split_daily_hours,
)
from motorph.payroll.holidays import HolidayCalendar

WEEK_TWO = PayPeriod.weekly(2024, 6, 2)


class NegativeHoursEntry(AttendanceEntry):
    """An entry whose duration comes out negative, as a corrupt source row would."""

    def hours_worked(self):
        return Decimal('-1')


def gross_for(reference, period=WEEK_TWO, employee_id='10001'):
    return GrossWageCalculator(reference, employee_id, period).calculate()


def test_split_daily_hours():
    assert split_daily_hours(Decimal('9')) == (Decimal('8'), Decimal('1'))
    assert split_daily_hours(Decimal('6.5')) == (Decimal('6.5'), Decimal('0'))


class TestGrossWage:

    def test_regular_day_with_overtime(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-11', '08:00', '18:00')])
        result = gross_for(reference)

        assert result.regular_pay == Decimal('800')
        assert result.overtime_pay == Decimal('250')
        assert result.holiday_premium == 0
        assert result.gross == Decimal('1050')
        assert result.overtime_hours == Decimal('2')

    def test_night_shift_overtime_rate(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-10', '22:00', '08:30')])
        result = gross_for(reference)

        assert result.hours_worked == Decimal('10.5')
        assert result.regular_pay == Decimal('800')
        assert result.overtime_pay == Decimal('275')

    def test_regular_holiday_doubles_pay(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-12', '08:00', '16:00')])
        result = gross_for(reference)

        assert result.regular_pay == Decimal('1600')
        assert result.holiday_premium == Decimal('800')
        assert result.gross == Decimal('1600')

    def test_regular_holiday_with_overtime(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-12', '08:00', '18:00')])
        result = gross_for(reference)

        assert result.regular_pay == Decimal('1600')
        assert result.overtime_pay == Decimal('450')
        assert result.holiday_premium == Decimal('1000')
        assert result.gross == Decimal('2050')

    def test_special_non_working_day(self, make_reference):
        reference = make_reference([entry('10001', '2024-08-21', '08:00', '16:00')])
        result = gross_for(reference, PayPeriod.weekly(2024, 8, 3))

        assert result.regular_pay == Decimal('1040')
        assert result.holiday_premium == Decimal('240')

    def test_injected_calendar(self, make_reference):
        calendar = HolidayCalendar(2024, [HolidayEntry(date(2024, 6, 13), HolidayCategory.SPECIAL_NON_WORKING)])
        reference = make_reference([entry('10001', '2024-06-13', '08:00', '16:00'),
                                    entry('10001', '2024-06-12', '08:00', '16:00')],
                                   calendar=calendar)
        result = gross_for(reference)

        assert result.regular_pay == Decimal('1840')
        assert result.holiday_premium == Decimal('240')

    def test_no_attendance_is_zero(self, make_reference):
        result = gross_for(make_reference())
        assert result.gross == 0
        assert result.hours_worked == 0

    def test_entries_outside_period_are_ignored(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-03', '08:00', '17:00'),
                                    entry('10002', '2024-06-10', '08:00', '17:00')])
        assert gross_for(reference).gross == 0

    def test_unknown_employee(self, make_reference):
        with pytest.raises(NotFoundError):
            gross_for(make_reference(), employee_id='99999')

    def test_zero_hourly_rate(self, make_reference):
        with pytest.raises(ConfigurationError):
            gross_for(make_reference(), employee_id='10009')

    def test_unsupported_year(self, make_reference):
        with pytest.raises(ConfigurationError):
            gross_for(make_reference(), PayPeriod.weekly(2023, 6, 2))

    def test_premium_above_ceiling(self, make_reference):
        calendar = HolidayCalendar(2024, [HolidayEntry(date(2024, 6, 12), HolidayCategory.REGULAR)],
                                   multipliers={HolidayCategory.REGULAR: Decimal('3.0')})
        reference = make_reference([entry('10001', '2024-06-12', '08:00', '16:00')], calendar=calendar)
        with pytest.raises(DataIntegrityError):
            gross_for(reference)

    def test_negative_hours(self, make_reference):
        reference = make_reference([NegativeHoursEntry('10001', date(2024, 6, 10), time(8, 0), time(17, 0))])
        with pytest.raises(DataIntegrityError):
            gross_for(reference)


class TestNetWage:

    def test_week_two_payslip(self, make_reference, week_two_entries):
        result = NetWageCalculator(make_reference(week_two_entries), '10001', WEEK_TWO).calculate()

        assert result.gross_pay == Decimal('1725')
        assert result.sss_deduction == Decimal('78.75')
        assert result.philhealth_deduction == Decimal('62.5')
        assert result.pagibig_deduction == Decimal('25')
        assert to_money(result.late_deduction) == Decimal('8.33')
        assert result.withholding_tax == 0
        assert to_money(result.net_pay) == Decimal('1550.42')

    def test_net_identity(self, make_reference, week_two_entries):
        result = NetWageCalculator(make_reference(week_two_entries), '10001', WEEK_TWO).calculate()

        assert result.total_deductions == (result.sss_deduction + result.philhealth_deduction
                                           + result.pagibig_deduction + result.late_deduction)
        assert result.taxable_income == result.gross_pay - result.total_deductions
        assert result.net_pay == result.gross_pay - result.total_deductions - result.withholding_tax

    def test_half_month_splits_monthly_share_in_two(self, make_reference, week_two_entries):
        period = PayPeriod.half_month(2024, 6, True)
        result = NetWageCalculator(make_reference(week_two_entries), '10001', period).calculate()

        assert result.gross_pay == Decimal('1725')
        # looked up at a monthly gross of 3450
        assert result.sss_deduction == Decimal('78.75')
        assert result.philhealth_deduction == Decimal('125')
        assert result.pagibig_deduction == Decimal('34.5')

    def test_later_shift_start_removes_penalty(self, make_reference, week_two_entries):
        result = NetWageCalculator(make_reference(week_two_entries), '10001', WEEK_TWO,
                                   shift_start='09:00').calculate()
        assert result.late_deduction == 0

    def test_repeatable(self, make_reference, week_two_entries):
        service = PayrollService(make_reference(week_two_entries))
        assert service.calculate_net('10001', WEEK_TWO) == service.calculate_net('10001', WEEK_TWO)

    def test_rejects_unlisted_shift(self, make_reference):
        with pytest.raises(ConfigurationError):
            NetWageCalculator(make_reference(), '10001', WEEK_TWO, shift_start='07:30')

    def test_taxed_half_month(self, make_reference):
        gross = GrossResult(
            hourly_rate=Decimal('100'), hours_worked=Decimal('500'), regular_hours=Decimal('500'),
            overtime_hours=Decimal('0'), regular_pay=Decimal('50000'), overtime_pay=Decimal('0'),
            holiday_premium=Decimal('0'), gross=Decimal('50000'),
        )
        calculator = NetWageCalculator(make_reference(), '10001', PayPeriod.half_month(2024, 6, False))
        result = calculator.from_gross(gross)

        assert result.total_deductions == Decimal('1862.5')
        assert result.taxable_income == Decimal('48137.5')
        assert result.withholding_tax == Decimal('6201.125')
        assert result.net_pay == Decimal('41936.375')

    def test_weekly_deductions_use_monthly_equivalent_gross(self, make_reference):
        # Monday to Friday of June week 1, ten hours a day
        reference = make_reference([entry('10001', f'2024-06-0{d}', '08:00', '18:00') for d in range(3, 8)])
        result = NetWageCalculator(reference, '10001', PayPeriod.weekly(2024, 6, 1)).calculate()

        assert result.gross_pay == Decimal('5250')
        # looked up at a monthly gross of 21000, then split four ways
        assert result.sss_deduction == Decimal('236.25')
        assert result.philhealth_deduction == Decimal('131.25')
        assert result.pagibig_deduction == Decimal('25')

    def test_night_shift_has_no_late_deduction(self, make_reference):
        reference = make_reference([entry('10001', '2024-06-10', '22:00', '06:00')])
        result = NetWageCalculator(reference, '10001', WEEK_TWO).calculate()

        assert result.gross_pay == Decimal('800')
        assert result.late_deduction == 0
        assert result.net_pay == Decimal('687.75')
