# motorph/attendance/forms.py

from flask import current_app, jsonify
from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField
from wtforms.validators import InputRequired, Optional, NumberRange

from motorph.attendance.periods import PayPeriod, PayrollCycle


class PayPeriodForm(FlaskForm):
    """Query-string form selecting a pay period (?year=&month=&cycle=&week=)."""

    class Meta:
        csrf = False

    year = IntegerField('Year', validators=[Optional()])
    month = IntegerField('Month', validators=[InputRequired(), NumberRange(min=1, max=12)])
    cycle = SelectField('Payroll Cycle', choices=[
        (PayrollCycle.WEEKLY.value, 'Weekly'),
        (PayrollCycle.FIRST_HALF.value, 'First Half of the Month'),
        (PayrollCycle.SECOND_HALF.value, 'Second Half of the Month'),
    ], default=PayrollCycle.WEEKLY.value)
    week = IntegerField('Week', validators=[Optional(), NumberRange(min=1, max=4)])

    def to_period(self):
        """Builds the PayPeriod; PayPeriod raises ConfigurationError on bad combinations."""
        year = self.year.data or current_app.config['PAYROLL_YEAR']
        cycle = PayrollCycle(self.cycle.data)
        week = self.week.data if cycle is PayrollCycle.WEEKLY else None
        return PayPeriod(year, self.month.data, cycle, week)


class MonthForm(FlaskForm):
    """Year and month only, for views covering both halves of a month."""

    class Meta:
        csrf = False

    year = IntegerField('Year', validators=[Optional()])
    month = IntegerField('Month', validators=[InputRequired(), NumberRange(min=1, max=12)])

    def halves(self):
        year = self.year.data or current_app.config['PAYROLL_YEAR']
        return PayPeriod.half_month(year, self.month.data, True), PayPeriod.half_month(year, self.month.data, False)


def form_error_response(form):
    return jsonify(error='ConfigurationError', message='Invalid request parameters.',
                   fields=form.errors), 400
