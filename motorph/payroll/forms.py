# motorph/payroll/forms.py

from flask import current_app
from wtforms import StringField
from wtforms.validators import Optional

from motorph.attendance.forms import PayPeriodForm, MonthForm


class NetPayForm(PayPeriodForm):
    """Pay period plus the scheduled shift start used for the late penalty."""
    shift_start = StringField('Shift Start (HH:MM)', validators=[Optional()])

    def shift(self):
        return self.shift_start.data or current_app.config['DEFAULT_SHIFT_START']


class MonthlyPayForm(MonthForm):
    shift_start = StringField('Shift Start (HH:MM)', validators=[Optional()])

    def shift(self):
        return self.shift_start.data or current_app.config['DEFAULT_SHIFT_START']
