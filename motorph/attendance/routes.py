# motorph/attendance/routes.py

from flask import current_app, jsonify, request
from motorph.attendance import bp
from motorph.attendance.ledger import hours_worked
from motorph.models.payslip import to_money
from .forms import PayPeriodForm, form_error_response


@bp.route('/<employee_id>')
def employee_attendance(employee_id):
    """Attendance entries and hours worked for one employee in a pay period."""
    form = PayPeriodForm(formdata=request.args)
    if not form.validate():
        return form_error_response(form)
    period = form.to_period()

    data = current_app.extensions['motorph']
    employee = data.employees.find(employee_id)
    entries = data.ledger.entries_for(employee.employee_id, period)

    return jsonify(
        employee_id=employee.employee_id,
        employee_name=employee.full_name,
        period=period.label(),
        start_date=period.start_date.isoformat(),
        end_date=period.end_date.isoformat(),
        entries=[{
            'date': entry.date.isoformat(),
            'time_in': entry.time_in.strftime('%H:%M'),
            'time_out': entry.time_out.strftime('%H:%M'),
            'hours_worked': str(to_money(hours_worked(entry))),
            'holiday': _holiday_label(data.calendar, entry.date),
        } for entry in entries],
        total_hours=str(to_money(data.ledger.total_hours(employee.employee_id, period))),
    )


def _holiday_label(calendar, day):
    category = calendar.classify(day)
    return category.value if category else None
