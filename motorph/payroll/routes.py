# motorph/payroll/routes.py

from flask import current_app, jsonify, request
from motorph.payroll import bp
from motorph.attendance.forms import PayPeriodForm, form_error_response
from .forms import NetPayForm, MonthlyPayForm
from .calculator import PayrollService


def _service():
    return PayrollService(current_app.extensions['motorph'])


def _employee_header(employee_id):
    employee = current_app.extensions['motorph'].employees.find(employee_id)
    return {'employee_id': employee.employee_id, 'employee_name': employee.full_name}


@bp.route('/<employee_id>/gross')
def gross_wage(employee_id):
    form = PayPeriodForm(formdata=request.args)
    if not form.validate():
        return form_error_response(form)
    period = form.to_period()

    result = _service().calculate_gross(employee_id, period)
    current_app.logger.info('Gross wage computed for %s (%s)', employee_id, period)
    return jsonify(**_employee_header(employee_id), period=period.label(), **result.as_dict())


@bp.route('/<employee_id>/net')
def net_wage(employee_id):
    form = NetPayForm(formdata=request.args)
    if not form.validate():
        return form_error_response(form)
    period = form.to_period()

    result = _service().calculate_net(employee_id, period, form.shift())
    current_app.logger.info('Net wage computed for %s (%s)', employee_id, period)
    return jsonify(**_employee_header(employee_id), period=period.label(), **result.as_dict())


@bp.route('/<employee_id>/monthly')
def monthly_payroll(employee_id):
    """Net wage breakdown for the first and second half of a month."""
    form = MonthlyPayForm(formdata=request.args)
    if not form.validate():
        return form_error_response(form)

    service = _service()
    halves = []
    for period in form.halves():
        result = service.calculate_net(employee_id, period, form.shift())
        halves.append({'period': period.label(), **result.as_dict()})
    return jsonify(**_employee_header(employee_id), halves=halves)
