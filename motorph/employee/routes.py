# motorph/employee/routes.py

from flask import current_app, jsonify
from motorph.employee import bp


@bp.route('/')
def list_employees():
    """Employee number, last name and first name for every employee."""
    directory = current_app.extensions['motorph'].employees
    return jsonify(employees=[employee.summary() for employee in directory.all()])


@bp.route('/<employee_id>')
def employee_detail(employee_id):
    employee = current_app.extensions['motorph'].employees.find(employee_id)
    return jsonify(employee.as_dict())
