# motorph/employee/__init__.py

from flask import Blueprint

bp = Blueprint('employee', __name__, url_prefix='/employees')

from . import routes
