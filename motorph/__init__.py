# motorph/__init__.py
from flask import Flask, jsonify
from config import config
from motorph.errors import PayrollError
from motorph.reference import PayrollReference

reference = PayrollReference()

def create_app(config_name='default', reference_data=None):
    """Application factory.

    ``reference_data`` lets callers inject a prebuilt ReferenceData instead of
    loading the files named in the configuration.
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name])

    # Initialize app-specific configuration (logging, etc.)
    config[config_name].init_app(app)

    reference.init_app(app, data=reference_data)

    # --- Register Blueprints ---
    from .employee import bp as employee_bp
    app.register_blueprint(employee_bp)

    from .attendance import bp as attendance_bp
    app.register_blueprint(attendance_bp)

    from .payroll import bp as payroll_bp
    app.register_blueprint(payroll_bp)

    # --- CLI Commands ---
    from .payroll.cli import payroll_cli
    app.cli.add_command(payroll_cli)

    # --- Register Error Handlers ---
    @app.errorhandler(PayrollError)
    def payroll_error(error):
        app.logger.warning('%s: %s', type(error).__name__, error)
        return jsonify(error=type(error).__name__, message=str(error)), error.status_code

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify(error='NotFound', message='Resource not found.'), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify(error='InternalServerError', message='An unexpected error occurred.'), 500

    return app
