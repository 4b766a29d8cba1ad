# motorph/errors.py


class PayrollError(Exception):
    """Base class for every failure raised by the payroll core."""
    status_code = 500


class ConfigurationError(PayrollError):
    """Invalid arguments (month, week, year, rate, shift time). Raised before any computation."""
    status_code = 400


class NotFoundError(PayrollError):
    """The requested employee does not exist in the directory."""
    status_code = 404


class DataIntegrityError(PayrollError):
    """Reference data or a computed value is inconsistent; the calculation is aborted."""
    status_code = 422
