import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    """Base configuration class."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Reference data exports (CSV or XLSX)
    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(basedir, 'data')
    EMPLOYEE_DATA_FILE = os.environ.get('EMPLOYEE_DATA_FILE') or \
        os.path.join(DATA_DIR, 'employees.csv')
    ATTENDANCE_DATA_FILE = os.environ.get('ATTENDANCE_DATA_FILE') or \
        os.path.join(DATA_DIR, 'attendance.csv')

    # Optional contribution table overrides; the built-in 2024 tables are used when unset
    SSS_TABLE_FILE = os.environ.get('SSS_TABLE_FILE')
    PHILHEALTH_TABLE_FILE = os.environ.get('PHILHEALTH_TABLE_FILE')
    PAGIBIG_TABLE_FILE = os.environ.get('PAGIBIG_TABLE_FILE')

    # Payroll settings
    PAYROLL_YEAR = int(os.environ.get('PAYROLL_YEAR') or 2024)
    DEFAULT_SHIFT_START = os.environ.get('DEFAULT_SHIFT_START') or '08:00'

    # Logging
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT')
    LOG_DIR = os.path.join(basedir, 'logs')

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration."""
        import logging
        from logging import StreamHandler

        if app.debug or app.testing:
            return

        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        )
        if app.config.get('LOG_TO_STDOUT'):
            handler = StreamHandler()
        else:
            if not os.path.exists(app.config['LOG_DIR']):
                os.mkdir(app.config['LOG_DIR'])
            handler = logging.FileHandler(os.path.join(app.config['LOG_DIR'], 'payroll.log'))
        handler.setFormatter(formatter)
        handler.setLevel(logging.INFO)
        app.logger.addHandler(handler)
        app.logger.setLevel(logging.INFO)

        # Loader and calculator modules log under the package logger
        package_logger = logging.getLogger('motorph')
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
        app.logger.info('Payroll System startup')

class DevelopmentConfig(Config):
    DEBUG = True

class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False

class ProductionConfig(Config):
    DEBUG = False

    @staticmethod
    def init_app(app):
        """Initialize production configuration with validation."""
        Config.init_app(app)

        if not os.environ.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable must be set in production!")

        for key in ('EMPLOYEE_DATA_FILE', 'ATTENDANCE_DATA_FILE'):
            if not os.path.exists(app.config[key]):
                raise ValueError(f"{key} does not exist: {app.config[key]}")

        app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')

config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
