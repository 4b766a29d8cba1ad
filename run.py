# run.py

import os
from motorph import create_app, reference
from motorph.attendance.periods import PayPeriod, PayrollCycle
from motorph.payroll.calculator import PayrollService


app = create_app(os.environ.get('FLASK_ENV', 'default'))

@app.shell_context_processor
def make_shell_context():
    """Adds the reference data and payroll entry points to the Flask shell."""
    return dict(data=reference.data, service=reference.service, PayPeriod=PayPeriod,
                PayrollCycle=PayrollCycle, PayrollService=PayrollService)

if __name__ == '__main__':
    app.run()
