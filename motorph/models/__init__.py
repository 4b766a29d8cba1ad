# motorph/models/__init__.py

from .records import Employee, AttendanceEntry, HolidayEntry, HolidayCategory
from .payslip import GrossResult, PayrollResult, to_money
