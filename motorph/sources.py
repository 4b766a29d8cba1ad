# motorph/sources.py
"""Row readers for the spreadsheet exports the payroll data comes from.

Every reader yields one dict per data row keyed by the header row, with
surrounding whitespace stripped and blank cells as empty strings.
"""

import csv
import logging
import os
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

import openpyxl

from motorph.errors import DataIntegrityError

logger = logging.getLogger(__name__)


def _clean(value):
    if value is None:
        return ''
    if isinstance(value, str):
        return value.strip()
    return value


def read_csv_rows(path):
    with open(path, newline='', encoding='utf-8-sig') as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            yield {(key or '').strip(): _clean(value) for key, value in row.items()}


def read_xlsx_rows(path):
    workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            return
        keys = [str(_clean(cell)) for cell in header]
        for values in rows:
            if values is None or all(_clean(v) == '' for v in values):
                continue
            yield {key: _clean(value) for key, value in zip(keys, values)}
    finally:
        workbook.close()


def read_rows(path):
    """Dispatches on the file extension (.csv or .xlsx)."""
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext == '.csv':
        return read_csv_rows(path)
    if ext in ('.xlsx', '.xlsm'):
        return read_xlsx_rows(path)
    raise DataIntegrityError(f"Unsupported data file type: {path}")


# --- CELL PARSING HELPERS ---

def parse_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    for fmt in ('%Y-%m-%d', '%m/%d/%Y'):
        try:
            return datetime.strptime(text[:10], fmt).date()
        except ValueError:
            continue
    return None


def parse_time(value):
    """Accepts time/datetime cells, Excel day fractions and H:MM[:SS] strings."""
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = int(round(value * 24 * 3600)) % (24 * 3600)
        return time(seconds // 3600, (seconds // 60) % 60, seconds % 60)
    text = str(value).strip()
    if not text:
        return None
    for fmt in ('%H:%M:%S', '%H:%M'):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


def parse_employee_number(value):
    """Sheet exports store employee numbers as numbers ("10001.0", "010001")."""
    text = str(value).strip()
    try:
        number = Decimal(text)
        if number == number.to_integral_value():
            return str(int(number))
    except (InvalidOperation, ValueError, OverflowError):
        pass
    return text
