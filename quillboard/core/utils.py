"""
Shared helpers for dates, CSV export and display formatting.
"""

import csv
import io
from datetime import date, datetime


def current_date():
    """Current date as YYYY-MM-DD"""
    return date.today().isoformat()


def parse_date(value):
    """Parse an ISO date or datetime string into a naive datetime"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value))


def generate_csv(headers, rows):
    """Build CSV text with every cell double-quoted and rows separated by newlines"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(headers)
    for row in rows:
        writer.writerow(['' if cell is None else cell for cell in row])
    return buffer.getvalue().rstrip('\n')


def export_filename(prefix):
    return f"{prefix}-{current_date()}.csv"


def truncate_text(text, max_length=100):
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + '...'


def format_number(num):
    """Compact display for large counts (1.2K, 3.4M)"""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return f"{num:,}"


def format_rate(numerator, denominator):
    if denominator == 0:
        return '0%'
    return f"{numerator / denominator * 100:.1f}%"
