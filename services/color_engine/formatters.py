from datetime import date, datetime
from typing import Union

from .models import QuizResult


def format_date(value: Union[date, datetime]) -> str:
    """Formats a date as 'Month Day, Year', e.g. 'March 5, 2024'."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_report_title(result: QuizResult) -> str:
    """Standard report title: 'Report #ID - Month Day, Year'."""
    return f"Report #{result.id} - {format_date(result.created_at)}"
