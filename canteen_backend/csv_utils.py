"""
Helpers for CSV downloads.
"""
import csv

from django.http import HttpResponse


def csv_response(filename):
    """
    Return (response, writer) for a CSV attachment named `filename`.
    Rows written through the writer go straight into the response body.
    """
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response, csv.writer(response)


def money(value):
    return f"{value:.2f}"


def quantity(value):
    """Render a quantity without trailing zeros, e.g. 12.500 -> 12.5."""
    text = f"{value:f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
