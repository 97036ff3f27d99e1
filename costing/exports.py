"""
CSV renderings of saved and draft cost sheets.
"""
from decimal import Decimal

from django.conf import settings

from canteen_backend.csv_utils import csv_response, money, quantity
from .services import UNKNOWN_ITEM


def _write_cost_sheet(writer, *, date, office_name, participants, total, per_head, menu, remarks, lines, reference=None):
    writer.writerow(['Cost Sheet Details'])
    writer.writerow(['Date', date])
    if reference is not None:
        writer.writerow(['Reference ID', reference])
    writer.writerow(['Office', office_name])
    writer.writerow([])

    writer.writerow(['Summary'])
    writer.writerow(['Total Participants', participants])
    writer.writerow(['Total Cost', money(total)])
    writer.writerow(['Per Head Cost', money(per_head)])
    writer.writerow(['Menu Description', menu])
    writer.writerow(['Stock Remarks', remarks])
    writer.writerow([])

    writer.writerow(['SL', 'Item Name', 'Unit', 'Quantity', 'Rate', 'Amount', 'Remarks'])
    calculated = Decimal('0')
    for index, line in enumerate(lines, start=1):
        calculated += line['amount']
        writer.writerow([
            index,
            line['name'],
            line['unit'],
            quantity(line['quantity']),
            money(line['rate']),
            money(line['amount']),
            line['remarks'],
        ])
    writer.writerow([])
    writer.writerow(['', '', '', '', 'Calculated Total', money(calculated)])


def cost_sheet_csv(entry):
    lines = []
    for item in entry.items.select_related('ingredient'):
        lines.append({
            'name': item.ingredient.name if item.ingredient else UNKNOWN_ITEM,
            'unit': item.ingredient.unit if item.ingredient else '-',
            'quantity': item.quantity,
            'rate': item.rate,
            'amount': item.amount,
            'remarks': item.remarks,
        })

    response, writer = csv_response(f"Cost_Sheet_{entry.date}.csv")
    _write_cost_sheet(
        writer,
        date=entry.date,
        reference=entry.pk,
        office_name=entry.office.name,
        participants=entry.participant_count,
        total=entry.total_cost,
        per_head=entry.per_head_cost,
        menu=entry.menu_description,
        remarks=entry.stock_remarks,
        lines=lines,
    )
    return response


def draft_cost_sheet_csv(preview):
    """Export an unsaved cost sheet as computed by preview_entry()."""
    office = preview['office']
    response, writer = csv_response(f"Canteen_Cost_Sheet_{preview['date']}.csv")
    _write_cost_sheet(
        writer,
        date=preview['date'],
        office_name=office.name if office else settings.CANTEEN_NAME,
        participants=preview['participant_count'],
        total=preview['total_cost'],
        per_head=preview['per_head_cost'],
        menu=preview['menu_description'],
        remarks=preview['stock_remarks'],
        lines=preview['lines'],
    )
    return response
