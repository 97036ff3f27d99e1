"""
Error codes and messages for the Canteen API.
All error messages support internationalization.
"""
from django.utils.translation import gettext_lazy as _


# Authentication & Authorization Error Codes
class AuthErrors:
    INVALID_CREDENTIALS = {
        'code': 'INVALID_CREDENTIALS',
        'message': _('Invalid credentials. Please try again.')
    }

    ADMIN_PERMISSION_REQUIRED = {
        'code': 'ADMIN_PERMISSION_REQUIRED',
        'message': _('Only administrators can perform this action.')
    }


# Ingredient & Stock Error Codes
class InventoryErrors:
    INGREDIENT_NOT_FOUND = {
        'code': 'INGREDIENT_NOT_FOUND',
        'message': _('Ingredient {ingredient_id} not found.')
    }

    INVALID_ADJUSTMENT_TYPE = {
        'code': 'INVALID_ADJUSTMENT_TYPE',
        'message': _("Adjustment type must be 'add' or 'subtract'.")
    }

    INVALID_QUANTITY = {
        'code': 'INVALID_QUANTITY',
        'message': _('Please select an item and enter a quantity greater than zero.')
    }


# Cost Sheet Error Codes
class CostingErrors:
    PARTICIPANTS_REQUIRED = {
        'code': 'PARTICIPANTS_REQUIRED',
        'message': _('Please enter participant count.')
    }

    NO_ITEMS = {
        'code': 'NO_CONSUMED_ITEMS',
        'message': _('Please add at least one item with quantity.')
    }

    NO_OFFICE = {
        'code': 'NO_OFFICE_CONFIGURED',
        'message': _('No office is configured. Run the seed_canteen command first.')
    }

    OFFICE_NOT_FOUND = {
        'code': 'OFFICE_NOT_FOUND',
        'message': _('Office {office_id} not found.')
    }

    ENTRY_NOT_FOUND = {
        'code': 'ENTRY_NOT_FOUND',
        'message': _('Cost sheet {entry_id} not found.')
    }


# Reporting Error Codes
class ReportErrors:
    INVALID_TIMEFRAME = {
        'code': 'INVALID_TIMEFRAME',
        'message': _("Time frame must be one of: week, month, quarter, year, custom.")
    }

    INVALID_DATE = {
        'code': 'INVALID_DATE',
        'message': _('Dates must use the YYYY-MM-DD format.')
    }
