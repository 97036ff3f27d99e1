"""
Default reference data used by the seed command and the restore operation.
"""
from decimal import Decimal

# (code, name, location)
DEFAULT_OFFICES = [
    ('off_01', 'ACI Centre (HQ)', 'Tejgaon'),
    ('off_02', 'Factory - Narayanganj', 'Narayanganj'),
    ('off_03', 'Factory - Gazipur', 'Gazipur'),
    ('off_04', 'Distribution Center A', 'Chittagong'),
    ('off_05', 'Sales Office - North', 'Uttara'),
    ('off_06', 'Sales Office - South', 'Dhanmondi'),
    ('off_07', 'Research Lab', 'Savar'),
    ('off_08', 'Logistics Hub', 'Comilla'),
    ('off_09', 'Regional Office 1', 'Sylhet'),
    ('off_10', 'Regional Office 2', 'Rajshahi'),
    ('off_11', 'Regional Office 3', 'Khulna'),
    ('off_12', 'Regional Office 4', 'Barisal'),
    ('off_13', 'Packaging Unit', 'Tongi'),
    ('off_14', 'Agro Division', 'Bogura'),
    ('off_15', 'Consumer Brands', 'Gulshan'),
]

DEFAULT_INGREDIENTS = [
    {'code': 'ing_01', 'name': 'Rice (Miniket)', 'unit': 'kg', 'unit_price': Decimal('0.70'), 'current_stock': Decimal('500'), 'min_stock_threshold': Decimal('100')},
    {'code': 'ing_02', 'name': 'Chicken (Broiler)', 'unit': 'kg', 'unit_price': Decimal('2.50'), 'current_stock': Decimal('120'), 'min_stock_threshold': Decimal('50')},
    {'code': 'ing_03', 'name': 'Soybean Oil', 'unit': 'L', 'unit_price': Decimal('1.80'), 'current_stock': Decimal('80'), 'min_stock_threshold': Decimal('30')},
    {'code': 'ing_04', 'name': 'Lentils (Dal)', 'unit': 'kg', 'unit_price': Decimal('1.20'), 'current_stock': Decimal('200'), 'min_stock_threshold': Decimal('40')},
    {'code': 'ing_05', 'name': 'Vegetables (Mixed)', 'unit': 'kg', 'unit_price': Decimal('0.40'), 'current_stock': Decimal('150'), 'min_stock_threshold': Decimal('50')},
    {'code': 'ing_06', 'name': 'Spices (Mix)', 'unit': 'kg', 'unit_price': Decimal('5.00'), 'current_stock': Decimal('20'), 'min_stock_threshold': Decimal('10')},
    {'code': 'ing_07', 'name': 'Fish (Rui)', 'unit': 'kg', 'unit_price': Decimal('3.50'), 'current_stock': Decimal('40'), 'min_stock_threshold': Decimal('20')},
    {'code': 'ing_08', 'name': 'Beef', 'unit': 'kg', 'unit_price': Decimal('6.50'), 'current_stock': Decimal('30'), 'min_stock_threshold': Decimal('15')},
    {'code': 'ing_09', 'name': 'Egg', 'unit': 'pcs', 'unit_price': Decimal('0.12'), 'current_stock': Decimal('1000'), 'min_stock_threshold': Decimal('200')},
    {'code': 'ing_10', 'name': 'Lemon', 'unit': 'pcs', 'unit_price': Decimal('0.05'), 'current_stock': Decimal('300'), 'min_stock_threshold': Decimal('50')},
    {'code': 'ing_11', 'name': 'Onion', 'unit': 'kg', 'unit_price': Decimal('0.80'), 'current_stock': Decimal('100'), 'min_stock_threshold': Decimal('30')},
    {'code': 'ing_12', 'name': 'Potato', 'unit': 'kg', 'unit_price': Decimal('0.35'), 'current_stock': Decimal('250'), 'min_stock_threshold': Decimal('60')},
]

# Per-participant consumption used when generating sample history
HISTORY_CONSUMPTION_PER_HEAD = [
    ('ing_01', Decimal('0.25')),
    ('ing_02', Decimal('0.2')),
    ('ing_03', Decimal('0.05')),
]

UNASSIGNED_SUPPLIER = 'Unassigned / Local Market'
