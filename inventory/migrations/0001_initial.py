import django.utils.timezone
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Ingredient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(blank=True, help_text="Catalog code of a default ingredient, e.g. 'ing_01'.", max_length=20, null=True, unique=True)),
                ('name', models.CharField(max_length=255)),
                ('unit', models.CharField(help_text="e.g. 'kg', 'L', 'pcs'", max_length=20)),
                ('unit_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('current_stock', models.DecimalField(decimal_places=3, default=Decimal('0.000'), max_digits=12)),
                ('min_stock_threshold', models.DecimalField(decimal_places=3, default=Decimal('0.000'), help_text='Stock level at or below which the ingredient is flagged low.', max_digits=12)),
                ('last_updated', models.DateTimeField(default=django.utils.timezone.now)),
                ('supplier_name', models.CharField(blank=True, default='', max_length=255)),
                ('supplier_contact', models.CharField(blank=True, default='', max_length=255)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
    ]
