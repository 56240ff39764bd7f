# Generated manually for the raffle manager raffles app

import uuid
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Raffle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('status', models.CharField(choices=[('open', 'Open'), ('closed', 'Closed')], default='open', max_length=10)),
                ('start_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('draw_date', models.DateTimeField(blank=True, null=True)),
                ('video_link', models.TextField(blank=True)),
                ('banner_image', models.TextField(blank=True)),
                ('total_numbers', models.PositiveIntegerField(default=1000, validators=[django.core.validators.MinValueValidator(1)])),
                ('min_number', models.PositiveIntegerField(default=1, validators=[django.core.validators.MaxValueValidator(99999)])),
                ('max_number', models.PositiveIntegerField(default=99999, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(99999)])),
                ('winning_numbers', models.JSONField(blank=True, default=list)),
                ('result_type', models.CharField(blank=True, choices=[('manual', 'Manual'), ('auto', 'Automatic'), ('federal', 'Federal lottery')], max_length=10)),
                ('configuration', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'sorteios',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='sorteios_status_idx'),
                    models.Index(fields=['created_at'], name='sorteios_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Prize',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('number_count', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('order', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('raffle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prizes', to='raffles.raffle')),
            ],
            options={
                'db_table': 'premios',
                'ordering': ['order', 'created_at'],
            },
        ),
    ]
