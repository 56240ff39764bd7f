# Generated manually for the raffle manager numbers app

import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('raffles', '0001_initial'),
        ('vouchers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RaffleNumber',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('number', models.CharField(max_length=5)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('raffle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='numbers', to='raffles.raffle')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='raffle_numbers', to=settings.AUTH_USER_MODEL)),
                ('voucher', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='numbers', to='vouchers.voucher')),
            ],
            options={
                'db_table': 'numeros_rifa',
                'ordering': ['raffle', 'number'],
                'indexes': [
                    models.Index(fields=['user', 'raffle'], name='numeros_user_raffle_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('raffle', 'number'), name='unique_number_per_raffle'),
                ],
            },
        ),
    ]
