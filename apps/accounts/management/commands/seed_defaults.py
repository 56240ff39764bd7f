"""
Management command to bootstrap a fresh installation.

Usage:
    python manage.py seed_defaults
    python manage.py seed_defaults --sample-raffle

This creates (when missing):
- The administrator account from ADMIN_CPF / ADMIN_PASSWORD / ADMIN_NAME
- Default system configuration entries
- Optionally, an open sample raffle with three prizes

Running it again never overwrites existing data.
"""

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.accounts.validators import normalize_cpf
from apps.configuration.services import seed_default_config
from apps.raffles.models import Raffle
from apps.raffles.services import create_raffle


SAMPLE_PRIZES = [
    {'name': 'Grand Prize', 'number_count': 1, 'order': 1},
    {'name': 'Second Prize', 'number_count': 1, 'order': 2},
    {'name': 'Consolation Prize', 'number_count': 3, 'order': 3},
]


class Command(BaseCommand):
    help = 'Create the admin user and default system configuration'

    def add_arguments(self, parser):
        parser.add_argument(
            '--sample-raffle',
            action='store_true',
            help='Also create an open sample raffle if none exists',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Seeding defaults...')

        self.create_admin()
        self.create_config()

        if options['sample_raffle']:
            self.create_sample_raffle()

        self.stdout.write(self.style.SUCCESS('Defaults seeded successfully!'))

    def create_admin(self):
        """Create the bootstrap administrator."""
        cpf = normalize_cpf(settings.ADMIN_CPF)
        if User.objects.filter(cpf=cpf).exists():
            self.stdout.write(f'  Admin {cpf} already exists, skipping')
            return

        User.objects.create_user(
            cpf,
            settings.ADMIN_PASSWORD,
            name=settings.ADMIN_NAME,
            role=UserRole.ADMIN,
        )
        self.stdout.write(f'  Created admin {cpf}')

    def create_config(self):
        created = seed_default_config()
        if created:
            self.stdout.write(f'  Created config: {", ".join(created)}')
        else:
            self.stdout.write('  System config already present')

    def create_sample_raffle(self):
        if Raffle.objects.exists():
            self.stdout.write('  Raffles already exist, skipping sample raffle')
            return

        raffle = create_raffle(name='Sample Raffle', prizes=SAMPLE_PRIZES)
        self.stdout.write(f'  Created sample raffle {raffle.id}')
