from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
import os


class Command(BaseCommand):
    help = 'Create the canteen admin account from environment variables (for deployment)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--viewer',
            action='store_true',
            help='Create a read-only viewer account instead of an admin.',
        )

    def handle(self, *args, **options):
        User = get_user_model()

        username = os.environ.get('CANTEEN_ADMIN_USERNAME')
        password = os.environ.get('CANTEEN_ADMIN_PASSWORD')

        if not username or not password:
            self.stdout.write(
                self.style.WARNING(
                    'Skipping account creation: CANTEEN_ADMIN_USERNAME and/or '
                    'CANTEEN_ADMIN_PASSWORD environment variables not set.'
                )
            )
            return

        if User.objects.filter(username=username).exists():
            self.stdout.write(
                self.style.WARNING(f'User {username} already exists.')
            )
            return

        if options['viewer']:
            User.objects.create_user(username=username, password=password, role=User.ROLE_VIEWER)
        else:
            User.objects.create_superuser(username=username, password=password, role=User.ROLE_ADMIN)

        self.stdout.write(
            self.style.SUCCESS(f'Successfully created user: {username}')
        )
