from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model


class Command(BaseCommand):
    help = 'Creates an admin user, or promotes and resets the password of an existing one'

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('--password', required=True)
        parser.add_argument('--name', default='Admin')

    def handle(self, *args, **options):
        User = get_user_model()
        email = options['email'].strip().lower()
        password = options['password']
        if len(password) < 6:
            raise CommandError('Password must be at least 6 characters')

        user = User.objects.filter(email__iexact=email).first()
        if user:
            user.role = 'admin'
            user.status = 'active'
            user.is_active = True
            user.name = options['name'] or user.name
            user.set_password(password)
            user.save()
            self.stdout.write(self.style.SUCCESS(f'Updated {email}: role admin, password reset'))
            return

        User.objects.create_user(
            email=email,
            password=password,
            name=options['name'],
            role='admin',
            status='active',
            is_staff=True,
        )
        self.stdout.write(self.style.SUCCESS(f'Created admin user {email}'))
