from django.core.management.base import BaseCommand
from django.utils import timezone
from hostel.models import User, HostelInfo


class Command(BaseCommand):
    help = 'Create the hostel admin account, sample students and today\'s notice board'

    def add_arguments(self, parser):
        parser.add_argument('--admin-username', default='admin')
        parser.add_argument('--admin-password', default='admin123')
        parser.add_argument('--student-password', default='student123')
        parser.add_argument('--students', type=int, default=2, help='Number of sample students')

    def handle(self, *args, **options):
        admin, created = User.objects.get_or_create(
            username=options['admin_username'],
            defaults={
                'name': 'Hostel Warden',
                'role': User.Role.ADMIN,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        if created:
            admin.set_password(options['admin_password'])
            admin.save()
            self.stdout.write(self.style.SUCCESS(f'✓ Created admin user {admin.username}'))
        elif admin.role != User.Role.ADMIN:
            self.stdout.write(self.style.ERROR(
                f'User {admin.username} exists with role {admin.role}; roles cannot be changed.'
            ))
            return
        else:
            self.stdout.write(f'Admin user {admin.username} already exists')

        for i in range(1, options['students'] + 1):
            student, created = User.objects.get_or_create(
                username=f'student{i}',
                defaults={
                    'name': f'Student {i}',
                    'room_no': f'{100 + i}',
                    'phone': f'90000000{i:02d}',
                    'parent_phone': f'80000000{i:02d}',
                    'role': User.Role.STUDENT,
                }
            )
            if created:
                student.set_password(options['student_password'])
                student.save()
                self.stdout.write(self.style.SUCCESS(f'  ✓ {student.username}'))

        today = timezone.localdate()
        _, created = HostelInfo.objects.get_or_create(
            date=today,
            defaults={
                'mess_menu': 'Breakfast: Poha\nLunch: Rice, Dal\nDinner: Chapati, Paneer',
                'notice': 'Welcome to the hostel.',
                'warden_contacts': [
                    {'name': admin.name or admin.username, 'phone': admin.phone or '-', 'position': 'Warden'},
                ],
            }
        )
        if created:
            self.stdout.write(self.style.SUCCESS(f'✓ Published hostel info for {today}'))

        self.stdout.write(self.style.SUCCESS('Done.'))
