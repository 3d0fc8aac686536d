from django.contrib.auth.models import AbstractUser, UserManager as BaseUserManager
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    """Manager that gives superusers the hostel admin role."""

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault('role', User.Role.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Hostel resident or administrator.
    The role is fixed once the account has been saved.
    """
    class Role(models.TextChoices):
        STUDENT = 'student', _('Student')
        ADMIN = 'admin', _('Admin')

    name = models.CharField(_('full name'), max_length=150, blank=True)
    room_no = models.CharField(_('room number'), max_length=20, blank=True)
    phone = models.CharField(_('phone'), max_length=20, blank=True)
    parent_phone = models.CharField(_('parent phone'), max_length=20, blank=True)
    role = models.CharField(_('role'), max_length=10, choices=Role.choices, default=Role.STUDENT)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    class Meta:
        db_table = 'users'
        ordering = ['username']

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN

    @property
    def is_student(self):
        return self.role == self.Role.STUDENT

    def save(self, *args, **kwargs):
        update_fields = kwargs.get('update_fields')
        if self.pk and (update_fields is None or 'role' in update_fields):
            previous = type(self).objects.filter(pk=self.pk).values_list('role', flat=True).first()
            if previous is not None and previous != self.role:
                raise ValidationError({'role': _('Role cannot be changed once the account exists.')})
        super().save(*args, **kwargs)
