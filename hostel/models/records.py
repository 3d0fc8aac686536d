import time

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


def leave_form_upload_to(instance, filename):
    """leave-forms/<student id>_<epoch ms>_<original name>"""
    return f"leave-forms/{instance.student_id}_{int(time.time() * 1000)}_{filename}"


class LeaveForm(models.Model):
    """Signed leave form uploaded by a student. Never edited after upload."""
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='leave_forms'
    )
    file = models.FileField(upload_to=leave_form_upload_to, max_length=255)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'leave_forms'
        ordering = ['-uploaded_at', '-id']

    def __str__(self):
        return f"{self.student.username} - {self.file.name}"


class Attendance(models.Model):
    """Daily self-marked attendance with the device location at marking time."""
    date = models.DateField(_('date'), default=timezone.localdate)
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='attendance_records'
    )
    location = models.CharField(_('location'), max_length=64)
    marked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='attendance_marked'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'attendance'
        ordering = ['-date', '-created_at']
        constraints = [
            models.UniqueConstraint(fields=['student', 'date'], name='unique_attendance_per_student_per_day'),
        ]

    def __str__(self):
        return f"{self.student.username} - {self.date}"


class HostelInfo(models.Model):
    """
    Notice board for a single day: mess menu, notice and warden contacts.
    warden_contacts is a list of {"name", "phone", "position"} objects.
    """
    date = models.DateField(_('date'), unique=True, default=timezone.localdate)
    mess_menu = models.TextField(blank=True)
    notice = models.TextField(blank=True)
    warden_contacts = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'hostel_info'
        ordering = ['-date']
        verbose_name = _('hostel info')
        verbose_name_plural = _('hostel info')

    def __str__(self):
        return f"Hostel info for {self.date}"
