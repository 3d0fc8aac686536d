from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class OutpassRequest(models.Model):
    """
    A student's request to leave the hostel premises for a while.
    Status only moves through hostel.services.lifecycle.
    """
    class Status(models.TextChoices):
        PENDING = 'Pending', _('Pending')
        APPROVED = 'Approved', _('Approved')
        REJECTED = 'Rejected', _('Rejected')

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='outpass_requests'
    )
    reason = models.TextField()
    leave_time = models.DateTimeField()
    return_time = models.DateTimeField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'outpass_requests'
        ordering = ['-created_at', '-id']
        verbose_name = _('outpass request')

    def __str__(self):
        return f"{self.student.username} - {self.leave_time:%Y-%m-%d %H:%M} ({self.status})"


class Complaint(models.Model):
    """
    Complaint raised by a student.
    Status only moves through hostel.services.lifecycle.
    """
    class Status(models.TextChoices):
        OPEN = 'Open', _('Open')
        IN_PROGRESS = 'In Progress', _('In Progress')
        RESOLVED = 'Resolved', _('Resolved')

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='complaints'
    )
    complaint_text = models.TextField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPEN)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'complaints'
        ordering = ['-created_at', '-id']
        verbose_name = _('complaint')

    def __str__(self):
        return f"{self.student.username} - {self.status}"
