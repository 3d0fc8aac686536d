from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _
from .models import (
    User,
    OutpassRequest,
    Complaint,
    LeaveForm,
    Attendance,
    HostelInfo
)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for the hostel User model"""

    list_display = ['username', 'name', 'room_no', 'role', 'is_active', 'created_at']
    list_filter = ['role', 'is_active', 'is_staff']
    search_fields = ['username', 'name', 'room_no', 'phone']
    ordering = ['username']

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        (_('Profile'), {'fields': ('name', 'room_no', 'phone', 'parent_phone', 'email', 'role')}),
        (_('Permissions'), {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        (_('Important dates'), {'fields': ('last_login', 'date_joined')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'name', 'room_no', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['date_joined', 'last_login']

    def get_readonly_fields(self, request, obj=None):
        # role is set once, on the add form
        if obj is not None:
            return self.readonly_fields + ['role']
        return self.readonly_fields


@admin.register(OutpassRequest)
class OutpassRequestAdmin(admin.ModelAdmin):
    list_display = ['student', 'reason', 'leave_time', 'return_time', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['student__username', 'student__name', 'reason']
    readonly_fields = ['status', 'created_at']


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ['student', 'complaint_text', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['student__username', 'complaint_text']
    readonly_fields = ['status', 'created_at']


@admin.register(LeaveForm)
class LeaveFormAdmin(admin.ModelAdmin):
    list_display = ['student', 'file', 'uploaded_at']
    search_fields = ['student__username']


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ['student', 'date', 'location', 'created_at']
    list_filter = ['date']
    search_fields = ['student__username', 'student__name']


@admin.register(HostelInfo)
class HostelInfoAdmin(admin.ModelAdmin):
    list_display = ['date', 'notice']
    ordering = ['-date']
