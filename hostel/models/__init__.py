from .user import User, UserManager
from .requests import OutpassRequest, Complaint
from .records import LeaveForm, Attendance, HostelInfo, leave_form_upload_to

__all__ = [
    'User',
    'UserManager',
    'OutpassRequest',
    'Complaint',
    'LeaveForm',
    'Attendance',
    'HostelInfo',
    'leave_form_upload_to',
]
