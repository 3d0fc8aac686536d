from .auth import LoginView
from .requests import OutpassRequestViewSet, ComplaintViewSet
from .records import LeaveFormViewSet, AttendanceViewSet, HostelInfoViewSet

__all__ = [
    'LoginView',
    'OutpassRequestViewSet',
    'ComplaintViewSet',
    'LeaveFormViewSet',
    'AttendanceViewSet',
    'HostelInfoViewSet',
]
