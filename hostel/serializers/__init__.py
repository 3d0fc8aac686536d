from .auth import UserSerializer, StudentSummarySerializer
from .requests import OutpassRequestSerializer, ComplaintSerializer, StatusTransitionSerializer
from .records import (
    LeaveFormSerializer,
    AttendanceSerializer,
    MarkAttendanceSerializer,
    WardenContactSerializer,
    HostelInfoSerializer
)

__all__ = [
    'UserSerializer',
    'StudentSummarySerializer',
    'OutpassRequestSerializer',
    'ComplaintSerializer',
    'StatusTransitionSerializer',
    'LeaveFormSerializer',
    'AttendanceSerializer',
    'MarkAttendanceSerializer',
    'WardenContactSerializer',
    'HostelInfoSerializer',
]
