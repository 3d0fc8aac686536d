import logging
from datetime import date

from django.utils import timezone
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response

from hostel.models import LeaveForm, Attendance, HostelInfo, User
from hostel.permissions import IsHostelAdmin, IsHostelAdminOrReadOnly, IsStudent, IsStudentOrReadOnly
from hostel.serializers import (
    LeaveFormSerializer,
    AttendanceSerializer,
    MarkAttendanceSerializer,
    HostelInfoSerializer
)
from hostel.services import CallerContext
from hostel.services.attendance import mark_attendance, has_marked

logger = logging.getLogger(__name__)


def parse_date_param(request, name='date'):
    value = request.query_params.get(name)
    if not value:
        return timezone.localdate()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError({name: 'Use the YYYY-MM-DD format.'})


class LeaveFormViewSet(mixins.CreateModelMixin,
                       mixins.ListModelMixin,
                       viewsets.GenericViewSet):
    """
    Uploaded leave forms.
    - Students: upload and list their own.
    - Admin: list everything.
    """
    serializer_class = LeaveFormSerializer
    permission_classes = [IsStudentOrReadOnly]
    parser_classes = (MultiPartParser, FormParser)

    def get_queryset(self):
        user = self.request.user
        queryset = LeaveForm.objects.select_related('student')
        if user.role == 'admin':
            return queryset
        return queryset.filter(student=user)

    def perform_create(self, serializer):
        instance = serializer.save(student=self.request.user)
        logger.info(f"Leave form #{instance.pk} uploaded by {self.request.user.username}: {instance.file.name}")


class AttendanceViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Daily attendance.
    - Students: mark once per day from their device location, list own history.
    - Admin: list the register for one date (?date=YYYY-MM-DD, default today).
    """
    serializer_class = AttendanceSerializer
    permission_classes = [IsStudentOrReadOnly]

    def get_queryset(self):
        user = self.request.user
        queryset = Attendance.objects.select_related('student')
        if user.role == 'admin':
            return queryset.filter(date=parse_date_param(self.request))
        return queryset.filter(student=user)

    def create(self, request, *args, **kwargs):
        serializer = MarkAttendanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = mark_attendance(
            CallerContext.from_request(request),
            serializer.validated_data['latitude'],
            serializer.validated_data['longitude'],
        )
        return Response(AttendanceSerializer(record).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], permission_classes=[IsStudent])
    def today(self, request):
        """Whether the calling student has already marked attendance today"""
        caller = CallerContext.from_request(request)
        today = timezone.localdate()
        marked = has_marked(caller, today)
        record = Attendance.objects.filter(student_id=caller.user_id, date=today).first() if marked else None
        return Response({
            'date': today,
            'marked': marked,
            'record': AttendanceSerializer(record).data if record else None,
        })

    @action(detail=False, methods=['get'], permission_classes=[IsHostelAdmin])
    def summary(self, request):
        """Head count for one date against the number of students"""
        day = parse_date_param(request)
        return Response({
            'date': day,
            'marked': Attendance.objects.filter(date=day).count(),
            'total_students': User.objects.filter(role=User.Role.STUDENT).count(),
        })


class HostelInfoViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Daily notice board. Everyone reads, admins publish today's entry.
    """
    queryset = HostelInfo.objects.all()
    serializer_class = HostelInfoSerializer
    permission_classes = [IsHostelAdminOrReadOnly]

    @action(detail=False, methods=['get', 'put'])
    def today(self, request):
        today = timezone.localdate()

        if request.method == 'GET':
            info = HostelInfo.objects.filter(date=today).first()
            if info is None:
                return Response(
                    {'detail': 'No hostel information has been published for today.'},
                    status=status.HTTP_404_NOT_FOUND
                )
            return Response(self.get_serializer(info).data)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        info, created = HostelInfo.objects.update_or_create(
            date=today,
            # only the fields sent are changed; the rest keep today's values
            defaults=dict(serializer.validated_data)
        )
        logger.info(f"Hostel info for {today} {'created' if created else 'updated'} by {request.user.username}")
        return Response(
            self.get_serializer(info).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )
