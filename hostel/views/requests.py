from rest_framework import mixins, permissions, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hostel.models import OutpassRequest, Complaint
from hostel.permissions import IsOwnerOrHostelAdmin
from hostel.serializers import (
    OutpassRequestSerializer,
    ComplaintSerializer,
    StatusTransitionSerializer
)
from hostel.services import CallerContext
from hostel.services import lifecycle


class StatusLifecycleViewSet(mixins.CreateModelMixin,
                             mixins.ListModelMixin,
                             mixins.RetrieveModelMixin,
                             viewsets.GenericViewSet):
    """
    Shared behaviour for entities whose status follows a lifecycle.
    - Students: see own rows, submit new ones.
    - Admin: see all, change status.
    There is no update or delete endpoint; status changes go through
    `status/` and the lifecycle service.
    """
    permission_classes = [permissions.IsAuthenticated, IsOwnerOrHostelAdmin]
    filterset_fields = ['status']
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        user = self.request.user
        queryset = self.queryset.select_related('student')
        if user.role == 'admin':
            return queryset
        return queryset.filter(student=user)

    def perform_create(self, serializer):
        caller = CallerContext.from_request(self.request)
        serializer.instance = lifecycle.create_request(
            self.queryset.model, caller, **serializer.validated_data
        )

    def _transition(self, request, pk, target):
        caller = CallerContext.from_request(request)
        instance = lifecycle.transition(self.queryset.model, pk, target, caller)
        # Actions may swap serializer_class; respond with the entity's own.
        serializer = self.__class__.serializer_class(
            instance, context=self.get_serializer_context()
        )
        return Response(serializer.data)

    @action(detail=True, methods=['post'], url_path='status', url_name='status',
            serializer_class=StatusTransitionSerializer)
    def set_status(self, request, pk=None):
        """
        Move the row to the requested status and return it as stored.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._transition(request, pk, serializer.validated_data['status'])


class OutpassRequestViewSet(StatusLifecycleViewSet):
    queryset = OutpassRequest.objects.all()
    serializer_class = OutpassRequestSerializer

    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        return self._transition(request, pk, OutpassRequest.Status.APPROVED)

    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        return self._transition(request, pk, OutpassRequest.Status.REJECTED)


class ComplaintViewSet(StatusLifecycleViewSet):
    queryset = Complaint.objects.all()
    serializer_class = ComplaintSerializer
