from django.urls import path, include
from rest_framework.routers import DefaultRouter
from hostel.views import LeaveFormViewSet, AttendanceViewSet, HostelInfoViewSet

router = DefaultRouter()
router.register(r'leave-forms', LeaveFormViewSet, basename='leave-form')
router.register(r'attendance', AttendanceViewSet, basename='attendance')
router.register(r'hostel-info', HostelInfoViewSet, basename='hostel-info')

urlpatterns = [
    path('', include(router.urls)),
]
