from django.urls import path, include
from rest_framework.routers import DefaultRouter
from hostel.views import OutpassRequestViewSet, ComplaintViewSet

router = DefaultRouter()
# /api/outpasses/
router.register(r'outpasses', OutpassRequestViewSet, basename='outpass')
# /api/complaints/
router.register(r'complaints', ComplaintViewSet, basename='complaint')

urlpatterns = [
    path('', include(router.urls)),
]
