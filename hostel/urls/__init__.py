from django.urls import path, include
from hostel.views import LoginView

urlpatterns = [
    # Custom login view (returns user data)
    path('auth/login/', LoginView.as_view(), name='login'),

    # Other dj-rest-auth endpoints (logout, user, password change)
    path('auth/', include('dj_rest_auth.urls')),

    # Outpass requests and complaints
    path('', include('hostel.urls.requests')),

    # Leave forms, attendance, hostel notice board
    path('', include('hostel.urls.records')),
]
