import pytest
from django.contrib.auth import get_user_model

from hostel.services import CallerContext

User = get_user_model()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded files out of the project tree"""
    settings.MEDIA_ROOT = tmp_path / 'media'
    return settings.MEDIA_ROOT


@pytest.fixture
def api_client():
    """API client for making requests"""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def create_user():
    """Factory fixture for creating users"""
    def _create_user(username="student1", password="testpass123", role="student", **kwargs):
        kwargs.setdefault('name', username.title())
        return User.objects.create_user(
            username=username,
            password=password,
            role=role,
            **kwargs
        )
    return _create_user


@pytest.fixture
def test_user(create_user):
    """Create a default student"""
    return create_user(room_no='101', phone='9000000001', parent_phone='8000000001')


@pytest.fixture
def other_student(create_user):
    return create_user(username="student2", room_no='102')


@pytest.fixture
def admin_user(create_user):
    """Create a hostel admin"""
    return create_user(
        username="warden",
        password="adminpass123",
        role="admin",
        is_staff=True,
    )


@pytest.fixture
def student_client(api_client, test_user):
    """API client authenticated as the default student"""
    api_client.force_authenticate(user=test_user)
    return api_client


@pytest.fixture
def admin_api_client(admin_user):
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def student_caller(test_user):
    return CallerContext.from_user(test_user)


@pytest.fixture
def admin_caller(admin_user):
    return CallerContext.from_user(admin_user)
