from rest_framework.exceptions import NotAuthenticated

from hostel.models import User


class CallerContext:
    """
    Who is performing an operation.

    Services take one of these explicitly instead of reaching for the
    request, so they can be driven from tests and management commands.
    """

    def __init__(self, user_id, role, username=''):
        self.user_id = user_id
        self.role = User.Role(role)
        self.username = username

    @classmethod
    def from_user(cls, user):
        return cls(user_id=user.pk, role=user.role, username=user.username)

    @classmethod
    def from_request(cls, request):
        user = request.user
        if not user or not user.is_authenticated:
            raise NotAuthenticated()
        return cls.from_user(user)

    @property
    def is_admin(self):
        return self.role == User.Role.ADMIN

    @property
    def is_student(self):
        return self.role == User.Role.STUDENT

    def __repr__(self):
        return f"CallerContext(user_id={self.user_id!r}, role={self.role.value!r})"
