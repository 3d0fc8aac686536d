from rest_framework import permissions


class IsHostelAdmin(permissions.BasePermission):
    """
    Permission check for hostel administrators only.
    Allows only authenticated users with role='admin'.
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        return getattr(user, 'role', None) == 'admin'


class IsHostelAdminOrReadOnly(permissions.BasePermission):
    """
    Permission check that allows:
    - Admins: Full access
    - Other authenticated users: Read-only access (GET)
    - Unauthenticated users: No access
    """

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        if request.method in permissions.SAFE_METHODS:
            return True

        return request.user.role == 'admin'


class IsStudentOrReadOnly(permissions.BasePermission):
    """
    Students may submit; everyone authenticated may read.
    """

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        if request.method in permissions.SAFE_METHODS:
            return True

        return request.user.role == 'student'


class IsOwnerOrHostelAdmin(permissions.BasePermission):
    """Object-level: the student who owns the row, or any admin."""

    def has_object_permission(self, request, view, obj):
        if getattr(request.user, 'role', None) == 'admin':
            return True
        return getattr(obj, 'student_id', None) == request.user.pk


class IsStudent(permissions.BasePermission):
    """Allows only authenticated users with role='student'."""

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        return getattr(user, 'role', None) == 'student'
