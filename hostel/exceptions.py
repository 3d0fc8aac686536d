"""
Errors raised by the hostel services.

They extend DRF's exception hierarchy, so a view can let them propagate and
the client receives the status code and a `detail` message.
"""
from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, status


class PermissionDenied(exceptions.PermissionDenied):
    """Caller's role may not perform the operation."""
    default_detail = _('Your role is not allowed to perform this action.')
    default_code = 'permission_denied'


class InvalidTransition(exceptions.APIException):
    """Requested status cannot be reached from the current status."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = _('This status change is not allowed.')
    default_code = 'invalid_transition'


class PersistenceFailure(exceptions.APIException):
    """The store refused the write."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = _('The change could not be saved. Please try again.')
    default_code = 'persistence_failure'


class NotFound(PersistenceFailure):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _('The record no longer exists.')
    default_code = 'not_found'
