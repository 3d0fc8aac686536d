"""
Status lifecycle for outpass requests and complaints.

Each entity has one transition table mapping (current status, role) to the
set of statuses that role may move it to. Everything else, including the
HTTP views, asks this module rather than re-deriving the rules.
"""
import logging

from django.db import DatabaseError, transaction

from hostel.exceptions import InvalidTransition, NotFound, PermissionDenied, PersistenceFailure
from hostel.models import Complaint, OutpassRequest, User

logger = logging.getLogger(__name__)

Role = User.Role

# Approved and Rejected are terminal.
OUTPASS_TRANSITIONS = {
    (OutpassRequest.Status.PENDING, Role.ADMIN): frozenset({
        OutpassRequest.Status.APPROVED,
        OutpassRequest.Status.REJECTED,
    }),
}

# Admins may move a complaint anywhere, including back to Open.
COMPLAINT_TRANSITIONS = {
    (current, Role.ADMIN): frozenset(Complaint.Status)
    for current in Complaint.Status
}

TRANSITION_TABLES = {
    OutpassRequest: OUTPASS_TRANSITIONS,
    Complaint: COMPLAINT_TRANSITIONS,
}

INITIAL_STATUS = {
    OutpassRequest: OutpassRequest.Status.PENDING,
    Complaint: Complaint.Status.OPEN,
}

CREATOR_ROLES = frozenset({Role.STUDENT})


def _table(model):
    try:
        return TRANSITION_TABLES[model]
    except KeyError:
        raise TypeError(f"{model.__name__} has no status lifecycle")


def transition_roles(model):
    """Roles that appear anywhere in the model's transition table."""
    return frozenset(role for _, role in _table(model))


def allowed_targets(model, current, role):
    return _table(model).get((model.Status(current), Role(role)), frozenset())


def check_transition(model, current, target, role):
    """
    Validate a transition without touching the database.

    Returns the target as the model's Status member. Raises PermissionDenied
    when the role may never change this entity's status, and
    InvalidTransition when the target is unknown or unreachable from current.
    """
    role = Role(role)
    if role not in transition_roles(model):
        raise PermissionDenied(
            f"Only administrators can change the status of a {model._meta.verbose_name}."
        )

    try:
        target = model.Status(target)
    except ValueError:
        raise InvalidTransition(f"'{target}' is not a valid {model._meta.verbose_name} status.")

    current = model.Status(current)
    if target not in allowed_targets(model, current, role):
        raise InvalidTransition(
            f"A {model._meta.verbose_name} cannot move from {current.label} to {target.label}."
        )
    return target


def transition(model, pk, target, caller):
    """
    Move one outpass request or complaint to `target` on behalf of `caller`.

    The current status is read right before validating. The write is a
    single-column update with no version check, so concurrent admins
    overwrite each other. Returns the row as re-read after the write.
    """
    if caller.role not in transition_roles(model):
        logger.warning(f"{caller!r} tried to set {model.__name__} #{pk} to {target!r}")
        raise PermissionDenied(
            f"Only administrators can change the status of a {model._meta.verbose_name}."
        )

    try:
        current = model.objects.values_list('status', flat=True).get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError):
        # ValueError/TypeError: pk is not a valid id at all
        raise NotFound(f"{model._meta.verbose_name.capitalize()} #{pk} does not exist.")

    try:
        target = check_transition(model, current, target, caller.role)
    except InvalidTransition:
        logger.warning(f"Rejected {model.__name__} #{pk} transition {current!r} -> {target!r} by {caller!r}")
        raise

    try:
        with transaction.atomic():
            updated = model.objects.filter(pk=pk).update(status=target)
    except DatabaseError as exc:
        logger.warning(f"Saving {model.__name__} #{pk} status failed: {exc}")
        raise PersistenceFailure() from exc

    if not updated:
        raise NotFound(f"{model._meta.verbose_name.capitalize()} #{pk} does not exist.")

    logger.info(f"{model.__name__} #{pk}: {current} -> {target.value} by {caller!r}")

    try:
        return model.objects.select_related('student').get(pk=pk)
    except model.DoesNotExist:
        raise NotFound(f"{model._meta.verbose_name.capitalize()} #{pk} does not exist.")


def create_request(model, caller, **fields):
    """
    Create an outpass request or complaint owned by `caller`.

    Any status in `fields` is ignored; new rows always start in the
    initial status.
    """
    if caller.role not in CREATOR_ROLES:
        raise PermissionDenied(f"Only students can submit a {model._meta.verbose_name}.")

    fields.pop('status', None)
    fields.pop('student', None)
    fields.pop('student_id', None)

    try:
        with transaction.atomic():
            instance = model.objects.create(
                student_id=caller.user_id,
                status=INITIAL_STATUS[model],
                **fields
            )
    except DatabaseError as exc:
        logger.warning(f"Creating {model.__name__} for {caller!r} failed: {exc}")
        raise PersistenceFailure() from exc

    logger.info(f"{model.__name__} #{instance.pk} submitted by {caller!r}")
    return instance
