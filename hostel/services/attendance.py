import logging

from django.db import IntegrityError, DatabaseError, transaction
from django.utils import timezone

from hostel.exceptions import PermissionDenied, PersistenceFailure
from hostel.models import Attendance

logger = logging.getLogger(__name__)


def format_location(latitude, longitude):
    return f"{float(latitude):.6f}, {float(longitude):.6f}"


def has_marked(caller, on_date=None):
    on_date = on_date or timezone.localdate()
    return Attendance.objects.filter(student_id=caller.user_id, date=on_date).exists()


def mark_attendance(caller, latitude, longitude, on_date=None):
    """
    Record that the calling student is present today at the given coordinates.

    The database allows one row per student per day; a second attempt
    raises PersistenceFailure and leaves the first row untouched.
    """
    if not caller.is_student:
        raise PermissionDenied("Only students can mark their own attendance.")

    on_date = on_date or timezone.localdate()
    try:
        with transaction.atomic():
            record = Attendance.objects.create(
                date=on_date,
                student_id=caller.user_id,
                location=format_location(latitude, longitude),
                marked_by_id=caller.user_id,
            )
    except IntegrityError as exc:
        logger.info(f"{caller!r} already marked attendance for {on_date}")
        raise PersistenceFailure("You have already marked attendance for today!") from exc
    except DatabaseError as exc:
        logger.warning(f"Marking attendance for {caller!r} failed: {exc}")
        raise PersistenceFailure("Failed to mark attendance. Please try again.") from exc

    logger.info(f"Attendance #{record.pk} marked by {caller!r} at {record.location}")
    return record
