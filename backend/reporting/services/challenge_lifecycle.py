"""Status changes for challenges.

Any allowed status can be set from any other; only values outside the
vocabulary are refused. The persistence layer stamps `resolved_date`.
"""
import logging
from typing import Optional

from django.db import transaction

from reporting.exceptions import InvalidChallengeStatus
from reporting.models import Challenge
from reporting.services.revisions import check_revision

logger = logging.getLogger(__name__)

STATUSES = tuple(Challenge.Status.values)


def normalize_status(raw) -> str:
    value = str(raw or '').strip().lower().replace('-', '_').replace(' ', '_')
    if value not in STATUSES:
        raise InvalidChallengeStatus(
            f"Invalid status '{raw}'. Allowed: {', '.join(STATUSES)}"
        )
    return value


@transaction.atomic
def set_status(challenge: Challenge, status, feedback: Optional[str] = None,
               expected_revision: Optional[int] = None, acted_by=None) -> Challenge:
    """Move `challenge` to `status`, optionally attaching feedback.

    A blank feedback string leaves any earlier feedback in place.
    """
    new_status = normalize_status(status)
    challenge = Challenge.objects.select_for_update().get(pk=challenge.pk)
    check_revision(challenge, expected_revision)

    old_status = challenge.status
    challenge.status = new_status
    fields = ['status', 'revision', 'updated_at']
    if feedback is not None and str(feedback).strip():
        challenge.feedback = str(feedback).strip()
        fields.append('feedback')
    challenge.revision += 1
    challenge.save(update_fields=fields)

    logger.info(
        'Challenge %s status %s -> %s by user id=%s',
        challenge.pk, old_status, new_status, getattr(acted_by, 'id', None),
    )
    return challenge
