from typing import Optional

from reporting.exceptions import StaleRevision


def check_revision(obj, expected: Optional[int]) -> None:
    """Reject a write based on an older copy of `obj`.

    `expected` is the revision the caller last read. None skips the check.
    """
    if expected is None:
        return
    if int(expected) != obj.revision:
        raise StaleRevision(
            f'{obj.__class__.__name__} {obj.pk} is at revision {obj.revision}, request was based on {expected}.'
        )
