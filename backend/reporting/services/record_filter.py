"""Predicate filtering over dashboard record lists.

Records are plain mappings (serializer output) or objects; every lookup goes
through `field_text`, so a missing or None value is matched as ''. Filtering
never reorders: the result is the input with rows dropped.
"""
from typing import Any, Iterable, List, Optional, Sequence

ALL = 'all'

REPORT_SEARCH_FIELDS = ('module_name', 'program_name', 'lecturer_name', 'topic_taught')
CHALLENGE_SEARCH_FIELDS = ('title', 'module_name', 'description')
RATING_SEARCH_FIELDS = ('module_name', 'program_name', 'comments', 'rated_by_name')
# summaries match on module metadata only, so every group keeps all its ratings
RATING_GROUP_SEARCH_FIELDS = ('module_name', 'program_name', 'program_code')


def field_text(record: Any, field: str) -> str:
    if isinstance(record, dict):
        value = record.get(field)
    else:
        value = getattr(record, field, None)
    if value is None:
        return ''
    return str(value)


def is_unset(value: Optional[str]) -> bool:
    """True for facet values that should not constrain the result."""
    if value is None:
        return True
    s = str(value).strip()
    return s == '' or s.lower() == ALL


def matches_search(record: Any, search: str, fields: Sequence[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(needle in field_text(record, f).lower() for f in fields)


def search_records(records: Iterable[Any], search: Optional[str], fields: Sequence[str]) -> List[Any]:
    return [r for r in records if matches_search(r, search or '', fields)]


def filter_records(
    records: Iterable[Any],
    *,
    search: Optional[str] = None,
    fields: Sequence[str] = (),
    status: Optional[str] = None,
    program: Optional[str] = None,
    date_prefix: Optional[str] = None,
    status_field: str = 'status',
    program_field: str = 'program_code',
    date_field: str = 'date_of_lecture',
) -> List[Any]:
    """Keep records matching the search AND every active facet.

    - search: case-insensitive substring over any of `fields`
    - status / program: exact match on `status_field` / `program_field`
    - date_prefix: `date_field` (ISO text) starts with the given prefix,
      so '2024-03' selects a month and '2024' a year
    """
    predicates = []
    if search:
        predicates.append(lambda r: matches_search(r, search, fields))
    if not is_unset(status):
        wanted_status = str(status).strip()
        predicates.append(lambda r: field_text(r, status_field) == wanted_status)
    if not is_unset(program):
        wanted_program = str(program).strip()
        predicates.append(lambda r: field_text(r, program_field) == wanted_program)
    if not is_unset(date_prefix):
        prefix = str(date_prefix).strip()
        predicates.append(lambda r: field_text(r, date_field).startswith(prefix))

    return [r for r in records if all(p(r) for p in predicates)]


def distinct_values(records: Iterable[Any], field: str) -> List[str]:
    """Distinct non-empty values of `field`, first-seen order (facet dropdowns)."""
    seen = []
    for r in records:
        v = field_text(r, field)
        if v and v not in seen:
            seen.append(v)
    return seen
