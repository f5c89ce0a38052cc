"""Immutable per-screen list state driven by named actions.

A screen's filter controls map to one `ListViewState`. The only way to get a
new state is `reduce(state, action)`, so every combination of fields is one
that some sequence of actions produced.
"""
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Sequence

from .record_filter import ALL, filter_records

SET_SEARCH = 'set_search'
SET_STATUS = 'set_status'
SET_PROGRAM = 'set_program'
SET_DATE = 'set_date'
RESET = 'reset'

# query parameter -> action
QUERY_ACTIONS = (
    ('search', SET_SEARCH),
    ('status', SET_STATUS),
    ('program', SET_PROGRAM),
    ('date', SET_DATE),
)


@dataclass(frozen=True)
class ListViewState:
    search: str = ''
    status: str = ALL
    program: str = ALL
    date: str = ''


@dataclass(frozen=True)
class Action:
    type: str
    value: str = ''


def _facet(value) -> str:
    s = str(value or '').strip()
    return s if s else ALL


def reduce(state: ListViewState, action: Action) -> ListViewState:
    if action.type == SET_SEARCH:
        return replace(state, search=str(action.value or ''))
    if action.type == SET_STATUS:
        return replace(state, status=_facet(action.value))
    if action.type == SET_PROGRAM:
        return replace(state, program=_facet(action.value))
    if action.type == SET_DATE:
        return replace(state, date=str(action.value or '').strip())
    if action.type == RESET:
        return ListViewState()
    raise ValueError(f'Unknown list action: {action.type!r}')


def actions_from_query(params: Mapping[str, Any]) -> List[Action]:
    return [Action(action_type, params[key]) for key, action_type in QUERY_ACTIONS if key in params]


def state_from_query(params: Mapping[str, Any], initial: ListViewState = ListViewState()) -> ListViewState:
    state = initial
    for action in actions_from_query(params):
        state = reduce(state, action)
    return state


def apply_state(state: ListViewState, records: Iterable[Any], search_fields: Sequence[str], **field_names) -> List[Any]:
    return filter_records(
        records,
        search=state.search,
        fields=search_fields,
        status=state.status,
        program=state.program,
        date_prefix=state.date,
        **field_names,
    )
