from django.test import SimpleTestCase

from reporting.services.record_filter import REPORT_SEARCH_FIELDS
from reporting.services.view_state import (
    RESET,
    SET_DATE,
    SET_PROGRAM,
    SET_SEARCH,
    SET_STATUS,
    Action,
    ListViewState,
    apply_state,
    reduce,
    state_from_query,
)


class ReduceTests(SimpleTestCase):
    def test_initial_state_is_unfiltered(self):
        state = ListViewState()
        self.assertEqual((state.search, state.status, state.program, state.date), ('', 'all', 'all', ''))

    def test_actions_return_new_states(self):
        s0 = ListViewState()
        s1 = reduce(s0, Action(SET_SEARCH, 'web'))
        s2 = reduce(s1, Action(SET_STATUS, 'reviewed'))
        s3 = reduce(s2, Action(SET_PROGRAM, 'BSCIT'))
        s4 = reduce(s3, Action(SET_DATE, '2024-03'))
        self.assertEqual(s0, ListViewState())
        self.assertEqual(s4, ListViewState(search='web', status='reviewed', program='BSCIT', date='2024-03'))

    def test_blank_facet_means_all(self):
        state = reduce(ListViewState(status='pending'), Action(SET_STATUS, ''))
        self.assertEqual(state.status, 'all')

    def test_reset(self):
        state = ListViewState(search='x', status='pending')
        self.assertEqual(reduce(state, Action(RESET)), ListViewState())

    def test_unknown_action(self):
        with self.assertRaises(ValueError):
            reduce(ListViewState(), Action('set_colour', 'red'))

    def test_state_is_immutable(self):
        state = ListViewState()
        with self.assertRaises(Exception):
            state.search = 'x'


class QueryTests(SimpleTestCase):
    def test_state_from_query_ignores_unknown_params(self):
        state = state_from_query({'search': 'joins', 'program': 'BSCSM', 'page': '2'})
        self.assertEqual(state, ListViewState(search='joins', program='BSCSM'))

    def test_apply_state(self):
        rows = [
            {'module_name': 'Web', 'status': 'pending', 'program_code': 'BSCIT', 'date_of_lecture': '2024-03-05'},
            {'module_name': 'Web', 'status': 'reviewed', 'program_code': 'BSCIT', 'date_of_lecture': '2024-03-06'},
        ]
        state = state_from_query({'search': 'web', 'status': 'reviewed'})
        self.assertEqual(apply_state(state, rows, REPORT_SEARCH_FIELDS), [rows[1]])
