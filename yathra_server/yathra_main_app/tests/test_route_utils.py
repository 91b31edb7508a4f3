"""Tests for route string parsing and matching"""

from django.test import SimpleTestCase
from ..utils.route_utils import split_route, route_matches, routes_overlap


class SplitRouteTest(SimpleTestCase):
    def test_each_separator(self):
        for route in ['Colombo to Kandy', 'Colombo - Kandy', 'Colombo → Kandy', 'Colombo -> Kandy', 'Colombo | Kandy']:
            self.assertEqual(split_route(route), ('Colombo', 'Kandy'), route)

    def test_no_separator(self):
        self.assertIsNone(split_route('Colombo Kandy'))
        self.assertIsNone(split_route(''))

    def test_first_separator_in_list_order_wins(self):
        self.assertEqual(split_route('Colombo to Kandy - Express'), ('Colombo', 'Kandy - Express'))
        self.assertEqual(split_route('Galle - Matara to Colombo'), ('Galle - Matara', 'Colombo'))

    def test_splits_at_first_occurrence(self):
        self.assertEqual(split_route('Colombo to Kandy to Jaffna'), ('Colombo', 'Kandy to Jaffna'))


class RouteMatchesTest(SimpleTestCase):
    def test_no_filters_match_everything(self):
        self.assertTrue(route_matches('Colombo to Kandy'))
        self.assertTrue(route_matches(''))

    def test_single_filter_matches_whole_route(self):
        self.assertTrue(route_matches('Colombo to Kandy', from_city='colombo'))
        self.assertTrue(route_matches('Colombo to Kandy', from_city='Kandy'))
        self.assertTrue(route_matches('Colombo to Kandy', to_city='Colombo'))
        self.assertFalse(route_matches('Colombo to Kandy', to_city='Galle'))

    def test_both_filters_match_parsed_halves(self):
        self.assertTrue(route_matches('Colombo to Kandy', 'Colombo', 'Kandy'))
        self.assertFalse(route_matches('Colombo to Kandy', 'Colombo', 'Galle'))
        self.assertFalse(route_matches('Colombo to Kandy', 'Kandy', 'Colombo'))

    def test_both_filters_need_a_separator(self):
        self.assertFalse(route_matches('Colombo Kandy', 'Colombo', 'Kandy'))

    def test_return_route_matches_reverse(self):
        self.assertTrue(route_matches('Colombo to Kandy return', 'Kandy', 'Colombo'))


class RoutesOverlapTest(SimpleTestCase):
    def test_bidirectional(self):
        self.assertTrue(routes_overlap('Colombo to Kandy', 'colombo'))
        self.assertTrue(routes_overlap('Kandy', 'Colombo to Kandy'))
        self.assertFalse(routes_overlap('Colombo to Kandy', 'Galle'))
        self.assertFalse(routes_overlap('', 'Galle'))
