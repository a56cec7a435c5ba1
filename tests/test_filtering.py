# -*- coding: utf-8 -*-
"""Two-stage element filter against an in-memory model.
Runs WITHOUT Revit.
"""
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fakes import FakeElement, FakeHost, dbl, text, ref, make_type
from revit_mcp.filtering import FilterSetting, ElementFilterPipeline, run_filter_request
from revit_mcp.registry import build_default_registry
from revit_mcp.results import Invalid

REGISTRY = build_default_registry()


def door_model():
    """Three doors: widths 2.5 / 3.5 / 3.2 ft, heights 6.8 / 7.5 / 6.5 ft, plus a wall."""
    type_a = make_type(11, 'OST_Doors', name='Single 30"',
                       builtins={'DOOR_WIDTH': dbl(2.5), 'DOOR_HEIGHT': dbl(6.8)})
    type_b = make_type(12, 'OST_Doors', name='Single 42"',
                       builtins={'DOOR_WIDTH': dbl(3.5), 'DOOR_HEIGHT': dbl(7.5)})
    type_c = make_type(13, 'OST_Doors', name='Single 38"',
                       builtins={'DOOR_WIDTH': dbl(3.2), 'DOOR_HEIGHT': dbl(6.5)})
    doors = [
        FakeElement(101, 'OST_Doors', element_type=type_a, family_name='Single',
                    builtins={'ALL_MODEL_MARK': text('D1'), 'FAMILY_LEVEL_PARAM': ref(311, 'Level 1')}),
        FakeElement(102, 'OST_Doors', element_type=type_b, family_name='Single',
                    builtins={'ALL_MODEL_MARK': text('D2'), 'FAMILY_LEVEL_PARAM': ref(312, 'Level 2')}),
        FakeElement(103, 'OST_Doors', element_type=type_c, family_name='Single',
                    builtins={'ALL_MODEL_MARK': text('D3')}),
    ]
    wall = FakeElement(201, 'OST_Walls', element_class='Wall')
    return FakeHost(doors + [wall])


def ids(body):
    return [e['id'] for e in body['data']]


def run(data, host=None):
    return run_filter_request(REGISTRY, host or door_model(), data)


class TestDoorWidthScenario(unittest.TestCase):

    def test_width_greater_than_three(self):
        body, status = run({'filter_category': 'OST_Doors',
                            'parameter_filters': [{'name': 'width', 'operator': '>', 'value': 3.0}]})
        self.assertEqual(status, 200)
        self.assertEqual(ids(body), [102, 103])
        self.assertEqual(body['message'], 'Found 2 elements')
        self.assertIn('Parameter: width > 3.0', body['applied_filters'])

    def test_width_between_two_door_sizes(self):
        host = door_model()
        del host.elements[103]
        body, _ = run({'filter_category': 'doors',
                       'parameter_filters': [{'name': 'door width', 'operator': '>', 'value': 3.0}]},
                      host)
        self.assertEqual(ids(body), [102])
        width = next(p for p in body['data'][0]['parameters'] if p['name'] == 'width')
        self.assertEqual(width['value'], 3.5)
        self.assertEqual(width['level'], 'type')

    def test_predicates_are_a_conjunction(self):
        wide = {'name': 'width', 'operator': '>', 'value': 3.0}
        short = {'name': 'height', 'operator': '<', 'value': 7.0}
        only_wide, _ = run({'filter_category': 'OST_Doors', 'parameter_filters': [wide]})
        only_short, _ = run({'filter_category': 'OST_Doors', 'parameter_filters': [short]})
        both, _ = run({'filter_category': 'OST_Doors', 'parameter_filters': [wide, short]})
        self.assertEqual(set(ids(both)), set(ids(only_wide)) & set(ids(only_short)))
        self.assertEqual(ids(both), [103])

    def test_natural_language_sets_category_and_predicate(self):
        body, status = run({'natural_language_query': 'doors wider than 3 feet'})
        self.assertEqual(status, 200)
        self.assertEqual(ids(body), [102, 103])
        self.assertIn('Category: OST_Doors', body['applied_filters'])

    def test_natural_language_ignored_when_predicates_given(self):
        body, _ = run({'filter_category': 'OST_Doors',
                       'natural_language_query': 'doors wider than 3 feet',
                       'parameter_filters': [{'name': 'mark', 'operator': '=', 'value': 'd1'}]})
        self.assertEqual(ids(body), [101])


class TestValidation(unittest.TestCase):

    def assertRejected(self, data, fragment):
        body, status = run(data)
        self.assertEqual(status, 400)
        self.assertFalse(body['success'])
        self.assertIn(fragment, body['message'])

    def test_needs_types_or_instances(self):
        self.assertRejected({'filter_category': 'OST_Doors', 'include_instances': False},
                            'Must include at least one of element types or element instances')

    def test_needs_a_condition(self):
        self.assertRejected({}, 'Must specify at least one filter condition')

    def test_types_only_rejects_instance_filters(self):
        self.assertRejected({'filter_category': 'OST_Doors', 'include_types': True,
                             'include_instances': False, 'filter_visible_in_current_view': True},
                            'view visibility filtering')

    def test_bounding_box_needs_both_points(self):
        self.assertRejected({'filter_category': 'OST_Doors', 'bounding_box_min': {'x': 0, 'y': 0, 'z': 0}},
                            'Both minimum and maximum point coordinates must be set')

    def test_bounding_box_min_above_max(self):
        self.assertRejected({'filter_category': 'OST_Doors',
                             'bounding_box_min': {'x': 10, 'y': 0, 'z': 0},
                             'bounding_box_max': {'x': 0, 'y': 5, 'z': 5}},
                            'Minimum point coordinates must be less than or equal')

    def test_unknown_category(self):
        self.assertRejected({'filter_category': 'OST_Bogus'}, 'Invalid category: OST_Bogus')

    def test_unknown_class(self):
        self.assertRejected({'filter_element_type': 'Bogus'}, "Could not find type 'Bogus'")

    def test_one_to_many_predicate_name(self):
        self.assertRejected({'filter_category': 'OST_Doors',
                             'parameter_filters': [{'name': 'phase', 'operator': '=', 'value': 'New'}]},
                            'refers to several parameters')

    def test_bad_predicate(self):
        self.assertRejected({'filter_category': 'OST_Doors',
                             'parameter_filters': [{'name': 'width', 'operator': '~', 'value': 1}]},
                            'parameter_filters[0]')

    def test_bad_detail_level(self):
        self.assertRejected({'filter_category': 'OST_Doors', 'detail_level': 'everything'},
                            'detail_level must be one of')


def test_truncation_reports_total():
    body, status = run({'filter_category': 'OST_Doors', 'max_elements': 2})
    assert status == 200
    assert body['total'] == 3
    assert body['count'] == 2
    assert 'Results limited to 2 of 3 elements' in body['message']


def test_types_and_instances_are_separate_queries():
    host = door_model()
    body, _ = run({'filter_category': 'OST_Doors', 'include_types': True}, host)
    assert [q.element_types for q in host.queries] == [True, False]
    assert sorted(ids(body)) == [11, 12, 13, 101, 102, 103]


def test_family_symbol_filter():
    body, _ = run({'filter_family_symbol_id': 12})
    assert ids(body) == [102]
    assert 'Family type: 12' in body['applied_filters']


def test_missing_family_symbol_is_skipped_with_warning():
    body, status = run({'filter_category': 'OST_Doors', 'filter_family_symbol_id': 999})
    assert status == 200
    assert len(body['data']) == 3
    assert 'Family type filter skipped' in body['warnings'][0]


def test_visible_in_view_needs_active_view():
    host = door_model()
    host.active_view = False
    run({'filter_category': 'OST_Doors', 'filter_visible_in_current_view': True}, host)
    assert host.queries[0].visible_in_view is False


def test_element_class_filter():
    body, _ = run({'filter_element_type': 'Wall'})
    assert ids(body) == [201]


def test_bounding_box_is_converted_to_feet():
    setting = FilterSetting.from_request({'filter_category': 'OST_Doors',
                                          'bounding_box_min': {'x': 0, 'y': 0, 'z': 0},
                                          'bounding_box_max': {'x': 304.8, 'y': 609.6, 'z': 3048}})
    lo, hi = setting.bounding_box_feet()
    assert lo == (0.0, 0.0, 0.0)
    assert [round(v, 6) for v in hi] == [1.0, 2.0, 10.0]


def test_tabular_response():
    body, _ = run({'filter_category': 'OST_Doors', 'response_format': 'tabular',
                   'parameter_filters': [{'name': 'width', 'operator': '>', 'value': 3.0}]})
    table = body['data']
    assert table['elements'] == [102, 103]
    assert table['commonProperties']['familyName'] == 'Single'
    assert table['parameters']['width']['values'] == {'3.5': [102], '3.2': [103]}


def test_pipeline_returns_invalid_for_bad_setting():
    pipeline = ElementFilterPipeline(REGISTRY, door_model())
    outcome = pipeline.filter(FilterSetting())
    assert isinstance(outcome, Invalid)


def test_level_reference_matches_by_name():
    body, status = run({'filter_category': 'OST_Doors',
                        'parameter_filters': [{'name': 'level', 'operator': '=', 'value': 'Level 1'}]})
    assert status == 200
    assert ids(body) == [101]


def test_string_flags_are_parsed():
    host = door_model()
    body, _ = run({'filter_category': 'OST_Doors', 'include_types': 'false',
                   'include_instances': 'true'}, host)
    assert [q.element_types for q in host.queries] == [False]
    assert sorted(ids(body)) == [101, 102, 103]


def test_unrecognised_flag_is_rejected():
    body, status = run({'filter_category': 'OST_Doors', 'include_types': 'sometimes'})
    assert status == 400
    assert body['message'] == 'include_types must be true or false'
