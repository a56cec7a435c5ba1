# -*- coding: utf-8 -*-
"""Parameter, graphics, selection and deletion requests against an in-memory model.
Runs WITHOUT Revit.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fakes import FakeElement, FakeHost, FakeTransaction, dbl, integer, text, make_type
from revit_mcp import parameter_service as service
from revit_mcp.category_mappings import ALL_MAPPINGS
from revit_mcp.element_info import VIEW
from revit_mcp.element_service import selected_elements_request, current_view_request, delete_elements_request
from revit_mcp.graphics import color_elements_request, clear_overrides_request
from revit_mcp.registry import build_default_registry

REGISTRY = build_default_registry()


def wall_host():
    wall_type = make_type(200, 'OST_Walls', builtins={
        'WALL_ATTR_WIDTH_PARAM': dbl(0.5, '6"'),
        'ANALYTICAL_HEAT_TRANSFER_COEFFICIENT': dbl(0.35),
    })
    wall = FakeElement(100, 'OST_Walls', element_type=wall_type, element_class='Wall', builtins={
        'CURVE_ELEM_LENGTH': dbl(20.0),
        'PHASE_CREATED': integer(7, 'New Construction'),
        'ALL_MODEL_MARK': text('W-1'),
    }, named={'Fire Compartment': text('FC-3')})
    return FakeHost([wall])


@pytest.fixture(autouse=True)
def clear_transaction_log():
    FakeTransaction.log[:] = []


class TestCategories:

    def test_list_categories(self):
        body, status = service.list_categories(REGISTRY)
        assert status == 200
        assert len(body['categories']) == len(ALL_MAPPINGS)
        assert 'mark' in body['shared_parameters']

    def test_resolve_names(self):
        body, status = service.resolve_names_request(
            REGISTRY, {'category': 'walls', 'parameter_names': ['U Value', 'zzz']})
        assert status == 200
        assert body['category'] == 'OST_Walls'
        assert body['has_mapping'] is True
        assert body['resolved_names'] == ['heat transfer coefficient']
        assert body['unresolved'] == ['zzz']
        assert body['message'] == 'Resolved 1 of 2 parameter names (no match for: zzz)'

    def test_resolve_names_accepts_terms(self):
        body, _ = service.resolve_names_request(REGISTRY, {'category': 'OST_Walls', 'terms': ['tag']})
        assert body['resolved_names'] == ['mark']

    @pytest.mark.parametrize('data,fragment', [
        ({'parameter_names': ['width']}, 'category is required'),
        ({'category': 'walls', 'parameter_names': 'width'}, 'parameter_names must be a list'),
        ({'category': 'walls', 'parameter_names': ['  ']}, 'parameter_names[0]'),
    ])
    def test_resolve_names_rejects(self, data, fragment):
        body, status = service.resolve_names_request(REGISTRY, data)
        assert status == 400
        assert fragment in body['message']


class TestReadParameters:

    def test_named_parameters_and_missing_ids(self):
        body, status = service.element_parameters_request(
            REGISTRY, wall_host(), {'element_ids': [100, 999], 'parameter_names': ['width', 'u value']})
        assert status == 200
        assert body['not_found'] == [999]
        assert body['message'] == 'Read parameters for 1 elements; 1 ids not found'
        params = {p['name']: p for p in body['data'][0]['parameters']}
        assert params['width']['displayValue'] == '6"'
        assert params['heat transfer coefficient']['level'] == 'type'

    def test_defaults_to_common_parameters(self):
        body, _ = service.element_parameters_request(REGISTRY, wall_host(), {'element_ids': [100]})
        names = [p['name'] for p in body['data'][0]['parameters']]
        assert 'width' in names
        assert 'length' in names

    def test_tabular(self):
        body, _ = service.element_parameters_request(
            REGISTRY, wall_host(),
            {'element_ids': [100], 'parameter_names': ['length'], 'response_format': 'tabular'})
        assert body['data']['parameters']['length']['values'] == {'20': [100]}

    @pytest.mark.parametrize('data,fragment', [
        ({'element_ids': []}, 'element_ids must be a non-empty list'),
        ({'element_ids': [0]}, 'element_ids[0] must be a positive integer'),
        ({'element_ids': [100], 'detail_level': 'all'}, 'detail_level must be one of'),
        ({'element_ids': [100], 'response_format': 'csv'}, 'response_format must be one of'),
    ])
    def test_rejects(self, data, fragment):
        body, status = service.element_parameters_request(REGISTRY, wall_host(), data)
        assert status == 400
        assert fragment in body['message']


class TestSetParameters:

    def test_batch_with_per_item_errors(self):
        host = wall_host()
        body, status = service.set_parameters_request(REGISTRY, host, {'updates': [
            {'element_id': 100, 'parameter': 'width', 'value': 6},
            {'element_id': 100, 'parameter': 'tag', 'value': 'W-2'},
            {'element_id': 999, 'parameter': 'width', 'value': 1},
            {'element_id': 100, 'parameter': 'phase', 'value': 'New'},
            {'element_id': 100, 'parameter': 'no such thing', 'value': 1},
        ]})
        assert status == 200
        assert body['message'] == 'Updated 2 of 5 parameters'
        assert body['summary'] == {'total': 5, 'success': 2, 'errors': 3}
        assert host.writes == [(200, 'WALL_ATTR_WIDTH_PARAM', 0.5), (100, 'ALL_MODEL_MARK', 'W-2')]

        width, mark, missing, phase, unknown = body['results']
        assert (width['parameter'], width['level'], width['stage']) == ('width', 'type', 'category')
        assert width['previous'] == '6"'
        assert mark['stage'] == 'shared'
        assert missing['message'] == 'Element 999 not found'
        assert 'phase created' in phase['message']
        assert unknown['message'].startswith("Parameter 'no such thing' not found")
        assert FakeTransaction.log == [('start', 'Set Element Parameters'),
                                       ('commit', 'Set Element Parameters')]

    def test_generic_parameter_written_by_name(self):
        host = wall_host()
        service.set_parameters_request(REGISTRY, host, {'updates': [
            {'element_id': 100, 'parameter': 'fire compartment', 'value': 'FC-4'}]})
        assert host.writes == [(100, 'fire compartment', 'FC-4')]

    def test_read_only_parameter(self):
        host = wall_host()
        host.get_element(100).read_only.add('ALL_MODEL_MARK')
        body, _ = service.set_parameters_request(REGISTRY, host, {'updates': [
            {'element_id': 100, 'parameter': 'mark', 'value': 'W-9'}]})
        assert body['results'][0]['status'] == 'error'
        assert 'read-only' in body['results'][0]['message']
        assert host.writes == []

    def test_rejects_malformed_updates(self):
        body, status = service.set_parameters_request(REGISTRY, wall_host(), {'updates': [{'element_id': 1}]})
        assert status == 400
        assert body['message'] == "updates[0] missing 'parameter'"
        assert FakeTransaction.log == []


class TestGraphics:

    def test_color_defaults_to_red(self):
        host = wall_host()
        body, status = color_elements_request(host, {'element_ids': [100, 999]})
        assert status == 200
        assert host.overrides == {100: (255, 0, 0)}
        assert body['summary']['errors'] == 1
        assert body['results'][0]['color'] == [255, 0, 0]
        assert FakeTransaction.log[-1] == ('commit', 'Color Elements')

    def test_color_rejects_bad_input(self):
        body, status = color_elements_request(wall_host(), {'element_ids': [100], 'color': [300, 0, 0]})
        assert status == 400
        assert 'color components' in body['message']

    def test_no_active_view(self):
        host = wall_host()
        host.active_view = False
        body, status = color_elements_request(host, {'element_ids': [100]})
        assert (status, body['message']) == (400, 'No active view found.')

    def test_clear_every_element_in_view(self):
        host = wall_host()
        host.overrides[100] = (0, 255, 0)
        body, _ = clear_overrides_request(host, {})
        assert body['message'] == 'Successfully processed 1 elements.'
        assert host.overrides == {}

    def test_clear_reports_unknown_ids(self):
        body, _ = clear_overrides_request(wall_host(), {'element_ids': [100, 999]})
        assert body['processed_count'] == 1
        assert body['error_count'] == 1
        assert body['errors'][0]['element_id'] == 999

    def test_clear_empty_view(self):
        body, status = clear_overrides_request(FakeHost(), {})
        assert status == 200
        assert body['message'] == 'No elements found matching the criteria.'


class TestSelection:

    def test_selection_respects_limit(self):
        host = wall_host()
        host.selected = [100, 200, 999]
        body, status = selected_elements_request(
            REGISTRY, host, {'limit': 2, 'parameter_names': ['width']})
        assert status == 200
        assert (body['total'], body['count']) == (3, 2)
        assert body['message'] == '2 of 3 selected elements'
        assert [e['id'] for e in body['data']] == [100, 200]
        assert body['data'][0]['parameters'][0]['displayValue'] == '6"'

    def test_empty_selection(self):
        body, status = selected_elements_request(REGISTRY, wall_host(), {})
        assert status == 200
        assert body['success'] is True
        assert body['message'] == 'No elements selected'
        assert body['data'] == []

    @pytest.mark.parametrize('data,fragment', [
        ({'limit': 0}, 'limit must be a positive integer'),
        ({'limit': 'a few'}, 'limit must be a positive integer'),
        ({'detail_level': 'all'}, 'detail_level must be one of'),
    ])
    def test_selection_rejects(self, data, fragment):
        body, status = selected_elements_request(REGISTRY, wall_host(), data)
        assert status == 400
        assert fragment in body['message']

    def test_current_view_info(self):
        host = wall_host()
        host.current = FakeElement(900, 'OST_Views', name='Level 1', kind=VIEW, element_class='ViewPlan')
        body, status = current_view_request(REGISTRY, host)
        assert status == 200
        assert body['message'] == "Active view 'Level 1'"
        assert body['data']['id'] == 900
        assert body['data']['element_class'] == 'ViewPlan'

    def test_current_view_without_active_view(self):
        host = wall_host()
        host.active_view = False
        body, status = current_view_request(REGISTRY, host)
        assert (status, body['message']) == (400, 'No active view found.')


class TestDeleteElements:

    def test_delete_with_per_item_errors(self):
        host = wall_host()
        body, status = delete_elements_request(host, {'element_ids': [100, 999]})
        assert status == 200
        assert host.deleted == [100]
        assert 100 not in host.elements
        assert body['summary'] == {'total': 2, 'success': 1, 'errors': 1}
        assert body['results'][0] == {'element_id': 100, 'deleted_count': 1, 'status': 'success'}
        assert body['results'][1]['message'] == 'Element 999 not found'
        assert body['message'] == 'Deleted 1 of 2 elements (1 including dependents)'
        assert FakeTransaction.log == [('start', 'Delete Elements'), ('commit', 'Delete Elements')]

    def test_delete_rejects_bad_ids_before_transaction(self):
        body, status = delete_elements_request(wall_host(), {'element_ids': ['100']})
        assert status == 400
        assert body['message'] == 'element_ids[0] must be a positive integer'
        assert FakeTransaction.log == []
