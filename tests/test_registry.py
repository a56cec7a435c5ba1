# -*- coding: utf-8 -*-
"""Parameter registry: lookup precedence, aliases, expansions, conversion.
Runs WITHOUT Revit.
"""
import os
import sys
import unittest

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fakes import FakeElement, FakeHost, dbl, integer, text, make_type
from revit_mcp.category_mappings import ALL_MAPPINGS, WALLS
from revit_mcp.mappings import CategoryMapping, normalize_key
from revit_mcp.registry import (ParameterMappingRegistry, build_default_registry,
                                CATEGORY, SHARED, GENERIC)
from revit_mcp.results import Found, NotFound, Invalid
from revit_mcp.values import INSTANCE, TYPE


@pytest.fixture(scope='module')
def registry():
    return build_default_registry()


def _wall():
    wall_type = make_type(200, 'OST_Walls', builtins={
        'WALL_ATTR_WIDTH_PARAM': dbl(0.5),
        'ANALYTICAL_HEAT_TRANSFER_COEFFICIENT': dbl(0.35),
    }, named={'Fire Resistance': text('2 hr')})
    return FakeElement(100, 'OST_Walls', element_type=wall_type, builtins={
        'CURVE_ELEM_LENGTH': dbl(20.0),
        'PHASE_CREATED': integer(7, 'New Construction'),
        'ALL_MODEL_MARK': text('W-1'),
    }, named={'Fire Compartment': text('FC-3')})


def test_every_mapping_is_registered(registry):
    assert len(registry.supported_categories()) == len(ALL_MAPPINGS)
    assert registry.category_key('doors') == 'OST_Doors'
    assert registry.category_key('ost_walls') == 'OST_Walls'
    assert registry.category_key('OST_Furniture') is None


def test_duplicate_mapping_rejected():
    with pytest.raises(ValueError):
        ParameterMappingRegistry([WALLS, WALLS])


def test_common_names_must_have_a_location():
    with pytest.raises(ValueError):
        CategoryMapping('OST_Test', 'Test', instance_params={'a': 'X'}, common=['b'])


@pytest.mark.parametrize('mapping', ALL_MAPPINGS, ids=lambda m: m.category)
def test_category_mapping_wins_for_every_instance_field(registry, mapping):
    """A value at the category location beats a same-named generic parameter."""
    builtins = {}
    named = {}
    for i, (name, field) in enumerate(sorted(mapping.instance_fields.items())):
        value = dbl(1000.0 + i)
        if field.by_name:
            named.setdefault(field.ident, value)
        else:
            builtins.setdefault(field.ident, value)
    # same-named display parameters that must lose to the category location
    taken = {normalize_key(k) for k in named}
    for name in mapping.instance_fields:
        if name not in taken:
            named[name.title()] = dbl(-1.0)
    element = FakeElement(1, mapping.category, builtins=builtins, named=named)
    host = FakeHost([element])

    for name in mapping.instance_fields:
        canonical = mapping.canonical(name)
        locations = mapping.locations(canonical)
        if not locations or locations[0].level != INSTANCE:
            continue
        location = locations[0]
        result = registry.get_parameter(host, element, name, mapping.category)
        assert isinstance(result, Found), name
        assert result.stage == CATEGORY
        assert result.canonical_name == canonical
        assert result.value.level == INSTANCE
        source = named if location.field.by_name else builtins
        assert result.value.value == source[location.field.ident].value


def test_type_level_value(registry):
    wall = _wall()
    result = registry.get_parameter(FakeHost([wall]), wall, 'width', 'OST_Walls')
    assert result.stage == CATEGORY
    assert result.value.level == TYPE
    assert result.value.value == 0.5
    assert result.owner is wall.element_type


def test_u_value_alias_reads_type_heat_transfer_coefficient(registry):
    wall = _wall()
    result = registry.get_parameter(FakeHost([wall]), wall, 'u value', 'OST_Walls')
    assert isinstance(result, Found)
    assert result.canonical_name == 'heat transfer coefficient'
    assert result.value.level == TYPE
    assert result.value.value == 0.35
    assert registry.convert_value('OST_Walls', 'u value', 0.35) == 0.35
    assert registry.convert_value('OST_Walls', 'U-Value', '0.4') == 0.4


def test_alias_is_transparent(registry):
    wall = _wall()
    host = FakeHost([wall])
    for alias, canonical in WALLS.aliases.items():
        via_alias = registry.get_parameter(host, wall, alias, 'OST_Walls')
        direct = registry.get_parameter(host, wall, canonical, 'OST_Walls')
        assert type(via_alias) is type(direct), alias
        if via_alias.ok:
            assert via_alias.canonical_name == direct.canonical_name
            assert via_alias.value == direct.value


def test_shared_stage(registry):
    wall = _wall()
    host = FakeHost([wall])
    result = registry.get_parameter(host, wall, 'tag', 'OST_Walls')
    assert result.stage == SHARED
    assert result.canonical_name == 'mark'
    assert result.value.value == 'W-1'


def test_category_alias_to_shared_name(registry):
    door_type = make_type(30, 'OST_Doors', builtins={'SYMBOL_NAME_PARAM': text('36" x 84"')})
    door = FakeElement(31, 'OST_Doors', element_type=door_type)
    result = registry.get_parameter(FakeHost([door]), door, 'name', 'OST_Doors')
    assert result.stage == SHARED
    assert result.canonical_name == 'type name'
    assert result.value.level == TYPE
    assert result.value.value == '36" x 84"'


def test_generic_fallback_instance_then_type(registry):
    wall = _wall()
    host = FakeHost([wall])
    on_instance = registry.get_parameter(host, wall, 'fire compartment', 'OST_Walls')
    assert on_instance.stage == GENERIC
    assert on_instance.value.level == INSTANCE
    on_type = registry.get_parameter(host, wall, 'Fire Resistance', 'OST_Walls')
    assert on_type.stage == GENERIC
    assert on_type.value.level == TYPE
    assert on_type.value.value == '2 hr'


def test_not_found_lists_tried_names(registry):
    wall = _wall()
    result = registry.get_parameter(FakeHost([wall]), wall, 'No Such Thing', 'OST_Walls')
    assert isinstance(result, NotFound)
    assert 'no such thing' in result.tried


def test_empty_key_is_invalid(registry):
    wall = _wall()
    assert isinstance(registry.get_parameter(FakeHost([wall]), wall, '  '), Invalid)


def test_phase_expands_to_two_names(registry):
    wall = _wall()
    host = FakeHost([wall])
    assert registry.resolve_names('OST_Walls', 'phase') == ['phase created', 'phase demolished']
    single = registry.get_parameter(host, wall, 'phase', 'OST_Walls')
    assert isinstance(single, Invalid)
    assert 'phase created' in single.message

    results = registry.get_parameters(host, wall, 'phase', 'OST_Walls')
    assert len(results) == 2
    assert results[0].ok and results[0].value.display == 'New Construction'
    assert not results[1].ok


def test_field_named_like_an_expansion_is_not_expanded(registry):
    assert registry.expansion('OST_Conduit', 'size') == []
    assert registry.expansion('OST_Walls', 'size') == ['length', 'width', 'height']


class TestRegistryDescribe(unittest.TestCase):

    def setUp(self):
        self.registry = build_default_registry()

    def test_describe_known_category(self):
        info = self.registry.describe('walls')
        self.assertEqual(info['category'], 'OST_Walls')
        self.assertIn('width', info['common_parameters'])
        self.assertEqual(info['aliases']['u value'], 'heat transfer coefficient')

    def test_describe_unknown_category(self):
        self.assertIsNone(self.registry.describe('OST_Furniture'))

    def test_unmapped_category_passes_value_through(self):
        self.assertEqual(self.registry.convert_value('OST_Furniture', 'width', 36), 36)
