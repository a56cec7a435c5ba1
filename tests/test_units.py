# -*- coding: utf-8 -*-
"""Unit conversion and the per-field length heuristics.
Runs WITHOUT Revit.
"""
import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from revit_mcp import units


HEURISTICS = (units.WALL_LENGTH, units.CONDUIT_DIAMETER, units.CONDUIT_LENGTH,
              units.FRAMING_LENGTH, units.LEVEL_ELEVATION)


def test_basic_factors():
    assert units.mm_to_feet(304.8) == pytest.approx(1.0)
    assert units.feet_to_mm(2.0) == pytest.approx(609.6)
    assert units.inches_to_feet(18) == pytest.approx(1.5)
    assert units.degrees_to_radians(180) == pytest.approx(math.pi)
    assert units.radians_to_degrees(math.pi / 2) == pytest.approx(90.0)


@pytest.mark.parametrize('value', [0.0, 0.1, 0.5, 0.999])
def test_values_below_one_are_already_feet_and_idempotent(value):
    for conversion in HEURISTICS:
        once = conversion(value)
        assert once == pytest.approx(value)
        assert conversion(once) == pytest.approx(once)


def test_conduit_diameter_bands():
    assert units.CONDUIT_DIAMETER(2) == pytest.approx(2 / 12.0)
    assert units.CONDUIT_DIAMETER(48) == pytest.approx(4.0)
    assert units.CONDUIT_DIAMETER(150) == pytest.approx(150 / 304.8)


def test_framing_length_bands():
    assert units.FRAMING_LENGTH(240) == pytest.approx(20.0)
    assert units.FRAMING_LENGTH(2400) == pytest.approx(200.0)
    assert units.FRAMING_LENGTH(6096) == pytest.approx(20.0)


def test_level_elevation_keeps_feet_band():
    assert units.LEVEL_ELEVATION(10) == pytest.approx(10.0)
    assert units.LEVEL_ELEVATION(1200) == pytest.approx(100.0)
    assert units.LEVEL_ELEVATION(30480) == pytest.approx(100.0)


def test_wall_length_treats_whole_numbers_as_inches():
    assert units.WALL_LENGTH(12) == pytest.approx(1.0)


def test_numeric_conversion_leaves_text_alone():
    assert units.LENGTH('abc') == 'abc'
    assert units.INCHES('36') == pytest.approx(3.0)
    assert units.SQUARE_INCHES(144) == pytest.approx(1.0)
    assert units.ANGLE(90) == pytest.approx(math.pi / 2)
    assert units.CURRENCY(None) is None


@pytest.mark.parametrize('raw,expected', [
    (True, 1), (False, 0), ('Yes', 1), ('no', 0), ('TRUE', 1), ('false', 0),
    (1, 1), (0, 0), ('1', 1), ('0', 0), ('maybe', None), (2, None),
])
def test_to_bool_int(raw, expected):
    assert units.to_bool_int(raw) == expected


def test_boolean_conversion_keeps_unrecognised_input():
    assert units.BOOLEAN('yes') == 1
    assert units.BOOLEAN('maybe') == 'maybe'


def test_to_int_and_to_number():
    assert units.to_int('12') == 12
    assert units.to_int(3.5) is None
    assert units.to_number(' 2.5 ') == 2.5
    assert units.to_number('x') is None
