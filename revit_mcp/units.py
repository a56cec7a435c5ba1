# -*- coding: utf-8 -*-
"""Unit conversion helpers.

Revit stores lengths in feet, areas in square feet, volumes in cubic feet and
angles in radians. Values typed by a user may arrive in feet, inches or
millimetres with no unit attached, so length fields use per-field heuristic
bands to guess the input unit.
"""
import math
from collections import namedtuple

from ._constants import MM_PER_FT, IN_PER_FT, SQIN_PER_SQFT

TRUE_WORDS = ('yes', 'true')
FALSE_WORDS = ('no', 'false')


def mm_to_feet(value):
    return value / MM_PER_FT


def feet_to_mm(value):
    return value * MM_PER_FT


def inches_to_feet(value):
    return value / IN_PER_FT


def feet_to_inches(value):
    return value * IN_PER_FT


def degrees_to_radians(value):
    return value * math.pi / 180.0


def radians_to_degrees(value):
    return value * 180.0 / math.pi


def to_number(value):
    """Parse ``value`` as float. Returns None when it is not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return None


def to_bool_int(value):
    """Normalise a boolean-ish input to 1/0. Returns None if unrecognised.

    Accepts booleans, "yes"/"no" and "true"/"false" in any case, and the
    numbers 0 and 1 (also as strings).
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, (int, float)):
        if value in (0, 1):
            return int(value)
        return None
    text = str(value).strip().lower()
    if text in TRUE_WORDS or text == '1':
        return 1
    if text in FALSE_WORDS or text == '0':
        return 0
    return None


def to_int(value):
    if isinstance(value, bool):
        return int(value)
    number = to_number(value)
    if number is None or number != int(number):
        return None
    return int(number)


class LengthHeuristic(object):
    """Guess the unit of a bare length and convert it to feet.

    Bands, applied in order:
      value < 1.0            -> already feet
      value <= feet_max      -> feet (only when feet_max is set)
      value <= inch_max      -> inches, divided by 12
      value above inch_max   -> millimetres, divided by 304.8
    ``inch_max=None`` means every value from 1.0 up is taken as inches.
    """

    def __init__(self, feet_max=None, inch_max=None):
        self.feet_max = feet_max
        self.inch_max = inch_max

    def __call__(self, value):
        if value < 1.0:
            return value
        if self.feet_max is not None and value <= self.feet_max:
            return value
        if self.inch_max is None or value <= self.inch_max:
            return inches_to_feet(value)
        return mm_to_feet(value)

    def __repr__(self):
        return 'LengthHeuristic(feet_max={!r}, inch_max={!r})'.format(self.feet_max, self.inch_max)


class Conversion(namedtuple('Conversion', 'unit_class func numeric')):
    """A named conversion applied to user input for one canonical parameter.

    ``numeric`` conversions parse the input as a number first and leave it
    untouched when it does not parse.
    """

    def __call__(self, value):
        if value is None:
            return None
        if self.numeric:
            number = to_number(value)
            if number is None:
                return value
            return self.func(number)
        converted = self.func(value)
        return value if converted is None else converted


def _same(value):
    return value


def _text(value):
    return str(value)


PASS_THROUGH = Conversion('pass-through', _same, False)
TEXT         = Conversion('text', _text, False)
LENGTH       = Conversion('length', _same, True)
AREA         = Conversion('area', _same, True)
VOLUME       = Conversion('volume', _same, True)
CURRENCY     = Conversion('currency', _same, True)
THERMAL      = Conversion('thermal', _same, True)
NUMBER       = Conversion('pass-through', _same, True)
ANGLE        = Conversion('angle', degrees_to_radians, True)
BOOLEAN      = Conversion('boolean', to_bool_int, False)
INTEGER      = Conversion('integer', to_int, False)
INCHES       = Conversion('length', inches_to_feet, True)
SQUARE_INCHES = Conversion('area', lambda v: v / SQIN_PER_SQFT, True)


def heuristic_length(feet_max=None, inch_max=None):
    return Conversion('length', LengthHeuristic(feet_max, inch_max), True)


# Field families with their own bands
CONDUIT_DIAMETER = heuristic_length(inch_max=100.0)
CONDUIT_LENGTH   = heuristic_length(inch_max=1200.0)
FRAMING_LENGTH   = heuristic_length(inch_max=2400.0)
LEVEL_ELEVATION  = heuristic_length(feet_max=1000.0, inch_max=12000.0)
WALL_LENGTH      = heuristic_length()
