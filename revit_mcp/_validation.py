# -*- coding: utf-8 -*-
"""Input validation helpers for request payloads. Each returns an error string or None."""
from .units import to_number


def validate_element_ids(element_ids):
    """Validate a list of Revit element ids."""
    if not isinstance(element_ids, list) or not element_ids:
        return "element_ids must be a non-empty list"
    for i, element_id in enumerate(element_ids):
        if isinstance(element_id, bool) or not isinstance(element_id, int) or element_id <= 0:
            return "element_ids[{}] must be a positive integer".format(i)
    return None


def validate_point(point, name):
    """Validate an {x, y, z} point in millimetres."""
    if not isinstance(point, dict):
        return "{} must be an object with x, y and z".format(name)
    for axis in ('x', 'y', 'z'):
        if axis not in point:
            return "{} missing '{}'".format(name, axis)
        if to_number(point[axis]) is None:
            return "{}.{} must be a number".format(name, axis)
    return None


def validate_parameter_names(names):
    if not isinstance(names, list):
        return "parameter_names must be a list"
    for i, name in enumerate(names):
        if not isinstance(name, str) or not name.strip():
            return "parameter_names[{}] must be a non-empty string".format(i)
    return None


def validate_parameter_updates(updates):
    """Validate set_parameters items: [{element_id, parameter, value}, ...]."""
    if not isinstance(updates, list) or not updates:
        return "updates must be a non-empty list"
    for i, item in enumerate(updates):
        if not isinstance(item, dict):
            return "updates[{}] must be a dict".format(i)
        if 'element_id' not in item:
            return "updates[{}] missing 'element_id'".format(i)
        if 'parameter' not in item:
            return "updates[{}] missing 'parameter'".format(i)
        if 'value' not in item:
            return "updates[{}] missing 'value'".format(i)
    return None


def validate_color(color):
    """Validate an [r, g, b] colour with 0-255 components."""
    if not isinstance(color, (list, tuple)) or len(color) != 3:
        return "color must be [r, g, b]"
    for c in color:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            return "color components must be integers 0-255"
    return None
