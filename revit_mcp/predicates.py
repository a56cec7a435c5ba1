# -*- coding: utf-8 -*-
"""Parameter predicates used by stage B of the element filter."""
import logging

from . import units
from .mappings import normalize_key
from .results import Invalid
from .values import DOUBLE, INTEGER, STRING, BOOLEAN, STORAGE_KINDS

logger = logging.getLogger(__name__)

EPS = 0.001

NUMERIC_OPERATORS = ('>', '<', '>=', '<=', '=', '==', '!=')
STRING_OPERATORS = ('=', '==', '!=', 'contains', 'startswith', 'endswith')
BOOLEAN_OPERATORS = ('=', '==', '!=')
OPERATORS = ('>', '<', '>=', '<=', '=', '==', '!=', 'contains', 'startswith', 'endswith')

_VALUE_TYPES = {k.lower(): k for k in STORAGE_KINDS}
_BOOL_HINTS = ('yes', 'no', 'bool')


class FilterPredicate(object):
    """``name operator value``; ``value_type`` None means infer from storage."""

    __slots__ = ('name', 'operator', 'value', 'value_type')

    def __init__(self, name, operator, value, value_type=None):
        self.name = name
        self.operator = operator
        self.value = value
        self.value_type = value_type

    @classmethod
    def from_dict(cls, data):
        """Build from a request dict. Returns FilterPredicate or Invalid."""
        if not isinstance(data, dict):
            return Invalid('Parameter filter must be an object, got {}'.format(type(data).__name__))
        value_type = data.get('value_type', data.get('valueType'))
        predicate = cls(data.get('name'), data.get('operator'), data.get('value'), value_type)
        error = predicate.validate()
        if error:
            return Invalid(error)
        if value_type:
            predicate.value_type = _VALUE_TYPES[str(value_type).lower()]
        predicate.operator = str(predicate.operator).strip().lower()
        return predicate

    def validate(self):
        """Error string, or None when the predicate is well formed."""
        if not self.name or not str(self.name).strip():
            return "Parameter filter needs a 'name'"
        if self.operator is None or str(self.operator).strip().lower() not in OPERATORS:
            return "Unknown operator '{}' for parameter '{}'. Use one of: {}".format(
                self.operator, self.name, ', '.join(OPERATORS))
        if self.value is None:
            return "Parameter filter '{}' needs a 'value'".format(self.name)
        if self.value_type:
            kind = _VALUE_TYPES.get(str(self.value_type).lower())
            if kind is None:
                return "Unknown value type '{}' for parameter '{}'. Use one of: {}".format(
                    self.value_type, self.name, ', '.join(STORAGE_KINDS))
            op = str(self.operator).strip().lower()
            if kind == BOOLEAN and op not in BOOLEAN_OPERATORS:
                return "Operator '{}' is not valid for Boolean parameter '{}'".format(op, self.name)
            if kind in (DOUBLE, INTEGER) and op not in NUMERIC_OPERATORS:
                return "Operator '{}' is not valid for numeric parameter '{}'".format(op, self.name)
        return None

    def describe(self):
        return '{} {} {}'.format(self.name, self.operator, self.value)

    def to_dict(self):
        return {'name': self.name, 'operator': self.operator, 'value': self.value,
                'value_type': self.value_type}

    def __repr__(self):
        return 'FilterPredicate({!r} {} {!r})'.format(self.name, self.operator, self.value)


def infer_value_type(value):
    """Predicate value type for a parameter value read from the host.

    Element references compare by the referenced element's name.
    """
    if value.reference:
        return STRING
    if value.storage == INTEGER:
        name = (value.name or '').lower()
        if any(hint in name for hint in _BOOL_HINTS):
            return BOOLEAN
    return value.storage


def compare_numbers(actual, operator, expected):
    if operator == '>':
        return actual > expected
    if operator == '<':
        return actual < expected
    if operator == '>=':
        return actual >= expected
    if operator == '<=':
        return actual <= expected
    if operator in ('=', '=='):
        return abs(actual - expected) < EPS
    if operator == '!=':
        return abs(actual - expected) >= EPS
    return False


def compare_strings(actual, operator, expected):
    actual = (actual or '').lower()
    expected = (expected or '').lower()
    if operator in ('=', '=='):
        return actual == expected
    if operator == '!=':
        return actual != expected
    if operator == 'contains':
        return expected in actual
    if operator == 'startswith':
        return actual.startswith(expected)
    if operator == 'endswith':
        return actual.endswith(expected)
    return False


def compare_booleans(actual, operator, expected):
    if operator in ('=', '=='):
        return actual == expected
    if operator == '!=':
        return actual != expected
    return False


def evaluate(value, predicate, expected):
    """True when the host ``value`` satisfies ``predicate``.

    ``expected`` is the predicate value already converted to internal units.
    Empty values and values that cannot be compared never match.
    """
    if value is None or value.is_empty:
        return False
    kind = predicate.value_type or infer_value_type(value)
    op = predicate.operator

    if kind in (DOUBLE, INTEGER):
        if not value.is_numeric:
            return False
        number = units.to_number(expected)
        if number is None:
            return False
        return compare_numbers(float(value.value), op, number)

    if kind == BOOLEAN:
        flag = units.to_bool_int(expected)
        if flag is None:
            return False
        return compare_booleans(bool(value.value), op, bool(flag))

    text = value.value if value.storage == STRING else value.display_text()
    return compare_strings(text, op, None if expected is None else str(expected))


def matches(registry, host, element, predicate, category=None):
    """Resolve the predicate's parameter on ``element`` and evaluate it.

    With a category the registry's full precedence is used; without one only
    the generic instance/type lookup. A parameter that does not resolve fails.
    """
    if category:
        found = registry.get_parameter(host, element, predicate.name, category)
    else:
        found = registry.lookup_generic(host, element, predicate.name)
    if not found.ok:
        return False
    expected = predicate.value
    if category and registry.has_mapping(category):
        expected = registry.convert_value(category, predicate.name, expected)
    return evaluate(found.value, predicate, expected)


def check_names(registry, predicates, category=None):
    """Invalid for the first predicate whose name stands for several parameters."""
    for predicate in predicates:
        expanded = registry.expansion(category, predicate.name)
        if expanded:
            return Invalid("Parameter '{}' refers to several parameters ({}); "
                           "filter on one of them".format(predicate.name, ', '.join(expanded)))
        if not normalize_key(predicate.name):
            return Invalid('Parameter filter name is empty')
    return None
