# -*- coding: utf-8 -*-
"""Typed parameter values read from the host model."""

DOUBLE = 'Double'
INTEGER = 'Integer'
STRING = 'String'
BOOLEAN = 'Boolean'

STORAGE_KINDS = (DOUBLE, INTEGER, STRING, BOOLEAN)

INSTANCE = 'instance'
TYPE = 'type'


class ParameterValue(object):
    """One parameter value: a single Double, Integer, String or Boolean.

    ``value`` is None only when ``empty_reason`` says why. Doubles are always
    in internal units; ``display`` holds the host's formatted string if any.
    ``reference`` marks ElementId parameters: the value is the referenced id
    and ``display`` the referenced element's name.
    """

    __slots__ = ('name', 'storage', 'value', 'display', 'empty_reason', 'level', 'reference')

    def __init__(self, name, storage, value=None, display=None, empty_reason=None, level=None,
                 reference=False):
        if storage not in STORAGE_KINDS:
            raise ValueError('Unknown storage kind: {}'.format(storage))
        if value is None and empty_reason is None:
            empty_reason = 'Parameter has no value'
        self.name = name
        self.storage = storage
        self.value = None if empty_reason else _coerce(storage, value)
        self.display = display
        self.empty_reason = empty_reason
        self.level = level
        self.reference = reference

    @classmethod
    def double(cls, name, value, display=None, level=None):
        return cls(name, DOUBLE, value, display=display, level=level)

    @classmethod
    def integer(cls, name, value, display=None, level=None):
        return cls(name, INTEGER, value, display=display, level=level)

    @classmethod
    def element_ref(cls, name, element_id, display=None, level=None):
        """An ElementId parameter: the referenced id, labelled with the element's name."""
        return cls(name, INTEGER, element_id, display=display, level=level, reference=True)

    @classmethod
    def string(cls, name, value, display=None, level=None):
        return cls(name, STRING, value, display=display, level=level)

    @classmethod
    def boolean(cls, name, value, display=None, level=None):
        return cls(name, BOOLEAN, value, display=display, level=level)

    @classmethod
    def empty(cls, name, storage, reason, level=None, reference=False):
        return cls(name, storage, None, empty_reason=reason, level=level, reference=reference)

    @property
    def is_empty(self):
        return self.empty_reason is not None

    @property
    def is_numeric(self):
        return self.storage in (DOUBLE, INTEGER)

    def with_level(self, level):
        return ParameterValue(self.name, self.storage, self.value, self.display,
                              self.empty_reason, level, self.reference)

    def display_text(self):
        """Best human-readable form: display string, then value, then "null"."""
        if self.display:
            return self.display
        if self.value is None:
            return 'null'
        if self.storage == BOOLEAN:
            return 'Yes' if self.value else 'No'
        if self.storage == DOUBLE:
            return '{:g}'.format(self.value)
        return str(self.value)

    def to_dict(self):
        return {
            'name': self.name,
            'storageType': self.storage,
            'value': self.value,
            'displayValue': self.display,
            'rawValue': float(self.value) if self.is_numeric and self.value is not None else None,
            'emptyReason': self.empty_reason,
            'level': self.level,
            'elementReference': self.reference,
        }

    def __eq__(self, other):
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return (self.name, self.storage, self.value, self.empty_reason) == \
            (other.name, other.storage, other.value, other.empty_reason)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __repr__(self):
        if self.is_empty:
            return 'ParameterValue({!r}, {}, empty={!r})'.format(self.name, self.storage, self.empty_reason)
        return 'ParameterValue({!r}, {}, {!r})'.format(self.name, self.storage, self.value)


def _coerce(storage, value):
    if storage == DOUBLE:
        return float(value)
    if storage == INTEGER:
        return int(value)
    if storage == BOOLEAN:
        if isinstance(value, str):
            return value.strip().lower() in ('yes', 'true', '1')
        return bool(value)
    return value if isinstance(value, str) else str(value)
