# -*- coding: utf-8 -*-
"""Per-category parameter mapping tables.

A CategoryMapping maps canonical parameter names to where the value lives on
an element of that category (instance or type level) and how user input for
that name is converted to internal units.
"""
from collections import namedtuple
from types import MappingProxyType

from . import units
from .values import INSTANCE, TYPE


def normalize_key(key):
    """Lower-case, trim, treat underscores as spaces and collapse whitespace."""
    if key is None:
        return ''
    return ' '.join(str(key).replace('_', ' ').lower().split())


class Field(namedtuple('Field', 'ident by_name')):
    """Host field handle: a BuiltInParameter name, or a display name."""

    def __str__(self):
        return self.ident


def builtin(ident):
    return Field(ident, False)


def named(display_name):
    return Field(display_name, True)


def _as_field(value):
    if isinstance(value, Field):
        return value
    return builtin(value)


class ParameterLocation(namedtuple('ParameterLocation', 'category name level field')):
    """Where one canonical name lives for one category."""


class CategoryMapping(object):
    """Read-only lookup tables for one element category.

    instance_params / type_params: canonical name -> BuiltInParameter name or Field
    aliases:         user term -> canonical name
    common:          curated, ordered list of canonical names
    conversions:     canonical name -> units.Conversion
    """

    def __init__(self, category, label, instance_params=None, type_params=None, aliases=None,
                 common=None, conversions=None):
        self.category = category
        self.label = label
        self._instance = MappingProxyType(
            {normalize_key(k): _as_field(v) for k, v in (instance_params or {}).items()})
        self._type = MappingProxyType(
            {normalize_key(k): _as_field(v) for k, v in (type_params or {}).items()})
        self._aliases = MappingProxyType(
            {normalize_key(k): normalize_key(v) for k, v in (aliases or {}).items()})
        self._common = tuple(normalize_key(n) for n in (common or ()))
        self._conversions = MappingProxyType(
            {normalize_key(k): v for k, v in (conversions or {}).items()})

        unknown = [n for n in self._common if not self.has_field(n)]
        if unknown:
            raise ValueError('{}: common names without a location: {}'.format(category, unknown))

    # ---- lookups ----

    @property
    def instance_fields(self):
        return self._instance

    @property
    def type_fields(self):
        return self._type

    @property
    def aliases(self):
        return self._aliases

    def resolve_alias(self, key):
        """Category alias for ``key``, or None."""
        return self._aliases.get(normalize_key(key))

    def canonical(self, key):
        norm = normalize_key(key)
        return self._aliases.get(norm, norm)

    def has_field(self, name):
        norm = normalize_key(name)
        return norm in self._instance or norm in self._type

    def defines(self, key):
        """True when the key is a field or an alias of this category."""
        norm = normalize_key(key)
        return norm in self._aliases or self.has_field(norm)

    def has_parameter(self, key):
        return self.has_field(self.canonical(key))

    def locations(self, name):
        """Instance location first, then type location, for a canonical name."""
        norm = normalize_key(name)
        found = []
        if norm in self._instance:
            found.append(ParameterLocation(self.category, norm, INSTANCE, self._instance[norm]))
        if norm in self._type:
            found.append(ParameterLocation(self.category, norm, TYPE, self._type[norm]))
        return found

    def common_parameter_names(self):
        return list(self._common)

    def all_parameter_names(self):
        names = list(self._instance)
        names.extend(n for n in self._type if n not in self._instance)
        return names

    # ---- conversion ----

    def conversion_for(self, key):
        return self._conversions.get(self.canonical(key), units.PASS_THROUGH)

    def convert_value(self, key, value):
        return self.conversion_for(key)(value)

    def __repr__(self):
        return 'CategoryMapping({}, {} instance, {} type, {} aliases)'.format(
            self.category, len(self._instance), len(self._type), len(self._aliases))
