# -*- coding: utf-8 -*-
"""Category-aware parameter lookup.

The registry owns every CategoryMapping plus the shared table and answers
"what is parameter X on this element" with a fixed precedence:

1. category mapping (instance, then type) after category aliases,
2. shared mapping (instance, then type) after shared aliases,
3. generic lookup by display name (instance, then type).

The first hit wins. Built once by ``build_default_registry`` and read-only
afterwards, so it is safe to share between route handlers.
"""
import logging

from .aliases import AliasResolver
from .category_mappings import ALL_MAPPINGS
from .mappings import normalize_key
from .results import Found, NotFound, Invalid
from .shared_mapping import SharedParameterMapping
from .values import INSTANCE, TYPE
from ._constants import normalize_category

logger = logging.getLogger(__name__)

CATEGORY = 'category'
SHARED = 'shared'
GENERIC = 'generic'


class ParameterMappingRegistry(object):

    def __init__(self, mappings, shared=None):
        self._mappings = {}
        for mapping in mappings:
            if mapping.category in self._mappings:
                raise ValueError('Duplicate mapping for {}'.format(mapping.category))
            self._mappings[mapping.category] = mapping
        # case-insensitive lookup of the registered OST_* keys
        self._keys = {k.lower(): k for k in self._mappings}
        self.shared = shared or SharedParameterMapping()
        self.resolver = AliasResolver(self._mappings, self.shared)

    # ---- capability queries ----

    def category_key(self, category):
        """Registered OST_* key for a friendly or OST_* name, or None."""
        name = normalize_category(category)
        if not name:
            return None
        return self._keys.get(name.lower())

    def get_mapping(self, category):
        key = self.category_key(category)
        return self._mappings.get(key) if key else None

    def has_mapping(self, category):
        return self.get_mapping(category) is not None

    def supported_categories(self):
        return list(self._mappings)

    def common_parameter_names(self, category):
        mapping = self.get_mapping(category)
        return mapping.common_parameter_names() if mapping else []

    def aliases(self, category):
        mapping = self.get_mapping(category)
        return dict(mapping.aliases) if mapping else {}

    def describe(self, category):
        """Summary used by the categories route."""
        mapping = self.get_mapping(category)
        if mapping is None:
            return None
        return {
            'category': mapping.category,
            'label': mapping.label,
            'common_parameters': mapping.common_parameter_names(),
            'aliases': dict(mapping.aliases),
            'instance_parameters': list(mapping.instance_fields),
            'type_parameters': list(mapping.type_fields),
        }

    # ---- name resolution ----

    def resolve_names(self, category, key):
        """Canonical names for ``key``; several for one-to-many terms."""
        return self.resolver.resolve(self.category_key(category), key)

    def expansion(self, category, key):
        return list(self.resolver.expansion(self.category_key(category), key))

    def convert_value(self, category, key, value):
        """Convert user input for ``key`` into internal units.

        Unregistered categories and unknown names pass the value through.
        """
        mapping = self.get_mapping(category)
        if mapping is None:
            return value
        return mapping.convert_value(key, value)

    # ---- value lookup ----

    def get_parameter(self, host, element, key, category=None):
        """Resolve one parameter. Returns Found, NotFound or Invalid."""
        norm = normalize_key(key)
        if not norm:
            return Invalid('Parameter name is empty')
        cat_key = self.category_key(category) if category else None
        expanded = self.resolver.expansion(cat_key, norm)
        if expanded:
            return Invalid("'{}' refers to several parameters: {}".format(
                key, ', '.join(expanded)))
        return self._lookup(host, element, norm, cat_key)

    def get_parameters(self, host, element, key, category=None):
        """Like get_parameter, but one-to-many terms return one result per name."""
        norm = normalize_key(key)
        if not norm:
            return [Invalid('Parameter name is empty')]
        cat_key = self.category_key(category) if category else None
        names = self.resolver.expansion(cat_key, norm) or (norm,)
        results = []
        seen = set()
        for name in names:
            result = self._lookup(host, element, name, cat_key)
            marker = result.canonical_name if result.ok else name
            if marker in seen:
                continue
            seen.add(marker)
            results.append(result)
        return results

    def lookup_generic(self, host, element, name):
        """Stage 3 only: display-name lookup on the element, then its type."""
        for owner, level in self._owners(host, element):
            value = host.lookup_value(owner, name)
            if value is not None:
                return Found(value.with_level(level), normalize_key(name), GENERIC, owner, None)
        return NotFound(name, [name])

    def _lookup(self, host, element, norm, cat_key):
        tried = []
        mapping = self._mappings.get(cat_key) if cat_key else None

        name = norm
        if mapping is not None:
            name = mapping.canonical(norm)
            tried.append(name)
            found = self._probe(host, element, mapping.locations(name), CATEGORY)
            if found is not None:
                return found

        shared_name = self.shared.canonical(name)
        if shared_name not in tried:
            tried.append(shared_name)
        found = self._probe(host, element, self.shared.locations(shared_name), SHARED)
        if found is not None:
            return found

        for candidate in _unique((shared_name, name, norm)):
            found = self.lookup_generic(host, element, candidate)
            if found.ok:
                return found
            if candidate not in tried:
                tried.append(candidate)
        return NotFound(norm, tried)

    def _probe(self, host, element, locations, stage):
        element_type = None
        for location in locations:
            if location.level == INSTANCE:
                owner = element
            else:
                if element_type is None:
                    element_type = host.element_type(element)
                owner = element_type
            if owner is None:
                continue
            if location.field.by_name:
                value = host.lookup_value(owner, location.field.ident)
            else:
                value = host.builtin_value(owner, location.field.ident)
            if value is not None:
                return Found(value.with_level(location.level), location.name, stage,
                             owner, location.field)
        return None

    def _owners(self, host, element):
        yield element, INSTANCE
        element_type = host.element_type(element)
        if element_type is not None:
            yield element_type, TYPE

    def __repr__(self):
        return 'ParameterMappingRegistry({})'.format(', '.join(self._mappings))


def _unique(names):
    seen = []
    for n in names:
        if n and n not in seen:
            seen.append(n)
    return seen


def build_default_registry():
    """Registry with every curated category mapping and the shared table."""
    registry = ParameterMappingRegistry(ALL_MAPPINGS, SharedParameterMapping())
    logger.info("Parameter registry ready: %d categories", len(registry.supported_categories()))
    return registry
