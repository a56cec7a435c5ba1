# -*- coding: utf-8 -*-
"""Resolve user-facing parameter terms to canonical names.

Most aliases are many-to-one. A few terms ("phase", "dimensions", ...) stand
for several parameters at once; the resolver always answers with a list so
callers handle both cases the same way.
"""
from .mappings import normalize_key

# One term -> several canonical names, in lookup order
EXPANSIONS = {
    'phase':       ('phase created', 'phase demolished'),
    'phases':      ('phase created', 'phase demolished'),
    'assembly':    ('assembly code', 'assembly description'),
    'assemblies':  ('assembly code', 'assembly description'),
    'dimensions':  ('length', 'width', 'height'),
    'size':        ('length', 'width', 'height'),
    'materials':   ('material', 'structural material'),
    'names':       ('type name', 'family name'),
}


def expansion_for(key):
    """Expanded names for a one-to-many term, or an empty tuple."""
    return EXPANSIONS.get(normalize_key(key), ())


class AliasResolver(object):
    """Category aliases, then shared aliases, then the key itself.

    ``mappings`` is a dict of category -> CategoryMapping, ``shared`` the
    SharedParameterMapping. Lookup is case-insensitive and pure.
    """

    def __init__(self, mappings, shared, expansions=None):
        self._mappings = mappings
        self._shared = shared
        self._expansions = {normalize_key(k): tuple(normalize_key(n) for n in v)
                            for k, v in (expansions or EXPANSIONS).items()}

    def expansion(self, category, key):
        """Expanded names, unless the category defines ``key`` itself."""
        norm = normalize_key(key)
        mapping = self._mappings.get(category) if category else None
        if mapping is not None and mapping.defines(norm):
            return ()
        return self._expansions.get(norm, ())

    def is_expansion(self, category, key):
        return bool(self.expansion(category, key))

    def resolve(self, category, key):
        """Ordered list of canonical names for ``key`` in ``category``."""
        norm = normalize_key(key)
        if not norm:
            return []
        expanded = self.expansion(category, norm)
        if expanded:
            return list(expanded)
        mapping = self._mappings.get(category) if category else None
        if mapping is not None:
            alias = mapping.resolve_alias(norm)
            if alias:
                return [alias]
        alias = self._shared.resolve_alias(norm)
        if alias:
            return [alias]
        return [norm]
