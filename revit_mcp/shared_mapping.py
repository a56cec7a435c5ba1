# -*- coding: utf-8 -*-
"""Cross-category fallback table.

Fields that sit at the same place on most element categories (identity data,
phasing, IFC ids, computed area/volume). Probed after the category mapping
and before the generic name lookup.
"""
from types import MappingProxyType

from .mappings import normalize_key, _as_field, ParameterLocation
from .values import INSTANCE, TYPE

COMMON_PARAMETERS = {
    # Identity data
    'mark':                 'ALL_MODEL_MARK',
    'comments':             'ALL_MODEL_INSTANCE_COMMENTS',
    'type comments':        'ALL_MODEL_TYPE_COMMENTS',
    'type mark':            'WINDOW_TYPE_ID',
    'description':          'ALL_MODEL_DESCRIPTION',
    'manufacturer':         'ALL_MODEL_MANUFACTURER',
    'model':                'ALL_MODEL_MODEL',
    'url':                  'ALL_MODEL_URL',
    'cost':                 'ALL_MODEL_COST',
    'keynote':              'KEYNOTE_PARAM',
    'image':                'ALL_MODEL_IMAGE',
    'type image':           'ALL_MODEL_TYPE_IMAGE',
    'assembly code':        'UNIFORMAT_CODE',
    'assembly description': 'UNIFORMAT_DESCRIPTION',
    'omniclass number':     'OMNICLASS_CODE',
    'omniclass title':      'OMNICLASS_DESCRIPTION',
    # Family / type
    'type id':              'SYMBOL_ID_PARAM',
    'type':                 'ELEM_TYPE_PARAM',
    'family':               'ELEM_FAMILY_PARAM',
    'family and type':      'ELEM_FAMILY_AND_TYPE_PARAM',
    'type name':            'SYMBOL_NAME_PARAM',
    'family name':          'SYMBOL_FAMILY_NAME_PARAM',
    'category':             'ELEM_CATEGORY_PARAM',
    # Phasing / options
    'phase created':        'PHASE_CREATED',
    'phase demolished':     'PHASE_DEMOLISHED',
    'design option':        'DESIGN_OPTION_ID',
    'ifcguid':              'IFC_GUID',
    # Computed quantities
    'area':                 'HOST_AREA_COMPUTED',
    'volume':               'HOST_VOLUME_COMPUTED',
    'perimeter':            'HOST_PERIMETER_COMPUTED',
    # Placement / material
    'level':                'FAMILY_LEVEL_PARAM',
    'reference level':      'RBS_START_LEVEL_PARAM',
    'structural material':  'STRUCTURAL_MATERIAL_PARAM',
    'fire rating':          'DOOR_FIRE_RATING',
}

COMMON_ALIASES = {
    'number':               'mark',
    'tag':                  'mark',
    'element mark':         'mark',
    'element number':       'mark',
    'mfr':                  'manufacturer',
    'mfg':                  'manufacturer',
    'fire rate':            'fire rating',
    'uniformat code':       'assembly code',
    'uniformat description': 'assembly description',
}


class SharedParameterMapping(object):
    """Single field table probed on the element, then on its type."""

    category = None

    def __init__(self, parameters=None, aliases=None):
        self._fields = MappingProxyType(
            {normalize_key(k): _as_field(v) for k, v in (parameters or COMMON_PARAMETERS).items()})
        self._aliases = MappingProxyType(
            {normalize_key(k): normalize_key(v) for k, v in (aliases or COMMON_ALIASES).items()})

    @property
    def fields(self):
        return self._fields

    @property
    def aliases(self):
        return self._aliases

    def resolve_alias(self, key):
        return self._aliases.get(normalize_key(key))

    def canonical(self, key):
        norm = normalize_key(key)
        return self._aliases.get(norm, norm)

    def is_shared_parameter(self, name):
        return normalize_key(name) in self._fields

    def has_parameter(self, key):
        return self.is_shared_parameter(self.canonical(key))

    def locations(self, name):
        """The same field, probed at instance level then at type level."""
        norm = normalize_key(name)
        field = self._fields.get(norm)
        if field is None:
            return []
        return [ParameterLocation(None, norm, INSTANCE, field),
                ParameterLocation(None, norm, TYPE, field)]

    def common_parameter_names(self):
        return list(self._fields)
