# -*- coding: utf-8 -*-
"""
category_mappings.py: curated parameter tables for the supported categories.

Each table is representative, not exhaustive. Values are BuiltInParameter
enum names; the host adapter turns them into ``DB.BuiltInParameter`` members.
"""
from . import units
from .mappings import CategoryMapping

# Conversions shared by most host/model categories
_THERMAL_TYPE = {
    'heat transfer coefficient (u)': 'ANALYTICAL_HEAT_TRANSFER_COEFFICIENT',
    'thermal resistance (r)':        'ANALYTICAL_THERMAL_RESISTANCE',
    'thermal mass':                  'ANALYTICAL_THERMAL_MASS',
    'absorptance':                   'ANALYTICAL_ABSORPTANCE',
    'roughness':                     'ANALYTICAL_ROUGHNESS',
}

_THERMAL_ALIASES = {
    'u value':     'heat transfer coefficient (u)',
    'u-value':     'heat transfer coefficient (u)',
    'u':           'heat transfer coefficient (u)',
    'thermal u':   'heat transfer coefficient (u)',
    'r value':     'thermal resistance (r)',
    'r-value':     'thermal resistance (r)',
    'r':           'thermal resistance (r)',
    'thermal r':   'thermal resistance (r)',
}

_THERMAL_CONVERSIONS = {
    'heat transfer coefficient (u)': units.THERMAL,
    'thermal resistance (r)':        units.THERMAL,
    'thermal mass':                  units.THERMAL,
    'absorptance':                   units.NUMBER,
    'roughness':                     units.INTEGER,
}


def _merged(*dicts):
    out = {}
    for d in dicts:
        out.update(d)
    return out


# ============================================================
# Walls
# ============================================================
WALLS = CategoryMapping(
    'OST_Walls', 'Walls',
    instance_params={
        'length':                   'CURVE_ELEM_LENGTH',
        'base constraint':          'WALL_BASE_CONSTRAINT',
        'top constraint':           'WALL_HEIGHT_TYPE',
        'base offset':              'WALL_BASE_OFFSET',
        'top offset':               'WALL_TOP_OFFSET',
        'unconnected height':       'WALL_USER_HEIGHT_PARAM',
        'base is attached':         'WALL_BOTTOM_IS_ATTACHED',
        'top is attached':          'WALL_TOP_IS_ATTACHED',
        'base extension distance':  'WALL_BOTTOM_EXTENSION_DIST_PARAM',
        'top extension distance':   'WALL_TOP_EXTENSION_DIST_PARAM',
        'structural':               'WALL_STRUCTURAL_SIGNIFICANT',
        'structural usage':         'WALL_STRUCTURAL_USAGE_PARAM',
        'room bounding':            'WALL_ATTR_ROOM_BOUNDING',
        'location line':            'WALL_KEY_REF_PARAM',
        'related to mass':          'RELATED_TO_MASS',
        'area':                     'HOST_AREA_COMPUTED',
        'volume':                   'HOST_VOLUME_COMPUTED',
    },
    type_params={
        'width':                    'WALL_ATTR_WIDTH_PARAM',
        'thickness':                'WALL_ATTR_WIDTH_PARAM',
        'function':                 'FUNCTION_PARAM',
        'wrapping at inserts':      'WRAPPING_AT_INSERTS_PARAM',
        'wrapping at ends':         'WRAPPING_AT_ENDS_PARAM',
        'heat transfer coefficient': 'ANALYTICAL_HEAT_TRANSFER_COEFFICIENT',
        'thermal resistance':       'ANALYTICAL_THERMAL_RESISTANCE',
        'thermal mass':             'ANALYTICAL_THERMAL_MASS',
        'absorptance':              'ANALYTICAL_ABSORPTANCE',
        'roughness':                'ANALYTICAL_ROUGHNESS',
    },
    aliases={
        'w':                'width',
        'wall width':       'width',
        'wall thickness':   'thickness',
        'wall length':      'length',
        'base level':       'base constraint',
        'top level':        'top constraint',
        'height':           'unconnected height',
        'wall height':      'unconnected height',
        'is structural':    'structural',
        'is room bounding': 'room bounding',
        'u value':          'heat transfer coefficient',
        'u-value':          'heat transfer coefficient',
        'thermal u':        'heat transfer coefficient',
        'r value':          'thermal resistance',
        'r-value':          'thermal resistance',
        'thermal r':        'thermal resistance',
    },
    common=[
        'width', 'length', 'unconnected height', 'base constraint', 'top constraint',
        'base offset', 'top offset', 'structural', 'room bounding', 'location line',
        'function', 'area', 'volume',
    ],
    conversions={
        'width':                    units.WALL_LENGTH,
        'thickness':                units.WALL_LENGTH,
        'length':                   units.WALL_LENGTH,
        'base offset':              units.WALL_LENGTH,
        'top offset':               units.WALL_LENGTH,
        'unconnected height':       units.WALL_LENGTH,
        'base extension distance':  units.WALL_LENGTH,
        'top extension distance':   units.WALL_LENGTH,
        'base is attached':         units.BOOLEAN,
        'top is attached':          units.BOOLEAN,
        'structural':               units.BOOLEAN,
        'room bounding':            units.BOOLEAN,
        'related to mass':          units.BOOLEAN,
        'structural usage':         units.INTEGER,
        'location line':            units.INTEGER,
        'function':                 units.INTEGER,
        'wrapping at inserts':      units.INTEGER,
        'wrapping at ends':         units.INTEGER,
        'area':                     units.AREA,
        'volume':                   units.VOLUME,
        'heat transfer coefficient': units.THERMAL,
        'thermal resistance':       units.THERMAL,
        'thermal mass':             units.THERMAL,
        'absorptance':              units.NUMBER,
        'roughness':                units.INTEGER,
    },
)


# ============================================================
# Doors and windows
# ============================================================
_OPENING_INSTANCE = {
    'level':            'FAMILY_LEVEL_PARAM',
    'sill height':      'INSTANCE_SILL_HEIGHT_PARAM',
    'head height':      'INSTANCE_HEAD_HEIGHT_PARAM',
    'schedule level':   'INSTANCE_SCHEDULE_ONLY_LEVEL_PARAM',
    'host id':          'HOST_ID_PARAM',
    'area':             'HOST_AREA_COMPUTED',
    'volume':           'HOST_VOLUME_COMPUTED',
    'mark':             'ALL_MODEL_MARK',
    'comments':         'ALL_MODEL_INSTANCE_COMMENTS',
    'export to ifc':    'IFC_EXPORT_ELEMENT',
}

_OPENING_TYPE = {
    'rough width':      'FAMILY_ROUGH_WIDTH_PARAM',
    'rough height':     'FAMILY_ROUGH_HEIGHT_PARAM',
    'operation':        'WINDOW_OPERATION_TYPE',
    'construction type': 'CASEWORK_CONSTRUCTION_TYPE',
    'wall closure':     'TYPE_WALL_CLOSURE',
    'cost':             'ALL_MODEL_COST',
    'type mark':        'WINDOW_TYPE_ID',
    'solar heat gain coefficient': 'ANALYTICAL_SOLAR_HEAT_GAIN_COEFFICIENT',
    'visual light transmittance':  'ANALYTICAL_VISUAL_LIGHT_TRANSMITTANCE',
}

_OPENING_ALIASES = {
    'w':            'width',
    'h':            'height',
    'sill':         'sill height',
    'head':         'head height',
    'rough w':      'rough width',
    'rough h':      'rough height',
    'shgc':         'solar heat gain coefficient',
    'vlt':          'visual light transmittance',
    'comment':      'comments',
    'note':         'comments',
    'notes':        'comments',
    'host':         'host id',
    'ifc export':   'export to ifc',
}

_OPENING_CONVERSIONS = {
    'width':            units.LENGTH,
    'height':           units.LENGTH,
    'thickness':        units.LENGTH,
    'rough width':      units.LENGTH,
    'rough height':     units.LENGTH,
    'sill height':      units.LENGTH,
    'head height':      units.LENGTH,
    'area':             units.AREA,
    'volume':           units.VOLUME,
    'cost':             units.CURRENCY,
    'solar heat gain coefficient': units.NUMBER,
    'visual light transmittance':  units.NUMBER,
    'export to ifc':    units.INTEGER,
    'wall closure':     units.INTEGER,
    'mark':             units.TEXT,
    'comments':         units.TEXT,
}

DOORS = CategoryMapping(
    'OST_Doors', 'Doors',
    instance_params=_merged(_OPENING_INSTANCE, {
        'frame type':       'DOOR_FRAME_TYPE',
        'frame material':   'DOOR_FRAME_MATERIAL',
    }),
    type_params=_merged(_OPENING_TYPE, _THERMAL_TYPE, {
        'width':            'DOOR_WIDTH',
        'height':           'DOOR_HEIGHT',
        'thickness':        'DOOR_THICKNESS',
        'function':         'FUNCTION_PARAM',
        'fire rating':      'DOOR_FIRE_RATING',
    }),
    aliases=_merged(_OPENING_ALIASES, _THERMAL_ALIASES, {
        't':            'thickness',
        'door width':   'width',
        'door height':  'height',
        'rating':       'fire rating',
        'fire':         'fire rating',
        'frame':        'frame type',
        'name':         'type name',
    }),
    common=[
        'width', 'height', 'thickness', 'level', 'sill height', 'head height',
        'mark', 'fire rating', 'frame type', 'function',
    ],
    conversions=_merged(_OPENING_CONVERSIONS, _THERMAL_CONVERSIONS, {
        'function':     units.INTEGER,
        'fire rating':  units.TEXT,
    }),
)

WINDOWS = CategoryMapping(
    'OST_Windows', 'Windows',
    instance_params=_OPENING_INSTANCE,
    type_params=_merged(_OPENING_TYPE, _THERMAL_TYPE, {
        'width':            'WINDOW_WIDTH',
        'height':           'WINDOW_HEIGHT',
        'thickness':        'WINDOW_THICKNESS',
    }),
    aliases=_merged(_OPENING_ALIASES, _THERMAL_ALIASES, {
        't':            'thickness',
        'window width': 'width',
        'window height': 'height',
        'name':         'type name',
    }),
    common=[
        'width', 'height', 'sill height', 'head height', 'level', 'mark',
        'rough width', 'rough height', 'operation',
    ],
    conversions=_merged(_OPENING_CONVERSIONS, _THERMAL_CONVERSIONS),
)


# ============================================================
# Floors, roofs, ceilings
# ============================================================
FLOORS = CategoryMapping(
    'OST_Floors', 'Floors',
    instance_params={
        'structural':               'FLOOR_PARAM_IS_STRUCTURAL',
        'level':                    'LEVEL_PARAM',
        'height offset from level': 'FLOOR_HEIGHTABOVELEVEL_PARAM',
        'elevation at bottom':      'STRUCTURAL_ELEVATION_AT_BOTTOM',
        'elevation at top':         'STRUCTURAL_ELEVATION_AT_TOP',
        'room bounding':            'WALL_ATTR_ROOM_BOUNDING',
        'thickness':                'FLOOR_ATTR_THICKNESS_PARAM',
        'slope':                    'ROOF_SLOPE',
        'perimeter':                'HOST_PERIMETER_COMPUTED',
        'area':                     'HOST_AREA_COMPUTED',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'related to mass':          'RELATED_TO_MASS',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params=_merged(_THERMAL_TYPE, {
        'default thickness':        'FLOOR_ATTR_DEFAULT_THICKNESS_PARAM',
        'structure':                'FLOOR_STRUCTURE_ID_PARAM',
        'function':                 'FUNCTION_PARAM',
        'cost':                     'ALL_MODEL_COST',
        'type mark':                'WINDOW_TYPE_ID',
    }),
    aliases=_merged(_THERMAL_ALIASES, {
        'is structural':        'structural',
        'height offset':        'height offset from level',
        'offset':               'height offset from level',
        'bottom elevation':     'elevation at bottom',
        'top elevation':        'elevation at top',
        'is room bounding':     'room bounding',
        'floor thickness':      'thickness',
        'floor area':           'area',
        'floor volume':         'volume',
        'floor level':          'level',
        'floor mark':           'mark',
        'floor comments':       'comments',
        'floor type':           'type name',
        'floor family':         'family name',
        'floor structure':      'structure',
        'floor function':       'function',
        'floor cost':           'cost',
    }),
    common=[
        'thickness', 'level', 'height offset from level', 'structural', 'area',
        'volume', 'perimeter', 'room bounding', 'function', 'mark',
    ],
    conversions=_merged(_THERMAL_CONVERSIONS, {
        'height offset from level': units.LENGTH,
        'elevation at bottom':      units.LENGTH,
        'elevation at top':         units.LENGTH,
        'thickness':                units.LENGTH,
        'default thickness':        units.LENGTH,
        'perimeter':                units.LENGTH,
        'slope':                    units.NUMBER,
        'area':                     units.AREA,
        'volume':                   units.VOLUME,
        'structural':               units.BOOLEAN,
        'room bounding':            units.BOOLEAN,
        'related to mass':          units.BOOLEAN,
        'function':                 units.INTEGER,
        'cost':                     units.CURRENCY,
    }),
)

ROOFS = CategoryMapping(
    'OST_Roofs', 'Roofs',
    instance_params={
        'base level':               'ROOF_BASE_LEVEL_PARAM',
        'base offset from level':   'ROOF_LEVEL_OFFSET_PARAM',
        'cutoff level':             'ROOF_UPTO_LEVEL_PARAM',
        'cutoff offset':            'ROOF_UPTO_LEVEL_OFFSET_PARAM',
        'rafter cut':               'ROOF_EAVE_CUT_PARAM',
        'fascia depth':             'FASCIA_DEPTH_PARAM',
        'maximum ridge height':     'ACTUAL_MAX_RIDGE_HEIGHT_PARAM',
        'thickness':                'ROOF_ATTR_THICKNESS_PARAM',
        'slope':                    'ROOF_SLOPE',
        'room bounding':            'WALL_ATTR_ROOM_BOUNDING',
        'related to mass':          'RELATED_TO_MASS',
        'area':                     'HOST_AREA_COMPUTED',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params=_merged(_THERMAL_TYPE, {
        'default thickness':        'ROOF_ATTR_DEFAULT_THICKNESS_PARAM',
        'structure':                'ROOF_STRUCTURE_ID_PARAM',
        'cost':                     'ALL_MODEL_COST',
        'type mark':                'WINDOW_TYPE_ID',
    }),
    aliases=_merged(_THERMAL_ALIASES, {
        'level':            'base level',
        'offset':           'base offset from level',
        'base offset':      'base offset from level',
        'ridge height':     'maximum ridge height',
        'max ridge height': 'maximum ridge height',
        'height':           'maximum ridge height',
        'pitch':            'slope',
        'roof slope':       'slope',
        'roof thickness':   'thickness',
        'roof area':        'area',
        'roof type':        'type name',
        'is room bounding': 'room bounding',
    }),
    common=[
        'base level', 'base offset from level', 'slope', 'thickness',
        'maximum ridge height', 'area', 'volume', 'room bounding', 'mark',
    ],
    conversions=_merged(_THERMAL_CONVERSIONS, {
        'base offset from level':   units.LENGTH,
        'cutoff offset':            units.LENGTH,
        'fascia depth':             units.INTEGER,
        'rafter cut':               units.INTEGER,
        'maximum ridge height':     units.LENGTH,
        'thickness':                units.LENGTH,
        'default thickness':        units.LENGTH,
        'slope':                    units.NUMBER,
        'area':                     units.AREA,
        'volume':                   units.VOLUME,
        'room bounding':            units.BOOLEAN,
        'related to mass':          units.BOOLEAN,
        'cost':                     units.CURRENCY,
    }),
)

CEILINGS = CategoryMapping(
    'OST_Ceilings', 'Ceilings',
    instance_params={
        'level':                    'LEVEL_PARAM',
        'height offset from level': 'CEILING_HEIGHTABOVELEVEL_PARAM',
        'slope':                    'ROOF_SLOPE',
        'room bounding':            'WALL_ATTR_ROOM_BOUNDING',
        'perimeter':                'HOST_PERIMETER_COMPUTED',
        'area':                     'HOST_AREA_COMPUTED',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params=_merged(_THERMAL_TYPE, {
        'thickness':                'CEILING_THICKNESS',
        'structure':                'CEILING_STRUCTURE_ID_PARAM',
        'cost':                     'ALL_MODEL_COST',
        'type mark':                'WINDOW_TYPE_ID',
    }),
    aliases=_merged(_THERMAL_ALIASES, {
        'height':               'height offset from level',
        'offset':               'height offset from level',
        'ceiling height':       'height offset from level',
        'ceiling thickness':    'thickness',
        'ceiling area':         'area',
        'ceiling level':        'level',
        'material cost':        'cost',
        'family type':          'family and type',
        'ceiling family':       'family name',
        'ceiling type':         'type name',
        'is room bounding':     'room bounding',
    }),
    common=[
        'level', 'height offset from level', 'thickness', 'area', 'perimeter',
        'room bounding', 'mark',
    ],
    conversions=_merged(_THERMAL_CONVERSIONS, {
        'height offset from level': units.LENGTH,
        'thickness':                units.LENGTH,
        'perimeter':                units.LENGTH,
        'slope':                    units.NUMBER,
        'area':                     units.AREA,
        'volume':                   units.VOLUME,
        'room bounding':            units.BOOLEAN,
        'cost':                     units.CURRENCY,
    }),
)


# ============================================================
# Structure
# ============================================================
_SECTION_TYPE = {
    'height':                       'STRUCTURAL_SECTION_COMMON_HEIGHT',
    'width':                        'STRUCTURAL_SECTION_COMMON_WIDTH',
    'flange thickness':             'STRUCTURAL_SECTION_ISHAPE_FLANGETHICKNESS',
    'web thickness':                'STRUCTURAL_SECTION_ISHAPE_WEBTHICKNESS',
    'section area':                 'STRUCTURAL_SECTION_AREA',
    'perimeter':                    'STRUCTURAL_SECTION_COMMON_PERIMETER',
    'nominal weight':               'STRUCTURAL_SECTION_COMMON_NOMINAL_WEIGHT',
    'moment of inertia strong axis': 'STRUCTURAL_SECTION_COMMON_MOMENT_OF_INERTIA_STRONG_AXIS',
    'moment of inertia weak axis':  'STRUCTURAL_SECTION_COMMON_MOMENT_OF_INERTIA_WEAK_AXIS',
    'elastic modulus strong axis':  'STRUCTURAL_SECTION_COMMON_ELASTIC_MODULUS_STRONG_AXIS',
    'elastic modulus weak axis':    'STRUCTURAL_SECTION_COMMON_ELASTIC_MODULUS_WEAK_AXIS',
    'plastic modulus strong axis':  'STRUCTURAL_SECTION_COMMON_PLASTIC_MODULUS_STRONG_AXIS',
    'plastic modulus weak axis':    'STRUCTURAL_SECTION_COMMON_PLASTIC_MODULUS_WEAK_AXIS',
    'torsional moment of inertia':  'STRUCTURAL_SECTION_COMMON_TORSIONAL_MOMENT_OF_INERTIA',
    'warping constant':             'STRUCTURAL_SECTION_COMMON_WARPING_CONSTANT',
    'principal axes angle':         'STRUCTURAL_SECTION_COMMON_ALPHA',
    'section shape':                'STRUCTURAL_SECTION_SHAPE',
    'code name':                    'STRUCTURAL_SECTION_NAME_KEY',
    'cost':                         'ALL_MODEL_COST',
    'type mark':                    'WINDOW_TYPE_ID',
}

_SECTION_ALIASES = {
    'h':            'height',
    'd':            'height',
    'depth':        'height',
    'w':            'width',
    'b':            'width',
    'tf':           'flange thickness',
    'tw':           'web thickness',
    'area':         'section area',
    'a':            'section area',
    'weight':       'nominal weight',
    'ix':           'moment of inertia strong axis',
    'iy':           'moment of inertia weak axis',
    'sx':           'elastic modulus strong axis',
    'sy':           'elastic modulus weak axis',
    'zx':           'plastic modulus strong axis',
    'zy':           'plastic modulus weak axis',
    'j':            'torsional moment of inertia',
    'cw':           'warping constant',
    'rotation':     'cross-section rotation',
    'angle':        'cross-section rotation',
    'material':     'structural material',
    'comment':      'comments',
    'note':         'comments',
}

_SECTION_CONVERSIONS = {
    'height':                       units.INCHES,
    'width':                        units.INCHES,
    'flange thickness':             units.INCHES,
    'web thickness':                units.INCHES,
    'perimeter':                    units.INCHES,
    'section area':                 units.SQUARE_INCHES,
    'nominal weight':               units.NUMBER,
    'moment of inertia strong axis': units.NUMBER,
    'moment of inertia weak axis':  units.NUMBER,
    'elastic modulus strong axis':  units.NUMBER,
    'elastic modulus weak axis':    units.NUMBER,
    'plastic modulus strong axis':  units.NUMBER,
    'plastic modulus weak axis':    units.NUMBER,
    'torsional moment of inertia':  units.NUMBER,
    'warping constant':             units.NUMBER,
    'principal axes angle':         units.ANGLE,
    'cross-section rotation':       units.ANGLE,
    'cost':                         units.CURRENCY,
    'volume':                       units.VOLUME,
}

STRUCTURAL_COLUMNS = CategoryMapping(
    'OST_StructuralColumns', 'Structural Columns',
    instance_params={
        'base level':               'FAMILY_BASE_LEVEL_PARAM',
        'top level':                'FAMILY_TOP_LEVEL_PARAM',
        'base offset':              'FAMILY_BASE_LEVEL_OFFSET_PARAM',
        'top offset':               'FAMILY_TOP_LEVEL_OFFSET_PARAM',
        'column location mark':     'COLUMN_LOCATION_MARK',
        'cross-section rotation':   'STRUCTURAL_BEND_DIR_ANGLE',
        'moves with grids':         'INSTANCE_MOVES_WITH_GRID_PARAM',
        'room bounding':            'WALL_ATTR_ROOM_BOUNDING',
        'column style':             'SLANTED_COLUMN_TYPE_PARAM',
        'structural material':      'STRUCTURAL_MATERIAL_PARAM',
        'length':                   'INSTANCE_LENGTH_PARAM',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params=_SECTION_TYPE,
    aliases=_merged(_SECTION_ALIASES, {
        'level':                'base level',
        'base level offset':    'base offset',
        'top level offset':     'top offset',
        'grid mark':            'column location mark',
        'location mark':        'column location mark',
        'column length':        'length',
    }),
    common=[
        'base level', 'top level', 'base offset', 'top offset', 'length',
        'structural material', 'column location mark', 'height', 'width',
        'section area', 'nominal weight',
    ],
    conversions=_merged(_SECTION_CONVERSIONS, {
        'base offset':          units.LENGTH,
        'top offset':           units.LENGTH,
        'length':               units.LENGTH,
        'moves with grids':     units.BOOLEAN,
        'room bounding':        units.BOOLEAN,
        'column style':         units.INTEGER,
    }),
)

STRUCTURAL_FOUNDATIONS = CategoryMapping(
    'OST_StructuralFoundation', 'Structural Foundations',
    instance_params={
        'level':                    'SCHEDULE_LEVEL_PARAM',
        'height offset from level': 'FLOOR_HEIGHTABOVELEVEL_PARAM',
        'elevation at bottom':      'STRUCTURAL_ELEVATION_AT_BOTTOM',
        'elevation at top':         'STRUCTURAL_ELEVATION_AT_TOP',
        'width':                    'CONTINUOUS_FOOTING_WIDTH',
        'length':                   'CONTINUOUS_FOOTING_LENGTH',
        'moves with grids':         'INSTANCE_MOVES_WITH_GRID_PARAM',
        'structural material':      'STRUCTURAL_MATERIAL_PARAM',
        'area':                     'HOST_AREA_COMPUTED',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params={
        'foundation width':         'STRUCTURAL_FOUNDATION_WIDTH',
        'foundation length':        'STRUCTURAL_FOUNDATION_LENGTH',
        'foundation thickness':     'STRUCTURAL_FOUNDATION_THICKNESS',
        'cost':                     'ALL_MODEL_COST',
        'type mark':                'WINDOW_TYPE_ID',
    },
    aliases={
        'w':                    'width',
        'l':                    'length',
        't':                    'foundation thickness',
        'thickness':            'foundation thickness',
        'h':                    'foundation thickness',
        'height':               'foundation thickness',
        'depth':                'foundation thickness',
        'bottom elevation':     'elevation at bottom',
        'elev bottom':          'elevation at bottom',
        'top elevation':        'elevation at top',
        'elev top':             'elevation at top',
        'offset':               'height offset from level',
        'material':             'structural material',
    },
    common=[
        'level', 'width', 'length', 'foundation thickness', 'elevation at bottom',
        'elevation at top', 'structural material', 'volume', 'mark',
    ],
    conversions={
        'width':                    units.LENGTH,
        'length':                   units.LENGTH,
        'foundation width':         units.LENGTH,
        'foundation length':        units.LENGTH,
        'foundation thickness':     units.LENGTH,
        'height offset from level': units.LENGTH,
        'elevation at bottom':      units.LENGTH,
        'elevation at top':         units.LENGTH,
        'moves with grids':         units.BOOLEAN,
        'area':                     units.AREA,
        'volume':                   units.VOLUME,
        'cost':                     units.CURRENCY,
    },
)

STRUCTURAL_FRAMING = CategoryMapping(
    'OST_StructuralFraming', 'Structural Framing',
    instance_params={
        'length':                   'INSTANCE_LENGTH_PARAM',
        'cut length':               'STRUCTURAL_FRAME_CUT_LENGTH',
        'reference level':          'INSTANCE_REFERENCE_LEVEL_PARAM',
        'start level offset':       'STRUCTURAL_BEAM_END0_ELEVATION',
        'end level offset':         'STRUCTURAL_BEAM_END1_ELEVATION',
        'elevation at top':         'STRUCTURAL_ELEVATION_AT_TOP',
        'elevation at bottom':      'STRUCTURAL_ELEVATION_AT_BOTTOM',
        'reference level elevation': 'STRUCTURAL_REFERENCE_LEVEL_ELEVATION',
        'cross-section rotation':   'STRUCTURAL_BEND_DIR_ANGLE',
        'structural usage':         'INSTANCE_STRUCT_USAGE_PARAM',
        'structural material':      'STRUCTURAL_MATERIAL_PARAM',
        'start extension':          'START_EXTENSION',
        'end extension':            'END_EXTENSION',
        'y offset value':           'Y_OFFSET_VALUE',
        'z offset value':           'Z_OFFSET_VALUE',
        'number of studs':          'STRUCTURAL_NUMBER_OF_STUDS',
        'camber size':              'STRUCTURAL_CAMBER',
        'volume':                   'HOST_VOLUME_COMPUTED',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params=_merged(_SECTION_TYPE, {
        'web fillet':               'STRUCTURAL_SECTION_ISHAPE_WEBFILLET',
        'clear web height':         'STRUCTURAL_SECTION_ISHAPE_CLEAR_WEB_HEIGHT',
        'shear area strong axis':   'STRUCTURAL_SECTION_SHEAR_AREA_STRONG_AXIS',
        'shear area weak axis':     'STRUCTURAL_SECTION_SHEAR_AREA_WEAK_AXIS',
        'centroid vertical':        'STRUCTURAL_SECTION_COMMON_CENTROID_VERTICAL',
        'centroid horizontal':      'STRUCTURAL_SECTION_COMMON_CENTROID_HORIZ',
    }),
    aliases=_merged(_SECTION_ALIASES, {
        'level':                'reference level',
        'usage':                'structural usage',
        'beam length':          'length',
        'span':                 'length',
        'start offset':         'start level offset',
        'end offset':           'end level offset',
        'top elevation':        'elevation at top',
        'bottom elevation':     'elevation at bottom',
        'camber':               'camber size',
        'studs':                'number of studs',
    }),
    common=[
        'length', 'cut length', 'reference level', 'start level offset', 'end level offset',
        'structural usage', 'structural material', 'height', 'width', 'section area',
        'nominal weight', 'moment of inertia strong axis',
    ],
    conversions=_merged(_SECTION_CONVERSIONS, {
        'length':                   units.FRAMING_LENGTH,
        'cut length':               units.FRAMING_LENGTH,
        'start level offset':       units.FRAMING_LENGTH,
        'end level offset':         units.FRAMING_LENGTH,
        'elevation at top':         units.FRAMING_LENGTH,
        'elevation at bottom':      units.FRAMING_LENGTH,
        'reference level elevation': units.FRAMING_LENGTH,
        'start extension':          units.FRAMING_LENGTH,
        'end extension':            units.FRAMING_LENGTH,
        'y offset value':           units.FRAMING_LENGTH,
        'z offset value':           units.FRAMING_LENGTH,
        'camber size':              units.FRAMING_LENGTH,
        'web fillet':               units.INCHES,
        'clear web height':         units.INCHES,
        'centroid vertical':        units.INCHES,
        'centroid horizontal':      units.INCHES,
        'shear area strong axis':   units.SQUARE_INCHES,
        'shear area weak axis':     units.SQUARE_INCHES,
        'structural usage':         units.INTEGER,
        'number of studs':          units.INTEGER,
    }),
)


# ============================================================
# MEP
# ============================================================
CONDUITS = CategoryMapping(
    'OST_Conduit', 'Conduits',
    instance_params={
        'diameter(trade size)':     'RBS_CONDUIT_DIAMETER_PARAM',
        'outside diameter':         'RBS_CONDUIT_OUTER_DIAM_PARAM',
        'inside diameter':          'RBS_CONDUIT_INNER_DIAM_PARAM',
        'length':                   'CURVE_ELEM_LENGTH',
        'size':                     'RBS_CALCULATED_SIZE',
        'middle elevation':         'RBS_OFFSET_PARAM',
        'start middle elevation':   'RBS_START_OFFSET_PARAM',
        'end middle elevation':     'RBS_END_OFFSET_PARAM',
        'upper end top elevation':  'RBS_CTC_TOP_ELEVATION',
        'lower end bottom elevation': 'RBS_CTC_BOTTOM_ELEVATION',
        'horizontal justification': 'RBS_CURVE_HOR_OFFSET_PARAM',
        'vertical justification':   'RBS_CURVE_VERT_OFFSET_PARAM',
        'service type':             'RBS_CTC_SERVICE_TYPE',
        'reference level':          'RBS_START_LEVEL_PARAM',
        'mark':                     'ALL_MODEL_MARK',
        'comments':                 'ALL_MODEL_INSTANCE_COMMENTS',
    },
    type_params={
        'bend':                     'RBS_CURVETYPE_DEFAULT_BEND_PARAM',
        'union':                    'RBS_CURVETYPE_DEFAULT_UNION_PARAM',
        'tee':                      'RBS_CURVETYPE_DEFAULT_TEE_PARAM',
        'transition':               'RBS_CURVETYPE_DEFAULT_TRANSITION_PARAM',
        'cross':                    'RBS_CURVETYPE_DEFAULT_CROSS_PARAM',
        'standard':                 'CONDUIT_STANDARD_TYPE_PARAM',
    },
    aliases={
        'diameter':         'diameter(trade size)',
        'dia':              'diameter(trade size)',
        'd':                'diameter(trade size)',
        'trade size':       'diameter(trade size)',
        'conduit diameter': 'diameter(trade size)',
        'outer diameter':   'outside diameter',
        'od':               'outside diameter',
        'inner diameter':   'inside diameter',
        'id':               'inside diameter',
        'len':              'length',
        'conduit length':   'length',
        'elevation':        'middle elevation',
        'offset':           'middle elevation',
        'level':            'reference level',
        'service':          'service type',
    },
    common=[
        'diameter(trade size)', 'outside diameter', 'inside diameter', 'length',
        'size', 'middle elevation', 'reference level', 'service type',
    ],
    conversions={
        'diameter(trade size)':     units.CONDUIT_DIAMETER,
        'outside diameter':         units.CONDUIT_DIAMETER,
        'inside diameter':          units.CONDUIT_DIAMETER,
        'length':                   units.CONDUIT_LENGTH,
        'middle elevation':         units.CONDUIT_LENGTH,
        'start middle elevation':   units.CONDUIT_LENGTH,
        'end middle elevation':     units.CONDUIT_LENGTH,
        'upper end top elevation':  units.CONDUIT_LENGTH,
        'lower end bottom elevation': units.CONDUIT_LENGTH,
        'size':                     units.TEXT,
        'service type':             units.TEXT,
        'horizontal justification': units.INTEGER,
        'vertical justification':   units.INTEGER,
    },
)


# ============================================================
# Datums
# ============================================================
LEVELS = CategoryMapping(
    'OST_Levels', 'Levels',
    instance_params={
        'name':                     'DATUM_TEXT',
        'elevation':                'LEVEL_ELEV',
        'computation height':       'LEVEL_ROOM_COMPUTATION_HEIGHT',
        'story above':              'LEVEL_UP_TO_LEVEL',
        'building story':           'LEVEL_IS_BUILDING_STORY',
        'structural':               'LEVEL_IS_STRUCTURAL',
        'scope box':                'DATUM_VOLUME_OF_INTEREST',
        'export to ifc':            'IFC_EXPORT_ELEMENT',
    },
    type_params={
        'elevation base':           'LEVEL_RELATIVE_BASE_TYPE',
        'line weight':              'LINE_PEN',
        'color':                    'LINE_COLOR',
        'line pattern':             'LINE_PATTERN',
        'symbol':                   'LEVEL_HEAD_TAG',
        'symbol at end 1 default':  'DATUM_BUBBLE_END_1',
        'symbol at end 2 default':  'DATUM_BUBBLE_END_2',
    },
    aliases={
        'level name':       'name',
        'height':           'elevation',
        'elev':             'elevation',
        'level elevation':  'elevation',
        'room computation height': 'computation height',
        'is building story': 'building story',
        'is structural':    'structural',
        'colour':           'color',
        'tag':              'symbol',
        'head':             'symbol',
        'pattern':          'line pattern',
        'weight':           'line weight',
    },
    common=['name', 'elevation', 'computation height', 'building story', 'structural', 'story above'],
    conversions={
        'name':                     units.TEXT,
        'elevation':                units.LEVEL_ELEVATION,
        'computation height':       units.LEVEL_ELEVATION,
        'building story':           units.BOOLEAN,
        'structural':               units.BOOLEAN,
        'symbol at end 1 default':  units.BOOLEAN,
        'symbol at end 2 default':  units.BOOLEAN,
        'export to ifc':            units.INTEGER,
        'elevation base':           units.INTEGER,
        'line weight':              units.INTEGER,
        'color':                    units.INTEGER,
    },
)

GRIDS = CategoryMapping(
    'OST_Grids', 'Grids',
    instance_params={
        'name':                     'DATUM_TEXT',
        'scope box':                'DATUM_VOLUME_OF_INTEREST',
        'export to ifc':            'IFC_EXPORT_ELEMENT',
    },
    type_params={
        'symbol':                   'GRID_HEAD_TAG',
        'center segment':           'GRID_CENTER_SEGMENT_STYLE',
        'end segment weight':       'GRID_END_SEGMENT_WEIGHT',
        'end segment color':        'GRID_END_SEGMENT_COLOR',
        'end segment pattern':      'GRID_END_SEGMENT_PATTERN',
        'plan view symbols end 1':  'GRID_BUBBLE_END_1',
        'plan view symbols end 2':  'GRID_BUBBLE_END_2',
        'non-plan view symbols':    'GRID_BUBBLE_LOCATION_IN_ELEV',
    },
    aliases={
        'grid name':        'name',
        'text':             'name',
        'grid text':        'name',
        'datum text':       'name',
        'grid type':        'type name',
        'bubble end 1':     'plan view symbols end 1',
        'bubble end 2':     'plan view symbols end 2',
        'elevation bubble': 'non-plan view symbols',
        'tag':              'symbol',
    },
    common=['name', 'scope box', 'symbol', 'plan view symbols end 1', 'plan view symbols end 2'],
    conversions={
        'name':                     units.TEXT,
        'export to ifc':            units.INTEGER,
        'center segment':           units.INTEGER,
        'end segment weight':       units.INTEGER,
        'end segment color':        units.INTEGER,
        'plan view symbols end 1':  units.BOOLEAN,
        'plan view symbols end 2':  units.BOOLEAN,
        'non-plan view symbols':    units.INTEGER,
    },
)

SCOPE_BOXES = CategoryMapping(
    'OST_VolumeOfInterest', 'Scope Boxes',
    instance_params={
        'name':                     'VOLUME_OF_INTEREST_NAME',
        'height':                   'VOLUME_OF_INTEREST_HEIGHT',
        'views visible':            'VOLUME_OF_INTEREST_VIEWS_VISIBLE',
    },
    aliases={
        'scope box name':           'name',
        'box name':                 'name',
        'volume of interest name':  'name',
        'scope height':             'height',
        'box height':               'height',
        'visible views':            'views visible',
        'views':                    'views visible',
    },
    common=['name', 'height', 'views visible'],
    conversions={
        'name':     units.TEXT,
        'height':   units.LENGTH,
    },
)


ALL_MAPPINGS = (
    WALLS,
    DOORS,
    WINDOWS,
    FLOORS,
    ROOFS,
    CEILINGS,
    STRUCTURAL_COLUMNS,
    STRUCTURAL_FOUNDATIONS,
    STRUCTURAL_FRAMING,
    CONDUITS,
    LEVELS,
    GRIDS,
    SCOPE_BOXES,
)
