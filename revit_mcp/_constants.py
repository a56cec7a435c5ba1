# -*- coding: utf-8 -*-
"""
_constants.py: shared constants for the Revit-side command set.
Single source of truth for tolerances, unit factors, limits and category names.
"""

# ============================================================
# Unit conversion coefficients (exact values)
# ============================================================
MM_PER_FT     = 304.8         # millimetres in one foot
IN_PER_FT     = 12.0          # inches in one foot
SQIN_PER_SQFT = 144.0         # square inches in one square foot

# ============================================================
# Tolerances and limits
# ============================================================
TOLERANCE             = 0.001   # internal units (feet)
NEAR_PLANE_WARNING    = 0.1     # feet between adjacent view-range planes
MAX_PLANE_MOVEMENT    = 100.0   # feet
DEFAULT_MAX_ELEMENTS  = 50
FUZZY_MIN_CONFIDENCE  = 0.3
FUZZY_MAX_MATCHES     = 5

DETAIL_LEVELS    = ('minimal', 'basic', 'full')
RESPONSE_FORMATS = ('standard', 'tabular')

# ============================================================
# View-range planes, in elevation order (highest first)
# key = request/response key, value = display name
# ============================================================
VIEW_RANGE_PLANES = (
    ('top',        'Top'),
    ('cut',        'Cut'),
    ('bottom',     'Bottom'),
    ('view_depth', 'View Depth'),
)

# ============================================================
# Friendly category names -> OST_* enum names
# ============================================================
CATEGORY_ALIASES = {
    'walls':                'OST_Walls',
    'wall':                 'OST_Walls',
    'doors':                'OST_Doors',
    'door':                 'OST_Doors',
    'windows':              'OST_Windows',
    'window':               'OST_Windows',
    'floors':               'OST_Floors',
    'floor':                'OST_Floors',
    'flooring':             'OST_Floors',
    'slab':                 'OST_Floors',
    'slabs':                'OST_Floors',
    'ceilings':             'OST_Ceilings',
    'ceiling':              'OST_Ceilings',
    'roofs':                'OST_Roofs',
    'roof':                 'OST_Roofs',
    'columns':              'OST_StructuralColumns',
    'column':               'OST_StructuralColumns',
    'structural columns':   'OST_StructuralColumns',
    'beams':                'OST_StructuralFraming',
    'beam':                 'OST_StructuralFraming',
    'structural framing':   'OST_StructuralFraming',
    'framing':              'OST_StructuralFraming',
    'foundations':          'OST_StructuralFoundation',
    'foundation':           'OST_StructuralFoundation',
    'footings':             'OST_StructuralFoundation',
    'levels':               'OST_Levels',
    'level':                'OST_Levels',
    'grids':                'OST_Grids',
    'grid':                 'OST_Grids',
    'scope boxes':          'OST_VolumeOfInterest',
    'scope box':            'OST_VolumeOfInterest',
    'conduits':             'OST_Conduit',
    'conduit':              'OST_Conduit',
    'conduit fittings':     'OST_ConduitFitting',
    'cable trays':          'OST_CableTray',
    'cable tray':           'OST_CableTray',
    'ducts':                'OST_DuctCurves',
    'duct':                 'OST_DuctCurves',
    'duct fittings':        'OST_DuctFitting',
    'pipes':                'OST_PipeCurves',
    'pipe':                 'OST_PipeCurves',
    'pipe fittings':        'OST_PipeFitting',
    'mechanical equipment': 'OST_MechanicalEquipment',
    'electrical equipment': 'OST_ElectricalEquipment',
    'plumbing fixtures':    'OST_PlumbingFixtures',
    'rooms':                'OST_Rooms',
    'room':                 'OST_Rooms',
}


def normalize_category(name):
    """Map a friendly or OST_* category name to its OST_* spelling.

    Returns None for empty input. Unknown names are returned trimmed so the
    host can still try to parse them as an enum member.
    """
    if not name:
        return None
    text = str(name).strip()
    if not text:
        return None
    friendly = CATEGORY_ALIASES.get(' '.join(text.lower().replace('_', ' ').split()))
    if friendly:
        return friendly
    if text.lower().startswith('ost_'):
        return 'OST_' + text[4:]
    return text
