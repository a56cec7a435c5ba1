# -*- coding: utf-8 -*-
"""View range planes: level-relative offsets <-> absolute elevations.

A plan view stores each plane (Top, Cut, Bottom, View Depth) as a level
reference plus an offset. Absolute elevation of a level is its project
elevation plus the project base point Z. A negative level id means the
plane is unlimited. "Level Below" resolves to the next lower level.
"""
import logging
from collections import namedtuple

from .results import Invalid, success_response, failure_response
from .units import to_number
from ._constants import TOLERANCE, NEAR_PLANE_WARNING, MAX_PLANE_MOVEMENT, VIEW_RANGE_PLANES

logger = logging.getLogger(__name__)

LEVEL_BELOW = 'level_below'

LevelInfo = namedtuple('LevelInfo', 'id name project_elevation')
PlaneSetting = namedtuple('PlaneSetting', 'level_id offset')
ValidationResult = namedtuple('ValidationResult', 'valid error warnings elevations')
PlaneMovement = namedtuple('PlaneMovement', 'plane direction distance')
UpdatePlan = namedtuple('UpdatePlan', 'offsets elevations movements warnings')

PLANE_KEYS = tuple(k for k, _ in VIEW_RANGE_PLANES)
PLANE_NAMES = dict(VIEW_RANGE_PLANES)


def is_unlimited(level_ref):
    if level_ref is None:
        return True
    return isinstance(level_ref, int) and not isinstance(level_ref, bool) and level_ref < 0


class ViewRangeCoordinateResolver(object):
    """Convert plane offsets using a snapshot of the document's levels.

    ``view_level_id`` is the view's own level, the reference for the
    LEVEL_BELOW sentinel.
    """

    def __init__(self, levels, base_point_z=0.0, view_level_id=None):
        self.base_point_z = base_point_z or 0.0
        self.view_level_id = view_level_id
        self._levels = {lvl.id: lvl for lvl in levels}
        self._ordered = sorted(levels, key=lambda lvl: (self.absolute_elevation(lvl), lvl.id))

    def absolute_elevation(self, level):
        return level.project_elevation + self.base_point_z

    def level(self, level_id):
        level = self._levels.get(level_id)
        if level is None:
            raise LookupError('Level with ID {} not found'.format(level_id))
        return level

    def level_below(self, level):
        """Predecessor in absolute elevation order, or None for the lowest level."""
        index = self._ordered.index(level)
        return self._ordered[index - 1] if index > 0 else None

    def base_level(self, level_ref):
        """Level whose elevation a plane offset is measured from.

        None for unlimited planes and for "Level Below" with no lower level.
        """
        if level_ref == LEVEL_BELOW:
            if self.view_level_id is None:
                return None
            return self.level_below(self.level(self.view_level_id))
        if is_unlimited(level_ref):
            return None
        level = self.level(level_ref)
        if 'Level Below' in (level.name or ''):
            return self.level_below(level)
        return level

    def to_absolute(self, level_ref, offset):
        """Absolute elevation, or None when the plane is unlimited."""
        if level_ref != LEVEL_BELOW and is_unlimited(level_ref):
            return None
        base = self.base_level(level_ref)
        if base is None:
            return offset
        return self.absolute_elevation(base) + offset

    def to_level_offset(self, level_ref, elevation):
        """Inverse of to_absolute for the same level reference."""
        if level_ref != LEVEL_BELOW and is_unlimited(level_ref):
            return elevation
        base = self.base_level(level_ref)
        if base is None:
            return elevation
        return elevation - self.absolute_elevation(base)

    def level_name(self, level_ref):
        if level_ref == LEVEL_BELOW:
            return 'Level Below'
        if is_unlimited(level_ref):
            return 'Unlimited'
        return self.level(level_ref).name

    def elevations(self, settings):
        """{plane key: absolute elevation or None} for PlaneSetting values."""
        return {key: self.to_absolute(s.level_id, s.offset) for key, s in settings.items()}


def validate_view_range(elevations):
    """Check Top >= Cut >= Bottom >= View Depth. Unlimited (None) planes are skipped."""
    warnings = []
    limited = [(k, elevations[k]) for k in PLANE_KEYS if elevations.get(k) is not None]
    unlimited = [PLANE_NAMES[k] for k in PLANE_KEYS if k in elevations and elevations[k] is None]

    if unlimited and len(unlimited) == len([k for k in PLANE_KEYS if k in elevations]):
        warnings.append('All view range planes are unlimited: no usable range')
    elif unlimited:
        warnings.append('Some planes are unlimited: {}'.format(', '.join(unlimited)))

    for (upper, hi), (lower, lo) in zip(limited, limited[1:]):
        if hi < lo - TOLERANCE:
            error = "{lower} above {upper}: {upper} plane ({hi:.3f}') cannot be below " \
                    "{lower} plane ({lo:.3f}')".format(upper=PLANE_NAMES[upper], lower=PLANE_NAMES[lower],
                                                       hi=hi, lo=lo)
            return ValidationResult(False, error, warnings, dict(elevations))
        if hi - lo < NEAR_PLANE_WARNING:
            warnings.append("{} and {} planes are very close ({:.3f}' apart)".format(
                PLANE_NAMES[upper], PLANE_NAMES[lower], abs(hi - lo)))
    return ValidationResult(True, None, warnings, dict(elevations))


def validate_plane_movement(current, requested):
    """Error string for an excessive move, or None."""
    for key, new in requested.items():
        old = current.get(key)
        if old is None:
            continue
        movement = abs(new - old)
        if movement > MAX_PLANE_MOVEMENT:
            return "{} plane moved {:.2f}' which seems excessive. Please verify the movement.".format(
                PLANE_NAMES[key], movement)
    return None


def plan_view_range_update(resolver, settings, requested):
    """Work out new offsets for the planes in ``requested``.

    ``settings`` maps plane key -> PlaneSetting (current state) and
    ``requested`` maps plane key -> new absolute elevation in feet.
    Returns UpdatePlan or Invalid.
    """
    if not requested:
        return Invalid('No plane elevations given. Use any of: {}'.format(', '.join(PLANE_KEYS)))
    unknown = [k for k in requested if k not in PLANE_KEYS]
    if unknown:
        return Invalid('Unknown view range planes: {}. Use any of: {}'.format(
            ', '.join(sorted(unknown)), ', '.join(PLANE_KEYS)))

    current = resolver.elevations(settings)
    for key in requested:
        if current.get(key) is None:
            return Invalid('{} plane is unlimited and cannot be moved'.format(PLANE_NAMES[key]))

    error = validate_plane_movement(current, requested)
    if error:
        return Invalid(error)

    merged = dict(current)
    merged.update(requested)
    validation = validate_view_range(merged)
    if not validation.valid:
        return Invalid(validation.error)

    offsets = {}
    movements = []
    for key in PLANE_KEYS:
        if key not in requested:
            continue
        offsets[key] = resolver.to_level_offset(settings[key].level_id, requested[key])
        delta = requested[key] - current[key]
        direction = 'up' if delta > 0 else 'down' if delta < 0 else 'none'
        movements.append(PlaneMovement(PLANE_NAMES[key], direction, abs(delta)))
    return UpdatePlan(offsets, merged, movements, validation.warnings)


def describe_update(view_name, movements):
    lines = ["Successfully updated view range for '{}'!".format(view_name)]
    moved = [m for m in movements if m.distance > TOLERANCE]
    if moved:
        lines.append('Plane movements:')
        for m in moved:
            lines.append("• {} plane moved {} {:.2f}'".format(m.plane, m.direction, m.distance))
    else:
        lines.append('No planes were moved.')
    return '\n'.join(lines)


def view_range_info(resolver, settings):
    """Per-plane level reference, offset and absolute elevation."""
    planes = {}
    for key in PLANE_KEYS:
        setting = settings.get(key)
        if setting is None:
            continue
        level_id = setting.level_id
        planes[key] = {
            'plane': PLANE_NAMES[key],
            'level_id': level_id if level_id != LEVEL_BELOW else None,
            'level_name': resolver.level_name(level_id),
            'offset': setting.offset,
            'elevation': resolver.to_absolute(level_id, setting.offset),
            'unlimited': level_id != LEVEL_BELOW and is_unlimited(level_id),
        }
    return planes


def _resolver_for(host, view):
    return ViewRangeCoordinateResolver(host.levels(), host.base_point_z(), host.view_level_id(view))


def view_range_request(host, data):
    """Current planes of a plan view (``view_id`` or the active view)."""
    try:
        view = host.plan_view(data.get("view_id"))
    except ValueError as e:
        return failure_response(str(e)), 400
    resolver = _resolver_for(host, view)
    settings = host.plane_settings(view)
    planes = view_range_info(resolver, settings)
    validation = validate_view_range({k: p['elevation'] for k, p in planes.items()})
    return success_response(
        "View range for '{}'".format(host.element_name(view)),
        view_id=host.element_id(view),
        view_name=host.element_name(view),
        base_point_z=resolver.base_point_z,
        planes=planes,
        valid=validation.valid,
        validation_error=validation.error,
        warnings=validation.warnings,
    ), 200


def update_view_range_request(host, data):
    """Move planes to new absolute elevations (feet). ``preview`` skips the write."""
    elevations = data.get("elevations") or {}
    if not isinstance(elevations, dict):
        return failure_response("elevations must be an object of plane -> elevation"), 400
    requested = {}
    for key, value in elevations.items():
        number = to_number(value)
        if number is None:
            return failure_response("Elevation for '{}' must be a number".format(key)), 400
        requested[key] = number
    try:
        view = host.plan_view(data.get("view_id"))
    except ValueError as e:
        return failure_response(str(e)), 400

    resolver = _resolver_for(host, view)
    settings = host.plane_settings(view)
    plan = plan_view_range_update(resolver, settings, requested)
    if isinstance(plan, Invalid):
        return failure_response(plan.message), 400

    view_name = host.element_name(view)
    movements = [m._asdict() for m in plan.movements]
    if data.get("preview"):
        return success_response(
            "Preview of view range update for '{}'".format(view_name),
            preview=True, offsets=plan.offsets, elevations=plan.elevations,
            movements=movements, warnings=plan.warnings,
        ), 200

    with host.transaction("Update View Range"):
        host.set_plane_offsets(view, plan.offsets)
    logger.info("View range updated for '%s': %s", view_name, plan.offsets)
    return success_response(
        describe_update(view_name, plan.movements),
        preview=False, offsets=plan.offsets, elevations=plan.elevations,
        movements=movements, warnings=plan.warnings,
    ), 200
