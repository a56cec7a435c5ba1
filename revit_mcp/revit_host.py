# -*- coding: utf-8 -*-
"""
Host adapter over the Revit API (pyRevit ``DB``).

Everything the pure modules need from Revit goes through RevitHost:
parameter reads and writes, element collection, element facts for
serialization, levels and view ranges, graphic overrides.
"""
from pyrevit import DB
import System
import logging

from .utils import get_element_name, id_value, normalize_string
from .transactions import transaction_scope
from .units import feet_to_mm, to_bool_int, to_int
from .values import ParameterValue, DOUBLE, INTEGER, STRING
from .view_range import LevelInfo, PlaneSetting, LEVEL_BELOW
from . import element_info as kinds

logger = logging.getLogger(__name__)

_PLANES = (
    ('top', DB.PlanViewPlane.TopClipPlane),
    ('cut', DB.PlanViewPlane.CutPlane),
    ('bottom', DB.PlanViewPlane.BottomClipPlane),
    ('view_depth', DB.PlanViewPlane.ViewDepthPlane),
)

_CATEGORY_NAMES = {name.lower(): name for name in System.Enum.GetNames(DB.BuiltInCategory)}


def _point_mm(xyz):
    return {"x": round(feet_to_mm(xyz.X), 2), "y": round(feet_to_mm(xyz.Y), 2),
            "z": round(feet_to_mm(xyz.Z), 2)}


class RevitHost(object):

    def __init__(self, doc, uidoc=None):
        self.doc = doc
        self.uidoc = uidoc

    # ---- parameters ----

    def _value(self, param):
        if param is None:
            return None
        name = normalize_string(param.Definition.Name) if param.Definition else None
        storage = param.StorageType
        if storage == DB.StorageType.Double:
            kind = DOUBLE
        elif storage == DB.StorageType.String:
            kind = STRING
        else:
            kind = INTEGER
        if not param.HasValue:
            return ParameterValue.empty(name, kind, "Parameter has no value")

        display = param.AsValueString()
        if storage == DB.StorageType.Double:
            return ParameterValue.double(name, param.AsDouble(), display)
        if storage == DB.StorageType.String:
            text = param.AsString()
            if text is None:
                return ParameterValue.empty(name, STRING, "Parameter has no value")
            return ParameterValue.string(name, text, display)
        if storage == DB.StorageType.ElementId:
            ref_id = param.AsElementId()
            if ref_id == DB.ElementId.InvalidElementId:
                return ParameterValue.empty(name, INTEGER, "No element assigned", reference=True)
            ref = self.doc.GetElement(ref_id)
            label = display or (get_element_name(ref) if ref is not None else None)
            return ParameterValue.element_ref(name, id_value(ref_id), label)
        return ParameterValue.integer(name, param.AsInteger(), display)

    def _builtin(self, ident):
        return getattr(DB.BuiltInParameter, ident, None)

    def find_parameter(self, owner, name):
        """Parameter by display name, case-insensitive."""
        param = owner.LookupParameter(name)
        if param is not None:
            return param
        lower = name.lower()
        for item in owner.Parameters:
            if item and item.Definition and normalize_string(item.Definition.Name).lower() == lower:
                return item
        return None

    def builtin_value(self, owner, ident):
        bip = self._builtin(ident)
        if bip is None:
            logger.warning("Unknown BuiltInParameter: %s", ident)
            return None
        return self._value(owner.get_Parameter(bip))

    def lookup_value(self, owner, name):
        return self._value(self.find_parameter(owner, name))

    def element_type(self, element):
        type_id = element.GetTypeId()
        if type_id is None or type_id == DB.ElementId.InvalidElementId:
            return None
        return self.doc.GetElement(type_id)

    def set_parameter(self, owner, field, value):
        """Write ``value`` (internal units) to the parameter behind ``field``.

        ``field`` is a mappings.Field or a display name.
        """
        if isinstance(field, str):
            param = self.find_parameter(owner, field)
        elif field.by_name:
            param = self.find_parameter(owner, field.ident)
        else:
            bip = self._builtin(field.ident)
            param = owner.get_Parameter(bip) if bip is not None else None
        if param is None:
            raise LookupError("Parameter '{}' not found".format(field))
        if param.IsReadOnly:
            raise ValueError("Parameter '{}' is read-only".format(field))

        storage = param.StorageType
        if storage == DB.StorageType.String:
            param.Set(str(value))
        elif storage == DB.StorageType.Double:
            param.Set(float(value))
        elif storage == DB.StorageType.Integer:
            number = to_int(value)
            if number is None:
                number = to_bool_int(value)
            if number is None:
                raise ValueError("Parameter '{}' expects an integer or yes/no, got {!r}".format(field, value))
            param.Set(number)
        elif storage == DB.StorageType.ElementId:
            param.Set(DB.ElementId(int(value)))
        else:
            raise ValueError("Unsupported parameter type: {}".format(storage))

    def transaction(self, name):
        return transaction_scope(self.doc, name)

    # ---- collection ----

    def get_element(self, element_id):
        return self.doc.GetElement(DB.ElementId(int(element_id)))

    def resolve_category(self, name):
        """BuiltInCategory member for an OST_* name (any case), or None."""
        if not name:
            return None
        enum_name = _CATEGORY_NAMES.get(str(name).lower())
        if enum_name is None:
            return None
        return getattr(DB.BuiltInCategory, enum_name)

    def resolve_class(self, candidate):
        """Revit API class for a type name such as "Wall" or "Autodesk.Revit.DB.Wall, RevitAPI"."""
        type_name = candidate.split(",")[0].strip()
        if type_name.startswith("Autodesk.Revit.DB."):
            type_name = type_name[len("Autodesk.Revit.DB."):]
        cls = getattr(DB, type_name, None)
        return cls if isinstance(cls, type) else None

    def is_family_symbol(self, element_id):
        return isinstance(self.get_element(element_id), DB.FamilySymbol)

    def has_active_view(self):
        return self.doc.ActiveView is not None

    def collect(self, query):
        """Run one stage-A query (a filtering.BaseQuery)."""
        if query.visible_in_view:
            collector = DB.FilteredElementCollector(self.doc, self.doc.ActiveView.Id)
        else:
            collector = DB.FilteredElementCollector(self.doc)
        if query.element_types:
            collector = collector.WhereElementIsElementType()
        else:
            collector = collector.WhereElementIsNotElementType()

        filters = []
        if query.category is not None:
            filters.append(DB.ElementCategoryFilter(query.category))
        if query.element_class is not None:
            filters.append(DB.ElementClassFilter(query.element_class))
        if query.family_symbol_id is not None:
            filters.append(DB.FamilyInstanceFilter(self.doc, DB.ElementId(query.family_symbol_id)))
        if query.bounding_box is not None:
            lo, hi = query.bounding_box
            outline = DB.Outline(DB.XYZ(*lo), DB.XYZ(*hi))
            filters.append(DB.BoundingBoxIntersectsFilter(outline))

        if len(filters) == 1:
            collector = collector.WherePasses(filters[0])
        elif filters:
            net_filters = System.Collections.Generic.List[DB.ElementFilter]()
            for f in filters:
                net_filters.Add(f)
            collector = collector.WherePasses(DB.LogicalAndFilter(net_filters))
        return list(collector.ToElements())

    # ---- element facts ----

    def element_id(self, element):
        return id_value(element.Id)

    def unique_id(self, element):
        return element.UniqueId

    def element_name(self, element):
        return get_element_name(element)

    def element_class(self, element):
        return type(element).__name__

    def type_id(self, element):
        type_id = element.GetTypeId()
        if type_id is None or type_id == DB.ElementId.InvalidElementId:
            return None
        return id_value(type_id)

    def category_label(self, element):
        return normalize_string(element.Category.Name) if element.Category else None

    def category_key(self, element):
        category = element.Category
        if category is None:
            return None
        bic = getattr(category, "BuiltInCategory", None)
        if bic is None:
            bic = System.Enum.ToObject(DB.BuiltInCategory, id_value(category.Id))
        return str(bic)

    def family_name(self, element):
        if isinstance(element, DB.FamilyInstance):
            return normalize_string(element.Symbol.Family.Name)
        if isinstance(element, DB.ElementType):
            return normalize_string(element.FamilyName)
        element_type = self.element_type(element)
        if isinstance(element_type, DB.ElementType):
            return normalize_string(element_type.FamilyName)
        return None

    def is_kind(self, element, kind):
        if kind == kinds.MODEL_INSTANCE:
            return (not isinstance(element, DB.ElementType) and element.Category is not None
                    and element.Category.HasMaterialQuantities)
        if kind == kinds.ELEMENT_TYPE:
            return isinstance(element, DB.ElementType)
        if kind == kinds.DATUM:
            return isinstance(element, (DB.Level, DB.Grid))
        if kind == kinds.SPATIAL:
            return isinstance(element, DB.SpatialElement)
        if kind == kinds.VIEW:
            return isinstance(element, DB.View)
        if kind == kinds.ANNOTATION:
            return element.Category is not None and \
                element.Category.CategoryType == DB.CategoryType.Annotation
        if kind == kinds.GROUP_OR_LINK:
            return isinstance(element, (DB.Group, DB.RevitLinkInstance))
        return False

    def kind_details(self, element, kind):
        if kind == kinds.DATUM:
            if isinstance(element, DB.Level):
                return {"elevation": element.ProjectElevation,
                        "elevation_mm": round(feet_to_mm(element.ProjectElevation), 2)}
            curve = element.Curve
            return {"grid_line": {"start": _point_mm(curve.GetEndPoint(0)),
                                  "end": _point_mm(curve.GetEndPoint(1))}}
        if kind == kinds.SPATIAL:
            return {"number": getattr(element, "Number", None),
                    "area": element.Area,
                    "perimeter": element.Perimeter,
                    "volume": getattr(element, "Volume", None)}
        if kind == kinds.VIEW:
            gen_level = getattr(element, "GenLevel", None)
            return {"view_type": str(element.ViewType),
                    "scale": element.Scale if not element.IsTemplate else None,
                    "is_template": element.IsTemplate,
                    "detail_level": str(element.DetailLevel),
                    "associated_level": gen_level.Name if gen_level else None,
                    "is_active": self.doc.ActiveView is not None
                    and self.doc.ActiveView.Id == element.Id}
        if kind == kinds.ANNOTATION:
            owner = self.doc.GetElement(element.OwnerViewId)
            details = {"owner_view": get_element_name(owner) if owner else None}
            if isinstance(element, DB.TextNote):
                details["text"] = element.Text
            if isinstance(element, DB.Dimension):
                details["dimension_value"] = element.ValueString
            return details
        if kind == kinds.GROUP_OR_LINK:
            if isinstance(element, DB.Group):
                return {"member_count": element.GetMemberIds().Count,
                        "group_type": get_element_name(element.GroupType)}
            link_doc = element.GetLinkDocument()
            return {"link_status": "Loaded" if link_doc else "Not loaded",
                    "link_path": link_doc.PathName if link_doc else None}
        return {}

    def bounding_box(self, element):
        box = element.get_BoundingBox(None)
        if box is None:
            return None
        return {"min": _point_mm(box.Min), "max": _point_mm(box.Max)}

    def level_info(self, element):
        level_id = getattr(element, "LevelId", None)
        if level_id is None or level_id == DB.ElementId.InvalidElementId:
            return None
        level = self.doc.GetElement(level_id)
        if level is None:
            return None
        return {"id": id_value(level.Id), "name": level.Name, "elevation": level.ProjectElevation}

    # ---- levels and view ranges ----

    def levels(self):
        collector = DB.FilteredElementCollector(self.doc).OfClass(DB.Level)
        return [LevelInfo(id_value(lvl.Id), lvl.Name, lvl.ProjectElevation) for lvl in collector]

    def base_point_z(self):
        base_point = (DB.FilteredElementCollector(self.doc)
                      .OfCategory(DB.BuiltInCategory.OST_ProjectBasePoint)
                      .OfClass(DB.BasePoint)
                      .FirstElement())
        return base_point.Position.Z if base_point is not None else 0.0

    def plan_view(self, view_id=None):
        """ViewPlan by id, or the active view. Raises ValueError for other views."""
        view = self.get_element(view_id) if view_id else self.doc.ActiveView
        if not isinstance(view, DB.ViewPlan):
            raise ValueError("View {} is not a plan view".format(
                get_element_name(view) if view is not None else view_id))
        if view.IsTemplate:
            raise ValueError("Cannot use a view template: {}".format(get_element_name(view)))
        return view

    def view_level_id(self, view):
        return id_value(view.GenLevel.Id) if view.GenLevel else None

    def _level_ref(self, level_id):
        if level_id == DB.PlanViewRange.LevelBelow:
            return LEVEL_BELOW
        return id_value(level_id)

    def plane_settings(self, view):
        view_range = view.GetViewRange()
        return {key: PlaneSetting(self._level_ref(view_range.GetLevelId(plane)),
                                  view_range.GetOffset(plane))
                for key, plane in _PLANES}

    def set_plane_offsets(self, view, offsets):
        view_range = view.GetViewRange()
        for key, plane in _PLANES:
            if key in offsets:
                view_range.SetOffset(plane, offsets[key])
        view.SetViewRange(view_range)

    # ---- graphics ----

    def _solid_fill_id(self):
        for pattern in DB.FilteredElementCollector(self.doc).OfClass(DB.FillPatternElement):
            if pattern.GetFillPattern().IsSolidFill:
                return pattern.Id
        return None

    def override_color(self, element_id, rgb, view=None):
        view = view or self.doc.ActiveView
        color = DB.Color(*rgb)
        ogs = DB.OverrideGraphicSettings()
        ogs.SetProjectionLineColor(color)
        ogs.SetCutLineColor(color)
        fill_id = self._solid_fill_id()
        if fill_id is not None:
            ogs.SetSurfaceForegroundPatternId(fill_id)
            ogs.SetSurfaceForegroundPatternColor(color)
        view.SetElementOverrides(DB.ElementId(int(element_id)), ogs)

    def clear_overrides(self, element_id, view=None):
        view = view or self.doc.ActiveView
        view.SetElementOverrides(DB.ElementId(int(element_id)), DB.OverrideGraphicSettings())

    def view_element_ids(self, view=None):
        view = view or self.doc.ActiveView
        collector = DB.FilteredElementCollector(self.doc, view.Id).WhereElementIsNotElementType()
        return [id_value(eid) for eid in collector.ToElementIds()]

    # ---- selection and deletion ----

    def current_view(self):
        return self.doc.ActiveView

    def selected_element_ids(self):
        if self.uidoc is None:
            return []
        return [id_value(eid) for eid in self.uidoc.Selection.GetElementIds()]

    def delete_element(self, element_id):
        """Delete one element. Returns how many elements went with it (hosted, dependent)."""
        element = self.get_element(element_id)
        if element is None:
            raise LookupError("Element {} not found".format(element_id))
        deleted = self.doc.Delete(element.Id)
        return deleted.Count
