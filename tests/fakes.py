# -*- coding: utf-8 -*-
"""In-memory stand-ins for the Revit host, pyRevit transactions and FastMCP.
Lets the command set run WITHOUT Revit.
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from revit_mcp.element_info import MODEL_INSTANCE, ELEMENT_TYPE
from revit_mcp.mappings import normalize_key
from revit_mcp.transactions import transaction_scope
from revit_mcp.values import ParameterValue


class FakeElement(object):
    """An element with built-in parameters (by enum name) and named parameters."""

    def __init__(self, element_id, category=None, name=None, builtins=None, named=None,
                 element_type=None, kind=MODEL_INSTANCE, family_name=None, element_class='FamilyInstance'):
        self.id = element_id
        self.category = category
        self.name = name or 'Element {}'.format(element_id)
        self.builtins = dict(builtins or {})
        self.named = dict(named or {})
        self.element_type = element_type
        self.kind = kind
        self.family_name = family_name
        self.element_class = element_class
        self.read_only = set()


def dbl(value, display=None):
    return ParameterValue.double(None, value, display)


def integer(value, display=None):
    return ParameterValue.integer(None, value, display)


def ref(element_id, label):
    return ParameterValue.element_ref(None, element_id, label)


def text(value):
    return ParameterValue.string(None, value)


def empty(storage='String'):
    return ParameterValue.empty(None, storage, 'Parameter has no value')


def make_type(element_id, category, **kwargs):
    kwargs.setdefault('kind', ELEMENT_TYPE)
    kwargs.setdefault('element_class', 'FamilySymbol')
    return FakeElement(element_id, category, **kwargs)


class FakeView(object):
    """A plan view: its level and the (level_id, offset) setting per plane."""

    def __init__(self, view_id, name, level_id, settings):
        self.id = view_id
        self.name = name
        self.level_id = level_id
        self.settings = dict(settings)
        self.applied = None


class FakeTransaction(object):
    log = []

    def __init__(self, doc, name):
        self.name = name

    def Start(self):
        FakeTransaction.log.append(('start', self.name))

    def Commit(self):
        FakeTransaction.log.append(('commit', self.name))

    def RollBack(self):
        FakeTransaction.log.append(('rollback', self.name))


class FakeHost(object):
    """Implements the host interface used by the pure modules."""

    def __init__(self, elements=(), categories=None, classes=None, active_view=True,
                 levels=(), base_point_z=0.0):
        self.elements = {e.id: e for e in elements}
        for e in elements:
            if e.element_type is not None:
                self.elements.setdefault(e.element_type.id, e.element_type)
        self.categories = set(categories or {e.category for e in self.elements.values() if e.category})
        self.classes = set(classes or ('Wall', 'FamilyInstance', 'FamilySymbol', 'Floor'))
        self.active_view = active_view
        self.queries = []
        self.writes = []
        self.overrides = {}
        self._levels = list(levels)
        self._base_point_z = base_point_z
        self.views = {}
        self.current = None
        self.selected = []
        self.deleted = []

    # parameters
    def builtin_value(self, owner, ident):
        value = owner.builtins.get(ident)
        return _named(value, ident)

    def lookup_value(self, owner, name):
        for key, value in owner.named.items():
            if normalize_key(key) == normalize_key(name):
                return _named(value, key)
        return None

    def element_type(self, element):
        return element.element_type

    def category_key(self, element):
        return element.category

    def set_parameter(self, owner, field, value):
        ident = field if isinstance(field, str) else field.ident
        if ident in owner.read_only:
            raise ValueError("Parameter '{}' is read-only".format(ident))
        self.writes.append((owner.id, ident, value))

    def transaction(self, name):
        return transaction_scope(None, name, FakeTransaction)

    # collection
    def get_element(self, element_id):
        return self.elements.get(element_id)

    def resolve_category(self, name):
        for category in self.categories:
            if category.lower() == str(name).lower():
                return category
        return None

    def resolve_class(self, candidate):
        name = candidate.split(',')[0].strip().replace('Autodesk.Revit.DB.', '')
        return name if name in self.classes else None

    def is_family_symbol(self, element_id):
        element = self.elements.get(element_id)
        return element is not None and element.element_class == 'FamilySymbol'

    def has_active_view(self):
        return self.active_view

    def collect(self, query):
        self.queries.append(query)
        found = []
        for e in self.elements.values():
            if query.element_types != (e.kind == ELEMENT_TYPE):
                continue
            if query.category is not None and e.category != query.category:
                continue
            if query.element_class is not None and e.element_class != query.element_class:
                continue
            if query.family_symbol_id is not None and \
                    (e.element_type is None or e.element_type.id != query.family_symbol_id):
                continue
            found.append(e)
        return found

    # element facts
    def element_id(self, element):
        return element.id

    def unique_id(self, element):
        return 'uid-{}'.format(element.id)

    def element_name(self, element):
        return element.name

    def family_name(self, element):
        return element.family_name

    def category_label(self, element):
        return element.category[4:] if element.category else None

    def element_class(self, element):
        return element.element_class

    def type_id(self, element):
        return element.element_type.id if element.element_type else None

    def is_kind(self, element, kind):
        return element.kind == kind

    def kind_details(self, element, kind):
        return {}

    def bounding_box(self, element):
        return None

    def level_info(self, element):
        return None

    # levels and view ranges
    def levels(self):
        return list(self._levels)

    def base_point_z(self):
        return self._base_point_z

    def plan_view(self, view_id=None):
        view = self.views.get(view_id) if view_id else self.views.get('active')
        if view is None:
            raise ValueError("View {} is not a plan view".format(view_id))
        return view

    def view_level_id(self, view):
        return view.level_id

    def plane_settings(self, view):
        return dict(view.settings)

    def set_plane_offsets(self, view, offsets):
        view.applied = dict(offsets)

    # graphics
    def override_color(self, element_id, rgb, view=None):
        self.overrides[element_id] = tuple(rgb)

    def clear_overrides(self, element_id, view=None):
        if element_id not in self.elements:
            raise LookupError("Element {} not found".format(element_id))
        self.overrides.pop(element_id, None)

    def view_element_ids(self, view=None):
        return [e.id for e in self.elements.values() if e.kind != ELEMENT_TYPE]

    # selection and deletion
    def current_view(self):
        return self.current if self.active_view else None

    def selected_element_ids(self):
        return list(self.selected)

    def delete_element(self, element_id):
        if element_id not in self.elements:
            raise LookupError("Element {} not found".format(element_id))
        del self.elements[element_id]
        self.deleted.append(element_id)
        return 1


def _named(value, name):
    if value is None:
        return None
    return ParameterValue(name, value.storage, value.value, value.display, value.empty_reason,
                          reference=value.reference)


class FakeMCP(object):
    """Collects the coroutines registered with @mcp.tool()."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(func):
            self.tools[func.__name__] = func
            return func
        return decorator


class FakeRevit(object):
    """Records calls and returns canned responses, like revit_get / revit_post."""

    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else {"success": True, "message": "ok"}

    async def get(self, endpoint, ctx=None, **kwargs):
        self.calls.append(('GET', endpoint, None))
        return self.response

    async def post(self, endpoint, data, ctx=None, **kwargs):
        self.calls.append(('POST', endpoint, data))
        return self.response
