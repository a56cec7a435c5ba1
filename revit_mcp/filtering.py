# -*- coding: utf-8 -*-
"""
Two-stage element filter.

Stage A builds one host query per element kind (types and/or instances)
from the category, class, family type, bounding box and view filters.
Stage B keeps the elements that pass every parameter predicate.
"""
import logging
from collections import namedtuple

from . import predicates as preds
from .element_info import ElementInfoBuilder
from .nl_query import parse_query
from .results import Invalid, success_response, failure_response
from .tabular import to_tabular
from .units import mm_to_feet, to_number, to_int, to_bool_int
from ._constants import (DEFAULT_MAX_ELEMENTS, DETAIL_LEVELS, RESPONSE_FORMATS,
                         normalize_category)
from ._validation import validate_point

logger = logging.getLogger(__name__)

BaseQuery = namedtuple(
    'BaseQuery',
    'category element_class family_symbol_id bounding_box visible_in_view element_types')

FilterOutcome = namedtuple('FilterOutcome', 'elements total applied_filters warnings predicates')

INVALID_CATEGORY = ("Invalid category: {}. Please use valid Revit category like "
                    "OST_StructuralFraming, OST_Walls, etc.")


def class_name_candidates(name):
    return [name, 'Autodesk.Revit.DB.{}, RevitAPI'.format(name), '{}, RevitAPI'.format(name)]


class FilterSetting(object):
    """Request model for the element filter."""

    def __init__(self, filter_category=None, filter_element_type=None, filter_family_symbol_id=-1,
                 include_types=False, include_instances=True, filter_visible_in_current_view=False,
                 bounding_box_min=None, bounding_box_max=None, max_elements=DEFAULT_MAX_ELEMENTS,
                 parameter_filters=None, natural_language_query=None, detail_level='basic',
                 return_parameters=None, response_format='standard'):
        self.filter_category = filter_category
        self.filter_element_type = filter_element_type
        self.filter_family_symbol_id = filter_family_symbol_id
        self.include_types = include_types
        self.include_instances = include_instances
        self.filter_visible_in_current_view = filter_visible_in_current_view
        self.bounding_box_min = bounding_box_min
        self.bounding_box_max = bounding_box_max
        self.max_elements = max_elements
        self.parameter_filters = list(parameter_filters or [])
        self.natural_language_query = natural_language_query
        self.detail_level = detail_level
        self.return_parameters = list(return_parameters or [])
        self.response_format = response_format

    @classmethod
    def from_request(cls, data):
        """Build from a JSON payload. Returns FilterSetting or Invalid."""
        if not isinstance(data, dict):
            return Invalid('Request body must be a JSON object')

        parsed = []
        for i, raw in enumerate(data.get('parameter_filters') or []):
            predicate = preds.FilterPredicate.from_dict(raw)
            if isinstance(predicate, Invalid):
                return Invalid('parameter_filters[{}]: {}'.format(i, predicate.message))
            parsed.append(predicate)

        max_elements = data.get('max_elements', DEFAULT_MAX_ELEMENTS)
        max_elements = to_int(max_elements) if max_elements is not None else DEFAULT_MAX_ELEMENTS
        if max_elements is None:
            return Invalid('max_elements must be an integer')

        symbol_id = to_int(data.get('filter_family_symbol_id', -1))
        if symbol_id is None:
            return Invalid('filter_family_symbol_id must be an integer')

        flags = {}
        for key, default in (('include_types', False), ('include_instances', True),
                             ('filter_visible_in_current_view', False)):
            raw = data.get(key)
            flag = default if raw is None else to_bool_int(raw)
            if flag is None:
                return Invalid("{} must be true or false".format(key))
            flags[key] = bool(flag)

        return cls(
            filter_category=data.get('filter_category') or None,
            filter_element_type=data.get('filter_element_type') or None,
            filter_family_symbol_id=symbol_id,
            include_types=flags['include_types'],
            include_instances=flags['include_instances'],
            filter_visible_in_current_view=flags['filter_visible_in_current_view'],
            bounding_box_min=data.get('bounding_box_min'),
            bounding_box_max=data.get('bounding_box_max'),
            max_elements=max_elements,
            parameter_filters=parsed,
            natural_language_query=data.get('natural_language_query') or None,
            detail_level=str(data.get('detail_level') or 'basic').lower(),
            return_parameters=data.get('return_parameters') or [],
            response_format=str(data.get('response_format') or 'standard').lower(),
        )

    def validate(self):
        """Error string, or None when the setting can be run."""
        if not self.include_types and not self.include_instances:
            return ("Filter settings invalid: Must include at least one of element types "
                    "or element instances")
        if not self.filter_category and not self.filter_element_type \
                and self.filter_family_symbol_id <= 0:
            return ("Filter settings invalid: Must specify at least one filter condition "
                    "(category, element type, or family type)")
        if self.include_types and not self.include_instances:
            invalid = []
            if self.filter_family_symbol_id > 0:
                invalid.append('family instance filtering')
            if self.filter_visible_in_current_view:
                invalid.append('view visibility filtering')
            if invalid:
                return ("When filtering only type elements, the following filters are not "
                        "applicable: {}".format(', '.join(invalid)))
        if self.bounding_box_min is not None and self.bounding_box_max is not None:
            for point, name in ((self.bounding_box_min, 'bounding_box_min'),
                                (self.bounding_box_max, 'bounding_box_max')):
                error = validate_point(point, name)
                if error:
                    return error
            lo, hi = self.bounding_box_min, self.bounding_box_max
            if any(to_number(lo[a]) > to_number(hi[a]) for a in ('x', 'y', 'z')):
                return ("Spatial range filter settings invalid: Minimum point coordinates must "
                        "be less than or equal to maximum point coordinates")
        elif self.bounding_box_min is not None or self.bounding_box_max is not None:
            return ("Spatial range filter settings invalid: Both minimum and maximum point "
                    "coordinates must be set")
        if self.max_elements <= 0:
            return 'max_elements must be a positive integer'
        if self.detail_level not in DETAIL_LEVELS:
            return "detail_level must be one of: {}".format(', '.join(DETAIL_LEVELS))
        if self.response_format not in RESPONSE_FORMATS:
            return "response_format must be one of: {}".format(', '.join(RESPONSE_FORMATS))
        if not isinstance(self.return_parameters, list):
            return 'return_parameters must be a list'
        return None

    def bounding_box_feet(self):
        if self.bounding_box_min is None or self.bounding_box_max is None:
            return None
        return tuple(tuple(mm_to_feet(to_number(p[a])) for a in ('x', 'y', 'z'))
                     for p in (self.bounding_box_min, self.bounding_box_max))


class ElementFilterPipeline(object):

    def __init__(self, registry, host):
        self.registry = registry
        self.host = host

    def apply_natural_language(self, setting):
        """Add a predicate (and maybe a category) parsed from the NL query."""
        if setting.parameter_filters or not setting.natural_language_query:
            return []
        parsed = parse_query(setting.natural_language_query)
        if parsed.predicate is not None:
            setting.parameter_filters.append(parsed.predicate)
            logger.info("Parsed parameter filter: %s", parsed.predicate.describe())
        if not setting.filter_category and parsed.category:
            setting.filter_category = parsed.category
        return list(parsed.warnings)

    def base_queries(self, setting, warnings, applied):
        """Stage A host queries. Returns a list of BaseQuery or Invalid."""
        category = None
        if setting.filter_category:
            name = normalize_category(setting.filter_category)
            category = self.host.resolve_category(name)
            if category is None:
                return Invalid(INVALID_CATEGORY.format(setting.filter_category))
            applied.append('Category: {}'.format(name))

        element_class = None
        if setting.filter_element_type:
            for candidate in class_name_candidates(setting.filter_element_type):
                element_class = self.host.resolve_class(candidate)
                if element_class is not None:
                    break
            if element_class is None:
                return Invalid("Could not find type '{}'".format(setting.filter_element_type))
            applied.append('Element type: {}'.format(setting.filter_element_type))

        symbol_id = None
        if setting.include_instances and setting.filter_family_symbol_id > 0:
            if self.host.is_family_symbol(setting.filter_family_symbol_id):
                symbol_id = setting.filter_family_symbol_id
                applied.append('Family type: {}'.format(symbol_id))
            else:
                logger.warning("Element %s does not exist or is not a FamilySymbol; "
                               "family filter skipped", setting.filter_family_symbol_id)
                warnings.append("Family type filter skipped: element {} is not a family "
                                "type".format(setting.filter_family_symbol_id))

        box = setting.bounding_box_feet()
        if box is not None:
            applied.append('Spatial range filter')

        visible = setting.filter_visible_in_current_view and self.host.has_active_view()
        if visible:
            applied.append('Elements visible in current view')

        queries = []
        if setting.include_types:
            queries.append(BaseQuery(category, element_class, None, box, False, True))
        if setting.include_instances:
            queries.append(BaseQuery(category, element_class, symbol_id, box, visible, False))
        return queries

    def filter(self, setting):
        """Run both stages. Returns FilterOutcome or Invalid."""
        warnings = self.apply_natural_language(setting)

        error = setting.validate()
        if error:
            return Invalid(error)

        category = normalize_category(setting.filter_category) if setting.filter_category else None
        invalid = preds.check_names(self.registry, setting.parameter_filters, category)
        if invalid is not None:
            return invalid

        applied = []
        queries = self.base_queries(setting, warnings, applied)
        if isinstance(queries, Invalid):
            return queries

        elements = []
        for query in queries:
            elements.extend(self.host.collect(query))

        if setting.parameter_filters:
            before = len(elements)
            elements = [e for e in elements
                        if all(preds.matches(self.registry, self.host, e, p, category)
                               for p in setting.parameter_filters)]
            for p in setting.parameter_filters:
                applied.append('Parameter: {}'.format(p.describe()))
            logger.info("Parameter filtering: %d -> %d elements", before, len(elements))

        total = len(elements)
        return FilterOutcome(elements[:setting.max_elements], total, applied, warnings,
                             list(setting.parameter_filters))


def run_filter_request(registry, host, data):
    """Parse, filter and serialize. Returns (body, status)."""
    setting = FilterSetting.from_request(data)
    if isinstance(setting, Invalid):
        return failure_response(setting.message), 400

    outcome = ElementFilterPipeline(registry, host).filter(setting)
    if isinstance(outcome, Invalid):
        return failure_response(outcome.message), 400

    names = list(setting.return_parameters)
    for p in outcome.predicates:
        if p.name not in names:
            names.append(p.name)
    builder = ElementInfoBuilder(registry, host)
    infos = builder.build_all(outcome.elements, setting.detail_level, names)

    message = 'Found {} elements'.format(outcome.total)
    if outcome.total > len(outcome.elements):
        message += ('. Results limited to {} of {} elements (max_elements); narrow the '
                    'filter or raise max_elements to see more'.format(len(outcome.elements),
                                                                      outcome.total))

    body = success_response(
        message,
        total=outcome.total,
        count=len(infos),
        applied_filters=outcome.applied_filters,
        warnings=outcome.warnings,
        response_format=setting.response_format,
    )
    if setting.response_format == 'tabular':
        body['data'] = to_tabular(infos)
    else:
        body['data'] = infos
    return body, 200
