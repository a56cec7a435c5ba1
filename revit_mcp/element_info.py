# -*- coding: utf-8 -*-
"""Serialize elements at a requested detail level.

A handler is picked from an ordered list of (kind, handler) pairs; the first
kind the host reports for the element wins and the basic handler is the
fallback. Every level carries the requested parameters, resolved through the
registry; ``full`` also carries the category's common parameters.
"""
import logging

from .mappings import normalize_key

logger = logging.getLogger(__name__)

MINIMAL = 'minimal'
BASIC = 'basic'
FULL = 'full'

# Element kinds the host adapter can answer ``is_kind`` for
MODEL_INSTANCE = 'model_instance'
ELEMENT_TYPE = 'element_type'
DATUM = 'datum'
SPATIAL = 'spatial'
VIEW = 'view'
ANNOTATION = 'annotation'
GROUP_OR_LINK = 'group_or_link'


def read_parameters(registry, host, element, names, category=None):
    """Resolve ``names`` on ``element``. One-to-many names add one entry each.

    Returns (values, missing) where values is a list of ParameterValue dicts
    keyed by canonical name and missing lists names that did not resolve.
    """
    values = []
    missing = []
    seen = set()
    for name in names or []:
        for result in registry.get_parameters(host, element, name, category):
            if not result.ok:
                key = getattr(result, 'key', name)
                if key not in missing:
                    missing.append(key)
                continue
            if result.canonical_name in seen:
                continue
            seen.add(result.canonical_name)
            data = result.value.to_dict()
            data['name'] = result.canonical_name
            values.append(data)
    return values, missing


def _identity(host, element):
    return {
        'id': host.element_id(element),
        'unique_id': host.unique_id(element),
        'name': host.element_name(element),
        'family_name': host.family_name(element),
        'category': host.category_label(element),
        'built_in_category': host.category_key(element),
        'element_class': host.element_class(element),
    }


def _with_placement(info, host, element):
    info['level'] = host.level_info(element)
    info['bounding_box'] = host.bounding_box(element)
    return info


def model_instance_info(host, element, detail):
    info = _identity(host, element)
    info['type_id'] = host.type_id(element)
    if detail == FULL:
        _with_placement(info, host, element)
    return info


def element_type_info(host, element, detail):
    return _identity(host, element)


def datum_info(host, element, detail):
    info = _identity(host, element)
    info.update(host.kind_details(element, DATUM))
    if detail == FULL:
        info['bounding_box'] = host.bounding_box(element)
    return info


def spatial_info(host, element, detail):
    info = _identity(host, element)
    info.update(host.kind_details(element, SPATIAL))
    if detail == FULL:
        _with_placement(info, host, element)
    return info


def view_info(host, element, detail):
    info = _identity(host, element)
    info.update(host.kind_details(element, VIEW))
    return info


def annotation_info(host, element, detail):
    info = _identity(host, element)
    info.update(host.kind_details(element, ANNOTATION))
    if detail == FULL:
        info['bounding_box'] = host.bounding_box(element)
    return info


def group_or_link_info(host, element, detail):
    info = _identity(host, element)
    info.update(host.kind_details(element, GROUP_OR_LINK))
    if detail == FULL:
        info['bounding_box'] = host.bounding_box(element)
    return info


def basic_info(host, element, detail):
    info = _identity(host, element)
    if detail == FULL:
        info['bounding_box'] = host.bounding_box(element)
    return info


HANDLERS = (
    (MODEL_INSTANCE, model_instance_info),
    (ELEMENT_TYPE,   element_type_info),
    (DATUM,          datum_info),
    (SPATIAL,        spatial_info),
    (VIEW,           view_info),
    (ANNOTATION,     annotation_info),
    (GROUP_OR_LINK,  group_or_link_info),
)


def handler_for(host, element, handlers=HANDLERS):
    for kind, handler in handlers:
        if host.is_kind(element, kind):
            return handler
    return basic_info


class ElementInfoBuilder(object):
    """Build element dicts for filter and parameter responses."""

    def __init__(self, registry, host, handlers=HANDLERS):
        self.registry = registry
        self.host = host
        self.handlers = handlers

    def build(self, element, detail_level=BASIC, parameter_names=None):
        detail = (detail_level or BASIC).lower()
        category = self.host.category_key(element)
        names = list(parameter_names or [])
        if detail == FULL:
            seen = {normalize_key(n) for n in names}
            names.extend(n for n in self.registry.common_parameter_names(category)
                         if n not in seen)

        if detail == MINIMAL:
            info = {'id': self.host.element_id(element), 'name': self.host.element_name(element)}
        else:
            handler = handler_for(self.host, element, self.handlers)
            info = handler(self.host, element, detail)

        values, missing = read_parameters(self.registry, self.host, element, names, category)
        info['parameters'] = values
        if missing:
            info['missing_parameters'] = missing
        return info

    def build_all(self, elements, detail_level=BASIC, parameter_names=None):
        return [self.build(e, detail_level, parameter_names) for e in elements]
