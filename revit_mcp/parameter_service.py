# -*- coding: utf-8 -*-
"""Parameter requests: categories, name resolution, reads and writes.

Each ``*_request`` function takes the parsed JSON body and returns
(body, status) so the route modules stay thin.
"""
import logging

from .element_info import ElementInfoBuilder, BASIC
from .name_resolution import resolve_parameter_names
from .results import Invalid, success_response, failure_response
from .tabular import to_tabular
from .transactions import run_batch
from ._constants import DETAIL_LEVELS, RESPONSE_FORMATS
from ._validation import validate_element_ids, validate_parameter_names, validate_parameter_updates

logger = logging.getLogger(__name__)


def list_categories(registry):
    categories = [registry.describe(c) for c in registry.supported_categories()]
    return success_response(
        "{} categories with curated parameter mappings".format(len(categories)),
        categories=categories,
        shared_parameters=registry.shared.common_parameter_names(),
    ), 200


def resolve_names_request(registry, data):
    category = data.get("category")
    if not category:
        return failure_response("category is required"), 400
    terms = data.get("parameter_names")
    if terms is None:
        terms = data.get("terms")
    error = validate_parameter_names(terms)
    if error:
        return failure_response(error), 400

    resolutions = resolve_parameter_names(registry, category, terms)
    resolved = [r for r in resolutions if r.resolved_name]
    unresolved = [r.user_term for r in resolutions if not r.resolved_name]
    message = "Resolved {} of {} parameter names".format(len(resolved), len(terms))
    if unresolved:
        message += " (no match for: {})".format(", ".join(unresolved))
    return success_response(
        message,
        category=registry.category_key(category) or category,
        has_mapping=registry.has_mapping(category),
        resolutions=[r.to_dict() for r in resolutions],
        resolved_names=[r.resolved_name for r in resolved],
        unresolved=unresolved,
    ), 200


def element_parameters_request(registry, host, data):
    """Named parameters (or the category's common set) for element ids."""
    element_ids = data.get("element_ids")
    error = validate_element_ids(element_ids)
    if error:
        return failure_response(error), 400
    names = data.get("parameter_names") or []
    error = validate_parameter_names(names)
    if error:
        return failure_response(error), 400
    detail_level = str(data.get("detail_level") or BASIC).lower()
    if detail_level not in DETAIL_LEVELS:
        return failure_response("detail_level must be one of: {}".format(", ".join(DETAIL_LEVELS))), 400
    response_format = str(data.get("response_format") or "standard").lower()
    if response_format not in RESPONSE_FORMATS:
        return failure_response(
            "response_format must be one of: {}".format(", ".join(RESPONSE_FORMATS))), 400

    builder = ElementInfoBuilder(registry, host)
    infos = []
    not_found = []
    for element_id in element_ids:
        element = host.get_element(element_id)
        if element is None:
            not_found.append(element_id)
            continue
        element_names = names or registry.common_parameter_names(host.category_key(element))
        infos.append(builder.build(element, detail_level, element_names))

    message = "Read parameters for {} elements".format(len(infos))
    if not_found:
        message += "; {} ids not found".format(len(not_found))
    body = success_response(message, count=len(infos), not_found=not_found,
                            response_format=response_format)
    body["data"] = to_tabular(infos) if response_format == "tabular" else infos
    return body, 200


def _set_one(registry, host, item):
    element = host.get_element(item["element_id"])
    if element is None:
        raise LookupError("Element {} not found".format(item["element_id"]))
    category = host.category_key(element)
    found = registry.get_parameter(host, element, item["parameter"], category)
    if isinstance(found, Invalid):
        raise ValueError(found.message)
    if not found.ok:
        raise LookupError("Parameter '{}' not found (tried: {})".format(
            item["parameter"], ", ".join(found.tried)))

    value = registry.convert_value(category, found.canonical_name, item["value"])
    target = found.field if found.field is not None else found.canonical_name
    host.set_parameter(found.owner, target, value)
    return {
        "parameter": found.canonical_name,
        "level": found.value.level,
        "stage": found.stage,
        "value": value,
        "previous": found.value.display_text(),
    }


def set_parameters_request(registry, host, data):
    """Write every update inside one transaction, one result per item."""
    updates = data.get("updates")
    error = validate_parameter_updates(updates)
    if error:
        return failure_response(error), 400

    with host.transaction("Set Element Parameters"):
        results, summary = run_batch(updates, lambda item: _set_one(registry, host, item))

    logger.info("Set parameters: %d ok, %d failed", summary["success"], summary["errors"])
    message = "Updated {} of {} parameters".format(summary["success"], summary["total"])
    return success_response(message, results=results, summary=summary), 200
