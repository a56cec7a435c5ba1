# -*- coding: utf-8 -*-
"""Selection, active view and deletion requests."""
import logging

from .element_info import ElementInfoBuilder, BASIC
from .results import success_response, failure_response
from .tabular import to_tabular
from .transactions import run_batch
from .units import to_int
from ._constants import DETAIL_LEVELS, RESPONSE_FORMATS
from ._validation import validate_element_ids, validate_parameter_names

logger = logging.getLogger(__name__)


def selected_elements_request(registry, host, data):
    """Elements selected in the UI, optionally capped by ``limit``."""
    limit = data.get("limit")
    if limit is not None:
        limit = to_int(limit)
        if limit is None or limit <= 0:
            return failure_response("limit must be a positive integer"), 400
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

    selected = host.selected_element_ids()
    total = len(selected)
    if limit:
        selected = selected[:limit]
    elements = [e for e in (host.get_element(i) for i in selected) if e is not None]
    infos = ElementInfoBuilder(registry, host).build_all(elements, detail_level, names)

    if not total:
        message = "No elements selected"
    elif len(infos) < total:
        message = "{} of {} selected elements".format(len(infos), total)
    else:
        message = "{} selected elements".format(total)
    body = success_response(message, total=total, count=len(infos), response_format=response_format)
    body["data"] = to_tabular(infos) if response_format == "tabular" else infos
    return body, 200


def current_view_request(registry, host):
    view = host.current_view()
    if view is None:
        return failure_response("No active view found."), 400
    info = ElementInfoBuilder(registry, host).build(view, BASIC)
    return success_response("Active view '{}'".format(info["name"]), data=info), 200


def delete_elements_request(host, data):
    """Delete every id inside one transaction, one result per id."""
    element_ids = data.get("element_ids")
    error = validate_element_ids(element_ids)
    if error:
        return failure_response(error), 400

    def delete(element_id):
        return {"deleted_count": host.delete_element(element_id)}

    with host.transaction("Delete Elements"):
        results, summary = run_batch(element_ids, delete)

    deleted = sum(r.get("deleted_count", 0) for r in results)
    logger.info("Delete elements: %d of %d ids, %d elements removed",
                summary["success"], summary["total"], deleted)
    return success_response(
        "Deleted {} of {} elements ({} including dependents)".format(
            summary["success"], summary["total"], deleted),
        deleted_count=deleted, results=results, summary=summary,
    ), 200
