# -*- coding: utf-8 -*-
"""Per-element graphic overrides in the active view."""
import logging

from .results import success_response, failure_response
from .transactions import run_batch
from ._validation import validate_element_ids, validate_color

logger = logging.getLogger(__name__)

DEFAULT_COLOR = [255, 0, 0]


def color_elements_request(host, data):
    element_ids = data.get("element_ids")
    error = validate_element_ids(element_ids)
    if error:
        return failure_response(error), 400
    color = data.get("color") or DEFAULT_COLOR
    error = validate_color(color)
    if error:
        return failure_response(error), 400
    if not host.has_active_view():
        return failure_response("No active view found."), 400

    def apply(element_id):
        if host.get_element(element_id) is None:
            raise LookupError("Element {} not found".format(element_id))
        host.override_color(element_id, color)
        return {"color": list(color)}

    with host.transaction("Color Elements"):
        results, summary = run_batch(element_ids, apply)

    return success_response(
        "Colored {} of {} elements".format(summary["success"], summary["total"]),
        results=results, summary=summary,
    ), 200


def clear_overrides_request(host, data):
    """Reset overrides for ``element_ids``, or for every element in the view."""
    if not host.has_active_view():
        return failure_response("No active view found."), 400
    element_ids = data.get("element_ids")
    if element_ids:
        error = validate_element_ids(element_ids)
        if error:
            return failure_response(error), 400
    else:
        element_ids = host.view_element_ids()
    if not element_ids:
        return success_response("No elements found matching the criteria.",
                                processed_count=0, error_count=0), 200

    with host.transaction("Clear Graphics Overrides"):
        results, summary = run_batch(element_ids, host.clear_overrides)

    errors = [r for r in results if r["status"] != "success"]
    return success_response(
        "Successfully processed {} elements.".format(summary["success"]),
        processed_count=summary["success"],
        error_count=summary["errors"],
        errors=errors,
    ), 200
