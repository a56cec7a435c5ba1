# -*- coding: utf-8 -*-
from pyrevit import routes, DB
import json
import logging

logger = logging.getLogger(__name__)


def normalize_string(text):
    """Return a stripped str for names read from the Revit API.

    .NET strings arrive as str under the CPython engine; anything else
    (None, .NET objects) is converted, with "Unnamed" for missing values.
    """
    if text is None:
        return "Unnamed"
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8").strip()
        except UnicodeDecodeError:
            return text.decode("latin-1").strip()
    return str(text).strip()


def id_value(element_id):
    """Integer value of an ElementId across Revit versions (Value vs IntegerValue)."""
    if element_id is None:
        return None
    value = getattr(element_id, "Value", None)
    if value is None:
        value = element_id.IntegerValue
    return int(value)


def get_element_name(element):
    """
    Get the name of a Revit element.
    Tries the Name property first, then the name parameters of views and types.
    """
    try:
        n = element.Name
        if n is not None:
            return normalize_string(n)
    except AttributeError:
        pass
    for bip in (DB.BuiltInParameter.VIEW_NAME, DB.BuiltInParameter.SYMBOL_NAME_PARAM):
        p = element.get_Parameter(bip)
        if p and p.HasValue:
            v = p.AsString()
            if v:
                return normalize_string(v)
    return "Unknown"


def parse_request_data(request):
    """JSON body of a pyRevit request as a dict (empty dict for no body)."""
    data = request.data if request is not None else None
    if not data:
        return {}
    if isinstance(data, (str, bytes)):
        return json.loads(data)
    return data


def make_json_response(result):
    """routes.make_response for a (body, status) pair."""
    body, status = result
    return routes.make_response(data=body, status=status)


def error_response(error, action):
    """Log a failed route handler and answer 500 with the exception type."""
    logger.error("%s failed: %s", action, error)
    return routes.make_response(
        data={
            "success": False,
            "message": "{} failed: {}".format(action, error),
            "error_type": type(error).__name__,
        },
        status=500,
    )
