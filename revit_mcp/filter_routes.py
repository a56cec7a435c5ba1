# -*- coding: UTF-8 -*-
"""
Element Filter Module for Revit MCP
Category / class / family / spatial filters followed by parameter predicates.
"""
import logging

from .filtering import run_filter_request
from .revit_host import RevitHost
from .utils import parse_request_data, make_json_response, error_response

logger = logging.getLogger(__name__)


def register_filter_routes(api, registry):
    """Register element filter routes with the API."""

    @api.route("/filter_elements/", methods=["POST"])
    def filter_elements(doc, uidoc, request):
        """
        Filter elements and return their info.

        Expected payload:
        {
            "filter_category": "OST_Doors",          # or a friendly name ("doors")
            "filter_element_type": "FamilyInstance",
            "filter_family_symbol_id": -1,
            "include_types": false,
            "include_instances": true,
            "filter_visible_in_current_view": false,
            "bounding_box_min": {"x": 0, "y": 0, "z": 0},   # mm
            "bounding_box_max": {"x": 1000, "y": 1000, "z": 1000},
            "parameter_filters": [{"name": "width", "operator": ">", "value": 3.0}],
            "natural_language_query": "doors wider than 3 feet",
            "detail_level": "basic",                 # minimal | basic | full
            "return_parameters": ["mark"],
            "response_format": "standard",           # standard | tabular
            "max_elements": 50
        }
        """
        try:
            data = parse_request_data(request)
            body, status = run_filter_request(registry, RevitHost(doc, uidoc), data)
            if status == 200:
                logger.info("Filter request: %s", body["message"])
            else:
                logger.warning("Filter request rejected: %s", body["message"])
            return make_json_response((body, status))
        except Exception as e:
            return error_response(e, "Element filter")

    logger.info("Filter routes registered successfully.")
