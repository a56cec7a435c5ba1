# -*- coding: UTF-8 -*-
"""
Element Module for Revit MCP
Current selection, active view info and element deletion.
"""
import logging

from .element_service import selected_elements_request, current_view_request, delete_elements_request
from .revit_host import RevitHost
from .utils import parse_request_data, make_json_response, error_response

logger = logging.getLogger(__name__)


def register_element_routes(api, registry):
    """Register selection, view and deletion routes with the API."""

    @api.route("/selected_elements/", methods=["POST"])
    def selected_elements(doc, uidoc, request):
        """
        Expected payload:
        {"limit": 20, "detail_level": "basic", "parameter_names": ["mark"]}
        """
        try:
            data = parse_request_data(request)
            return make_json_response(
                selected_elements_request(registry, RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Get selected elements")

    @api.route("/current_view/", methods=["GET"])
    def current_view(doc, uidoc):
        try:
            return make_json_response(current_view_request(registry, RevitHost(doc, uidoc)))
        except Exception as e:
            return error_response(e, "Get current view")

    @api.route("/delete_elements/", methods=["POST"])
    def delete_elements(doc, uidoc, request):
        """
        Expected payload:
        {"element_ids": [123, 456]}

        Hosted and dependent elements are removed with their host.
        """
        try:
            data = parse_request_data(request)
            return make_json_response(delete_elements_request(RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Delete elements")

    logger.info("Element routes registered successfully.")
