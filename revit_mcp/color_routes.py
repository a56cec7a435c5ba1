# -*- coding: UTF-8 -*-
"""
Color Module for Revit MCP
Colour overrides for elements in the active view, and clearing them.
"""
import logging

from .graphics import color_elements_request, clear_overrides_request
from .revit_host import RevitHost
from .utils import parse_request_data, make_json_response, error_response

logger = logging.getLogger(__name__)


def register_color_routes(api, registry):
    """Register colour override routes with the API."""
    _ = registry  # Acknowledge unused parameter

    @api.route("/color_elements/", methods=["POST"])
    def color_elements(doc, uidoc, request):
        """
        Expected payload:
        {"element_ids": [123, 456], "color": [255, 0, 0]}
        """
        try:
            data = parse_request_data(request)
            return make_json_response(color_elements_request(RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Color elements")

    @api.route("/clear_overrides/", methods=["POST"])
    def clear_overrides(doc, uidoc, request):
        """
        Expected payload:
        {"element_ids": [123, 456]}      # omit to reset every element in the view
        """
        try:
            data = parse_request_data(request)
            return make_json_response(clear_overrides_request(RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Clear graphics overrides")

    logger.info("Color routes registered successfully.")
