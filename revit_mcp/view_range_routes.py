# -*- coding: UTF-8 -*-
"""
View Range Module for Revit MCP
Reads plan view ranges as absolute elevations and moves planes.
"""
import logging

from .revit_host import RevitHost
from .utils import parse_request_data, make_json_response, error_response
from .view_range import view_range_request, update_view_range_request

logger = logging.getLogger(__name__)


def register_view_range_routes(api, registry):
    """Register view range routes with the API."""
    _ = registry  # Acknowledge unused parameter

    @api.route("/view_range/", methods=["POST"])
    def view_range(doc, uidoc, request):
        """
        Expected payload:
        {"view_id": 12345}      # omit for the active view
        """
        try:
            data = parse_request_data(request)
            return make_json_response(view_range_request(RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Read view range")

    @api.route("/update_view_range/", methods=["POST"])
    def update_view_range(doc, uidoc, request):
        """
        Expected payload:
        {
            "view_id": 12345,
            "elevations": {"top": 12.0, "cut": 4.0},   # absolute elevations, feet
            "preview": false
        }
        """
        try:
            data = parse_request_data(request)
            return make_json_response(update_view_range_request(RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Update view range")

    logger.info("View range routes registered successfully.")
