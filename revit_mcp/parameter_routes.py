# -*- coding: UTF-8 -*-
"""
Parameter Module for Revit MCP
Category mappings, parameter name resolution, parameter reads and writes.
"""
import logging

from . import parameter_service as service
from .revit_host import RevitHost
from .utils import parse_request_data, make_json_response, error_response

logger = logging.getLogger(__name__)


def register_parameter_routes(api, registry):
    """Register parameter routes with the API."""

    @api.route("/parameter_categories/", methods=["GET"])
    def parameter_categories():
        try:
            return make_json_response(service.list_categories(registry))
        except Exception as e:
            return error_response(e, "List parameter categories")

    @api.route("/resolve_parameter_names/", methods=["POST"])
    def resolve_parameter_names(request):
        """
        Expected payload:
        {"category": "OST_Walls", "parameter_names": ["u value", "thicknes", "phase"]}
        """
        try:
            data = parse_request_data(request)
            return make_json_response(service.resolve_names_request(registry, data))
        except Exception as e:
            return error_response(e, "Resolve parameter names")

    @api.route("/element_parameters/", methods=["POST"])
    def element_parameters(doc, uidoc, request):
        """
        Expected payload:
        {
            "element_ids": [123, 456],
            "parameter_names": ["width", "mark"],   # empty: the category's common set
            "detail_level": "basic",
            "response_format": "standard"
        }
        """
        try:
            data = parse_request_data(request)
            return make_json_response(
                service.element_parameters_request(registry, RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Read element parameters")

    @api.route("/set_parameters/", methods=["POST"])
    def set_parameters(doc, uidoc, request):
        """
        Expected payload:
        {"updates": [{"element_id": 123, "parameter": "width", "value": 36}]}

        Values are converted to internal units by the category mapping.
        """
        try:
            data = parse_request_data(request)
            return make_json_response(
                service.set_parameters_request(registry, RevitHost(doc, uidoc), data))
        except Exception as e:
            return error_response(e, "Set element parameters")

    logger.info("Parameter routes registered successfully.")
