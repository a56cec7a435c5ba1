# -*- coding: UTF-8 -*-
"""
Status Module for Revit MCP
Health check plus the active document and the categories the registry knows.
"""
from pyrevit import routes
import logging

from .utils import normalize_string, error_response

logger = logging.getLogger(__name__)


def register_status_routes(api, registry):
    """Register the status route with the API."""

    @api.route("/status/", methods=["GET"])
    def get_status(doc):
        try:
            return routes.make_response(
                data={
                    "success": True,
                    "message": "Revit MCP command set is active",
                    "status": "active",
                    "health": "healthy",
                    "api_name": "revit_mcp",
                    "document_title": normalize_string(doc.Title) if doc else None,
                    "active_view": normalize_string(doc.ActiveView.Name)
                    if doc and doc.ActiveView else None,
                    "supported_categories": registry.supported_categories(),
                }
            )
        except Exception as e:
            return error_response(e, "Status check")

    logger.info("Status routes registered successfully.")
