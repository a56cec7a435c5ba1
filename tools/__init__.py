# -*- coding: utf-8 -*-
"""MCP tools that forward to the Revit routes."""
from .status_tools import register_status_tools
from .filter_tools import register_filter_tools
from .parameter_tools import register_parameter_tools
from .graphics_tools import register_graphics_tools
from .view_range_tools import register_view_range_tools
from .export_tools import register_export_tools
from .element_tools import register_element_tools


def register_tools(mcp, revit_get, revit_post):
    """Register all tools with the MCP server."""
    register_status_tools(mcp, revit_get, revit_post)
    register_filter_tools(mcp, revit_get, revit_post)
    register_parameter_tools(mcp, revit_get, revit_post)
    register_graphics_tools(mcp, revit_get, revit_post)
    register_view_range_tools(mcp, revit_get, revit_post)
    register_export_tools(mcp, revit_get, revit_post)
    register_element_tools(mcp, revit_get, revit_post)
