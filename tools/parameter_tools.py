# -*- coding: utf-8 -*-
"""Parameter tools: category vocabularies, name resolution, reads and writes."""
from typing import List, Dict, Any

from mcp.server.fastmcp import Context
from .utils import format_response, is_error, error_message, drop_empty


def register_parameter_tools(mcp, revit_get, revit_post):
    """Register parameter tools"""

    @mcp.tool()
    async def list_parameter_categories(ctx: Context = None) -> str:
        """List categories with curated parameter mappings, their common parameter names and aliases."""
        response = await revit_get("/parameter_categories/", ctx)
        return format_response(response)

    @mcp.tool()
    async def resolve_parameter_names(
        category: str, parameter_names: List[str], ctx: Context = None
    ) -> str:
        """
        Map user terms ("u value", "thicknes", "phase") to real parameter names for a category.

        Each result carries the resolved name, a confidence (alias 0.95, exact 1.0,
        fuzzy below 0.85), the method used and up to three other suggestions.
        Terms meaning several parameters return one entry per parameter.
        """
        response = await revit_post(
            "/resolve_parameter_names/",
            {"category": category, "parameter_names": parameter_names},
            ctx,
        )
        return format_response(response)

    @mcp.tool()
    async def get_element_parameters(
        element_ids: List[int],
        parameter_names: List[str] = None,
        detail_level: str = "basic",
        response_format: str = "standard",
        ctx: Context = None,
    ) -> str:
        """
        Read parameters for elements. Without parameter_names the category's common set is read.

        Values report storageType, value (internal units), displayValue and, when
        the parameter has no value, emptyReason. response_format "tabular" groups
        elements by display value.
        """
        payload = drop_empty({
            "element_ids": element_ids,
            "parameter_names": parameter_names,
            "detail_level": detail_level,
            "response_format": response_format,
        })
        response = await revit_post("/element_parameters/", payload, ctx)
        return format_response(response)

    @mcp.tool()
    async def set_element_parameters(updates: List[Dict[str, Any]], ctx: Context = None) -> str:
        """
        Write parameter values: [{"element_id": 123, "parameter": "width", "value": 36}].

        Values are converted per category: lengths in inches or millimetres are
        recognised by range, angles in degrees, yes/no for booleans. Every update
        runs in one transaction; each item reports success or its error.
        """
        if ctx:
            await ctx.info("Setting {} parameter values".format(len(updates)))
        response = await revit_post("/set_parameters/", {"updates": updates}, ctx)
        if is_error(response) and ctx:
            await ctx.error("Set parameters failed: {}".format(error_message(response)))
        return format_response(response)
