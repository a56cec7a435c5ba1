# -*- coding: utf-8 -*-
from typing import List

from mcp.server.fastmcp import Context
from .utils import format_response, is_error, error_message


def register_graphics_tools(mcp, revit_get, revit_post):
    """Register colour override tools"""
    _ = revit_get  # Acknowledge unused parameters

    @mcp.tool()
    async def color_elements(
        element_ids: List[int], color: List[int] = None, ctx: Context = None
    ) -> str:
        """Colour elements in the active view. color is [r, g, b] 0-255 (default red)."""
        payload = {"element_ids": element_ids}
        if color is not None:
            payload["color"] = color
        response = await revit_post("/color_elements/", payload, ctx)
        if is_error(response) and ctx:
            await ctx.error("Color elements failed: {}".format(error_message(response)))
        return format_response(response)

    @mcp.tool()
    async def clear_graphics_overrides(element_ids: List[int] = None, ctx: Context = None) -> str:
        """Reset graphic overrides in the active view for element_ids, or for every element when omitted."""
        payload = {"element_ids": element_ids} if element_ids else {}
        response = await revit_post("/clear_overrides/", payload, ctx)
        return format_response(response)
