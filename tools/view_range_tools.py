# -*- coding: utf-8 -*-
"""View range tools"""
from mcp.server.fastmcp import Context
from .utils import format_response, is_error, error_message, drop_empty


def register_view_range_tools(mcp, revit_get, revit_post):
    """Register view range tools"""
    _ = revit_get  # Acknowledge unused parameters

    @mcp.tool()
    async def get_view_range(view_id: int = None, ctx: Context = None) -> str:
        """
        Show a plan view's range (active view when view_id is omitted).

        Each plane (top, cut, bottom, view_depth) lists its level, offset and
        absolute elevation in feet (project elevation plus base point Z), with
        a check that Top >= Cut >= Bottom >= View Depth.
        """
        response = await revit_post("/view_range/", drop_empty({"view_id": view_id}), ctx)
        return format_response(response)

    @mcp.tool()
    async def update_view_range(
        top: float = None,
        cut: float = None,
        bottom: float = None,
        view_depth: float = None,
        view_id: int = None,
        preview: bool = False,
        ctx: Context = None,
    ) -> str:
        """
        Move view range planes to new absolute elevations in feet.

        Only the planes given are moved; the others keep their elevation. The
        result must keep Top >= Cut >= Bottom >= View Depth; unlimited planes
        cannot be moved and moves over 100 ft are rejected. preview=True
        returns the planned offsets without changing the view.
        """
        elevations = drop_empty({"top": top, "cut": cut, "bottom": bottom, "view_depth": view_depth})
        if not elevations:
            return "Error: give at least one of top, cut, bottom, view_depth"
        payload = drop_empty({"view_id": view_id, "elevations": elevations, "preview": preview})
        if ctx:
            await ctx.info("Updating view range: {}".format(elevations))
        response = await revit_post("/update_view_range/", payload, ctx)
        if is_error(response) and ctx:
            await ctx.error("View range update failed: {}".format(error_message(response)))
        return format_response(response)
