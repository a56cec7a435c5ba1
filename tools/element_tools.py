# -*- coding: utf-8 -*-
"""Selection, active view and deletion tools"""
from typing import List

from mcp.server.fastmcp import Context
from .utils import format_response, is_error, error_message, drop_empty


def register_element_tools(mcp, revit_get, revit_post):
    """Register selection, view and deletion tools"""

    @mcp.tool()
    async def get_selected_elements(
        limit: int = None,
        detail_level: str = "basic",
        parameter_names: List[str] = None,
        ctx: Context = None,
    ) -> str:
        """
        Elements currently selected in Revit.

        limit caps how many are returned (total still reports the full
        selection). parameter_names are resolved per category, like
        get_element_parameters.
        """
        payload = drop_empty({
            "limit": limit,
            "detail_level": detail_level,
            "parameter_names": parameter_names,
        })
        response = await revit_post("/selected_elements/", payload, ctx)
        return format_response(response)

    @mcp.tool()
    async def get_current_view_info(ctx: Context = None) -> str:
        """Name, id and type details of the active view."""
        response = await revit_get("/current_view/", ctx)
        return format_response(response)

    @mcp.tool()
    async def delete_elements(element_ids: List[int], ctx: Context = None) -> str:
        """
        Delete elements by id in one transaction.

        Each id gets its own result; unknown ids fail without stopping the
        rest. Hosted elements (doors in a deleted wall) are removed too and
        counted in deleted_count.
        """
        if ctx:
            await ctx.info("Deleting {} elements".format(len(element_ids)))
        response = await revit_post("/delete_elements/", {"element_ids": element_ids}, ctx)
        if is_error(response) and ctx:
            await ctx.error("Delete elements failed: {}".format(error_message(response)))
        return format_response(response)
