# -*- coding: utf-8 -*-
from mcp.server.fastmcp import Context
from .utils import format_response


def register_status_tools(mcp, revit_get, revit_post):
    _ = revit_post  # Acknowledge unused parameters

    @mcp.tool()
    async def get_revit_status(ctx: Context = None) -> str:
        """Check that Revit is reachable and list the categories with curated parameter mappings."""
        response = await revit_get("/status/", ctx)
        return format_response(response)
