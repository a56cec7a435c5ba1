# -*- coding: utf-8 -*-
"""Element filter tool."""
from typing import List, Dict, Any

from mcp.server.fastmcp import Context
from .utils import format_response, is_error, error_message, drop_empty


def register_filter_tools(mcp, revit_get, revit_post):
    """Register the AI element filter tool."""
    _ = revit_get  # Acknowledge unused parameters

    @mcp.tool()
    async def ai_element_filter(
        filter_category: str = None,
        filter_element_type: str = None,
        filter_family_symbol_id: int = -1,
        include_types: bool = False,
        include_instances: bool = True,
        filter_visible_in_current_view: bool = False,
        bounding_box_min: Dict[str, float] = None,
        bounding_box_max: Dict[str, float] = None,
        parameter_filters: List[Dict[str, Any]] = None,
        natural_language_query: str = None,
        detail_level: str = "basic",
        return_parameters: List[str] = None,
        response_format: str = "standard",
        max_elements: int = 50,
        ctx: Context = None,
    ) -> str:
        """
        Find Revit elements by category, class, family type, spatial range and parameter values.

        At least one of filter_category, filter_element_type or filter_family_symbol_id
        is required (a category found in natural_language_query also counts).

        filter_category: "OST_Doors", "OST_Walls" ... or a friendly name like "doors"
        filter_element_type: Revit API class name such as "Wall" or "FamilyInstance"
        bounding_box_min / bounding_box_max: {"x", "y", "z"} in millimetres, both or neither
        parameter_filters: [{"name": "width", "operator": ">", "value": 3.0}]
            operators: > < >= <= = == != contains startswith endswith (all must match).
            Names use the category's vocabulary: "u value", "thickness", "mark" ...
            Terms that mean several parameters (like "phase") are rejected; name one.
        natural_language_query: e.g. "doors wider than 3 feet"; used only when
            parameter_filters is empty; the first condition found is applied.
        detail_level: minimal | basic | full (full adds the category's common parameters)
        return_parameters: extra parameter names to read for every element
        response_format: standard (list of elements) | tabular (grouped by value)
        max_elements: cap on returned elements; the total count is always reported
        """
        payload = drop_empty({
            "filter_category": filter_category,
            "filter_element_type": filter_element_type,
            "filter_family_symbol_id": filter_family_symbol_id,
            "include_types": include_types,
            "include_instances": include_instances,
            "filter_visible_in_current_view": filter_visible_in_current_view,
            "bounding_box_min": bounding_box_min,
            "bounding_box_max": bounding_box_max,
            "parameter_filters": parameter_filters,
            "natural_language_query": natural_language_query,
            "detail_level": detail_level,
            "return_parameters": return_parameters,
            "response_format": response_format,
            "max_elements": max_elements,
        })
        if ctx:
            await ctx.info("Filtering elements: {}".format(
                natural_language_query or filter_category or filter_element_type))

        response = await revit_post("/filter_elements/", payload, ctx)
        if is_error(response) and ctx:
            await ctx.error("Element filter failed: {}".format(error_message(response)))
        return format_response(response)
