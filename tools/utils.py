# -*- coding: utf-8 -*-
"""Shared helpers for the MCP tools."""
import json


def format_response(response):
    """Render a route response for the client.

    Strings (including "Error: ..." from the HTTP layer) pass through; dicts
    and lists become indented JSON.
    """
    if isinstance(response, str):
        return response
    return json.dumps(response, indent=2, ensure_ascii=False)


def is_error(response):
    """True for transport errors and for route bodies with success false."""
    if isinstance(response, str):
        return response.startswith("Error")
    return isinstance(response, dict) and response.get("success") is False


def error_message(response):
    if isinstance(response, str):
        return response
    return response.get("message", "Unknown error")


def drop_empty(payload):
    """Request payload without None values, so route defaults apply."""
    return {k: v for k, v in payload.items() if v is not None}
