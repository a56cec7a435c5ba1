# -*- coding: utf-8 -*-
import os
import sys
import asyncio
import requests as _requests
import anyio
from mcp.server.fastmcp import FastMCP, Context
from typing import Dict, Any, Union

# Configuration
REVIT_HOST = os.environ.get("REVIT_MCP_HOST", "localhost")
REVIT_PORT = int(os.environ.get("REVIT_MCP_PORT", "48884"))  # Default pyRevit Routes port
REVIT_TIMEOUT = float(os.environ.get("REVIT_MCP_TIMEOUT", "10"))
LOG_LEVEL = os.environ.get("REVIT_MCP_LOG_LEVEL", "INFO").upper()
BASE_URL = f"http://{REVIT_HOST}:{REVIT_PORT}/revit_mcp"

# Use stateless_http=True and json_response=True for better compatibility
mcp = FastMCP(
    "Revit MCP Server",
    host="127.0.0.1",
    port=8000,
    log_level=LOG_LEVEL,
    stateless_http=True,
    json_response=True
)


async def revit_get(endpoint: str, ctx: Context = None, **kwargs) -> Union[Dict, str]:
    """Simple GET request to Revit API"""
    return await _revit_call("GET", endpoint, ctx=ctx, **kwargs)


async def revit_post(endpoint: str, data: Dict[str, Any], ctx: Context = None, **kwargs) -> Union[Dict, str]:
    """Simple POST request to Revit API"""
    return await _revit_call("POST", endpoint, data=data, ctx=ctx, **kwargs)


async def _revit_call(method: str, endpoint: str, data: Dict = None, ctx: Context = None,
                      timeout: float = REVIT_TIMEOUT, params: Dict = None) -> Union[Dict, str]:
    """Uses requests via a worker thread to avoid httpx/pyRevit incompatibility.

    Error bodies from the routes are JSON too; they are returned as dicts so
    the tools can show the route's message.
    """
    def _do():
        url = f"{BASE_URL}{endpoint}"
        if method == "GET":
            r = _requests.get(url, params=params, timeout=timeout)
        else:
            r = _requests.post(url, json=data,
                               headers={"Content-Type": "application/json"},
                               timeout=timeout)
        return r
    try:
        response = await asyncio.to_thread(_do)
    except _requests.RequestException as e:
        return f"Error: {e}"
    try:
        return response.json()
    except ValueError:
        return f"Error: {response.status_code} - {response.text}"


# Register all tools BEFORE the main block
from tools import register_tools
register_tools(mcp, revit_get, revit_post)


async def run_combined_async():
    """Run server with both SSE and streamable-http endpoints.

    This allows clients to connect via either:
    - SSE: GET /sse, POST /messages/
    - Streamable-HTTP: POST/GET /mcp
    """
    import uvicorn

    # The streamable-http app carries the lifespan that starts the session manager
    http_app = mcp.streamable_http_app()
    sse_app = mcp.sse_app()

    for route in sse_app.routes:
        http_app.routes.append(route)

    config = uvicorn.Config(
        http_app,
        host=mcp.settings.host,
        port=mcp.settings.port,
        log_level=mcp.settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    transport = "stdio"

    if "--sse" in sys.argv:
        transport = "sse"
    elif "--http" in sys.argv or "--streamable-http" in sys.argv:
        transport = "streamable-http"
    elif "--combined" in sys.argv:
        print("Starting combined server with SSE (/sse, /messages/) and streamable-http (/mcp) endpoints...")
        anyio.run(run_combined_async)
        sys.exit(0)

    mcp.run(transport=transport)
