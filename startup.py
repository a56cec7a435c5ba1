#! python3
# -*- coding: UTF-8 -*-
"""Revit MCP Extension Startup

Runs on pyRevit's CPython engine; the revit_mcp package is Python 3 only.
"""

import sys
import os.path as op
import traceback

# Add extension directory to sys.path
ext_dir = op.dirname(__file__)
if ext_dir not in sys.path:
    sys.path.append(ext_dir)

print("revit-mcp: ext_dir = {}".format(ext_dir))

try:
    from pyrevit import routes
    print("revit-mcp: pyrevit.routes imported OK")
except Exception as e:
    print("revit-mcp: FAILED to import pyrevit.routes: {}".format(e))
    traceback.print_exc()
    raise

api = routes.API("revit_mcp")
print("revit-mcp: API 'revit_mcp' created OK")

# Drop cached package modules so a pyRevit reload picks up edits
for _cached in list(sys.modules.keys()):
    if _cached == "revit_mcp" or _cached.startswith("revit_mcp."):
        del sys.modules[_cached]

try:
    from revit_mcp.registry import build_default_registry
    registry = build_default_registry()
except Exception as e:
    print("revit-mcp: FAILED to build the parameter registry: {}".format(e))
    traceback.print_exc()
    raise
print("revit-mcp: parameter registry with {} categories".format(
    len(registry.supported_categories())))

modules = [
    ("revit_mcp.status", "register_status_routes"),
    ("revit_mcp.filter_routes", "register_filter_routes"),
    ("revit_mcp.parameter_routes", "register_parameter_routes"),
    ("revit_mcp.color_routes", "register_color_routes"),
    ("revit_mcp.view_range_routes", "register_view_range_routes"),
    ("revit_mcp.element_routes", "register_element_routes"),
]

for mod_name, func_name in modules:
    try:
        mod = __import__(mod_name, fromlist=[func_name])
        func = getattr(mod, func_name)
        func(api, registry)
        print("revit-mcp: {} -> OK".format(mod_name))
    except Exception as e:
        print("revit-mcp: {} -> FAILED: {}".format(mod_name, e))
        traceback.print_exc()

print("revit-mcp: startup complete")
