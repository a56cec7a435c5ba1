# -*- coding: utf-8 -*-
"""Revit-side package for the Revit MCP command set.

Route modules (``*_routes.py``, ``status.py``) and ``revit_host.py`` need
pyRevit and only load inside Revit. Everything else is plain Python.
"""
