# -*- coding: utf-8 -*-
"""Extension startup script: engine directive and route module list.
Runs WITHOUT Revit.
"""
import os
import re
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from revit_mcp.registry import build_default_registry

ROOT = os.path.join(os.path.dirname(__file__), '..')


def _read(*parts):
    with open(os.path.join(ROOT, *parts), encoding='utf-8') as f:
        return f.read()


def test_startup_runs_on_cpython_engine():
    # pyRevit picks the engine from the first line
    assert _read('startup.py').splitlines()[0] == '#! python3'


def test_registered_route_modules_exist():
    pairs = re.findall(r'\("revit_mcp\.(\w+)", "(register_\w+)"\)', _read('startup.py'))
    assert ('element_routes', 'register_element_routes') in pairs
    for mod_name, func_name in pairs:
        assert 'def {}('.format(func_name) in _read('revit_mcp', mod_name + '.py')


def test_registry_builds_outside_revit():
    registry = build_default_registry()
    assert 'OST_Walls' in registry.supported_categories()
