# -*- coding: utf-8 -*-
"""Re-encode element dicts column-wise to save tokens.

Instead of repeating each parameter per element, values are grouped:
``parameters[name]["values"][display] = [ids]``. Names, categories and
family names shared by every element are lifted into ``commonProperties``.
"""
NOT_FOUND = 'Parameter not found'
EMPTY = 'Empty'

# element dict key -> tabular property name
_PROPERTIES = (
    ('name', 'name'),
    ('category', 'category'),
    ('family_name', 'familyName'),
)


def display_value(parameter):
    """Display string > value > raw value > "null"."""
    display = parameter.get('displayValue')
    if display:
        return display
    value = parameter.get('value')
    if value is not None and value != '':
        if isinstance(value, bool):
            return 'Yes' if value else 'No'
        if isinstance(value, float):
            return '{:g}'.format(value)
        return str(value)
    raw = parameter.get('rawValue')
    if raw is not None:
        return '{:g}'.format(raw)
    return 'null'


def _split_properties(elements):
    common = {}
    per_element = {}
    for key, prop in _PROPERTIES:
        present = [(e['id'], e.get(key)) for e in elements if e.get(key)]
        distinct = {v for _, v in present}
        if len(distinct) == 1:
            common[prop] = present[0][1]
        elif len(distinct) > 1:
            per_element[prop] = {str(eid): v for eid, v in present}
    return common, per_element


def _add(group, label, element_id, raw=None, reason=None):
    group['values'].setdefault(label, []).append(element_id)
    if raw is not None:
        group['rawValues'][str(element_id)] = raw
    if reason:
        group['emptyReasons'][str(element_id)] = reason


def to_tabular(elements):
    """Convert element dicts (as built by element_info) to the tabular shape."""
    elements = list(elements or [])
    result = {
        'elements': [e['id'] for e in elements],
        'commonProperties': {},
        'elementProperties': {},
        'parameters': {},
    }
    if not elements:
        return result

    result['commonProperties'], result['elementProperties'] = _split_properties(elements)

    names = []
    for e in elements:
        for p in e.get('parameters', []):
            if p['name'] not in names:
                names.append(p['name'])

    for name in names:
        group = {'values': {}, 'rawValues': {}, 'emptyReasons': {}}
        for e in elements:
            parameter = next((p for p in e.get('parameters', []) if p['name'] == name), None)
            if parameter is None:
                _add(group, NOT_FOUND, e['id'], reason=NOT_FOUND)
            elif parameter.get('emptyReason'):
                _add(group, EMPTY, e['id'], parameter.get('rawValue'), parameter['emptyReason'])
            else:
                _add(group, display_value(parameter), e['id'], parameter.get('rawValue'))
        result['parameters'][name] = group
    return result
