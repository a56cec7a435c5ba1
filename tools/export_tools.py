# -*- coding: utf-8 -*-
"""
Export element filter / element parameter results to Excel (.xlsx).
openpyxl is imported lazily so the server starts without it.
"""
import json
import os
import tempfile
import time

from mcp.server.fastmcp import Context

STANDARD = 'standard'
TABULAR = 'tabular'

_BASE_COLUMNS = (('id', 'Id'), ('name', 'Name'), ('category', 'Category'),
                 ('family_name', 'Family'))


def _header_font():
    from openpyxl.styles import Font
    return Font(bold=True, size=11)


def _header_fill(color_hex='DDEBF6'):
    from openpyxl.styles import PatternFill
    return PatternFill(fill_type='solid', fgColor=color_hex)


def _write_header_row(ws, headers):
    for col, text in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col, value=text)
        cell.font = _header_font()
        cell.fill = _header_fill()


def _set_col_widths(ws, widths):
    from openpyxl.utils import get_column_letter
    for i, w in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(i)].width = w


def detect_format(body):
    """'standard' for a list of elements, 'tabular' for grouped output, else None."""
    data = body.get('data') if isinstance(body, dict) else None
    if isinstance(data, list):
        return STANDARD
    if isinstance(data, dict) and 'parameters' in data:
        return TABULAR
    return None


def _cell_value(parameter):
    if parameter.get('emptyReason'):
        return ''
    if parameter.get('displayValue'):
        return parameter['displayValue']
    return parameter.get('value')


def write_standard_sheet(ws, elements):
    """One row per element, one column per parameter."""
    names = []
    for element in elements:
        for p in element.get('parameters', []):
            if p['name'] not in names:
                names.append(p['name'])

    _write_header_row(ws, [label for _, label in _BASE_COLUMNS] + names)
    for row, element in enumerate(elements, start=2):
        for col, (key, _) in enumerate(_BASE_COLUMNS, start=1):
            ws.cell(row=row, column=col, value=element.get(key))
        values = {p['name']: _cell_value(p) for p in element.get('parameters', [])}
        for offset, name in enumerate(names):
            ws.cell(row=row, column=len(_BASE_COLUMNS) + 1 + offset, value=values.get(name, ''))
    _set_col_widths(ws, [12, 30, 20, 24] + [18] * len(names))
    return len(elements)


def write_tabular_sheet(ws, tabular):
    """One row per (parameter, display value) with the element ids sharing it."""
    _write_header_row(ws, ['Parameter', 'Value', 'Count', 'Element Ids'])
    row = 2
    for name, group in tabular.get('parameters', {}).items():
        for value, ids in group.get('values', {}).items():
            ws.cell(row=row, column=1, value=name)
            ws.cell(row=row, column=2, value=value)
            ws.cell(row=row, column=3, value=len(ids))
            ws.cell(row=row, column=4, value=', '.join(str(i) for i in ids))
            row += 1
    _set_col_widths(ws, [30, 30, 10, 60])

    common = tabular.get('commonProperties') or {}
    if common:
        row += 1
        ws.cell(row=row, column=1, value='Common properties').font = _header_font()
        for key, value in common.items():
            row += 1
            ws.cell(row=row, column=1, value=key)
            ws.cell(row=row, column=2, value=value)
    return row - 1


def export_workbook(body, output_path, title='Elements'):
    """Write ``body`` (a filter or element-parameters response) to ``output_path``."""
    import openpyxl

    fmt = detect_format(body)
    if fmt is None:
        raise ValueError("No element data found: expected an ai_element_filter or "
                         "get_element_parameters result")
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = title[:31]  # Excel sheet name limit
    if fmt == STANDARD:
        rows = write_standard_sheet(ws, body['data'])
    else:
        rows = write_tabular_sheet(ws, body['data'])
    ws.freeze_panes = 'A2'
    wb.save(output_path)
    return {"status": "ok", "path": output_path, "format": fmt, "rows": rows,
            "sheets": [s.title for s in wb.worksheets]}


def default_output_path():
    exports_dir = os.path.join(tempfile.gettempdir(), 'RevitMCPExports')
    os.makedirs(exports_dir, exist_ok=True)
    return os.path.join(exports_dir, 'elements_{}.xlsx'.format(int(time.time())))


def register_export_tools(mcp, revit_get, revit_post):
    """Register the Excel export tool."""
    _ = revit_get, revit_post  # Acknowledge unused parameters

    @mcp.tool()
    async def export_elements_excel(
        data: str,
        output_path: str = '',
        title: str = 'Elements',
        ctx: Context = None,
    ) -> dict:
        """Export an ai_element_filter or get_element_parameters result to Excel (.xlsx).

        data: the JSON text returned by one of those tools (standard or tabular format)
        output_path: .xlsx path (default: a timestamped file in the temp folder)
        title: sheet title (max 31 chars, Excel limit)
        """
        try:
            parsed = json.loads(data)
        except ValueError as e:
            return {"error": "Invalid JSON data: " + str(e)}

        try:
            import openpyxl  # noqa: F401
        except ImportError:
            return {"error": "openpyxl not installed. Run: pip install openpyxl"}

        try:
            result = export_workbook(parsed, output_path or default_output_path(), title)
        except (ValueError, OSError) as e:
            if ctx:
                await ctx.error("Excel export failed: {}".format(e))
            return {"error": str(e)}
        if ctx:
            await ctx.info("Exported {} rows to {}".format(result["rows"], result["path"]))
        return result
