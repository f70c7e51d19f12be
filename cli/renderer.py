"""
AlgoLab Result Renderer
=======================
Formats demo results as aligned ASCII tables.

Features:
  - Auto-column-width with configurable max
  - Unreachable/missing values displayed as INF
  - Message rendering for scalar results
  - Modes: table, raw
"""

import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO


class Renderer:
    """
    Result renderer with configurable display modes.
    """

    def __init__(self, output: TextIO = None):
        self.output = output or sys.stdout
        self.mode: str = "table"        # table, raw
        self.show_headers: bool = True
        self.show_count: bool = True
        self.max_col_width: int = 50

    # ─── Public API ─────────────────────────────────────────────────

    def render_rows(self, rows: Iterable[Dict[str, Any]],
                    column_names: Optional[List[str]] = None) -> int:
        """Render result rows. Returns number of rows rendered."""
        rows = list(rows)
        headers = column_names or (list(rows[0].keys()) if rows else [])

        if self.mode == "raw":
            count = self._render_raw(rows, headers)
        else:
            count = self._render_table(rows, headers)

        if self.show_count:
            self._print(f"{count} row(s)")
        return count

    def render_message(self, message: str):
        """Render a scalar result or status line."""
        if message:
            self._print(message)

    def render_error(self, error: Exception):
        """Render an error with classification prefix."""
        prefix = self._classify_error(type(error).__name__)
        self._print(f"{prefix}: {error}")

    def render_title(self, title: str):
        self._print(f"== {title} ==")

    # ─── Table Mode ─────────────────────────────────────────────────

    def _render_table(self, rows: List[Dict[str, Any]], headers: List[str]) -> int:
        if not headers:
            return 0

        widths = self._calculate_widths(headers, rows)

        if self.show_headers:
            self._print_table_separator(widths, headers)
            self._print_table_row(widths, headers, {h: h for h in headers})
            self._print_table_separator(widths, headers)

        for vals in rows:
            self._print_table_row(widths, headers, vals)

        if self.show_headers and rows:
            self._print_table_separator(widths, headers)

        return len(rows)

    def _calculate_widths(self, headers: List[str], rows: List[Dict]) -> Dict[str, int]:
        """Calculate column widths from headers and rows."""
        widths = {h: min(len(h), self.max_col_width) for h in headers}
        for row in rows:
            for h in headers:
                val = self._format_value(row.get(h))
                widths[h] = max(widths[h], min(len(val), self.max_col_width))
        return widths

    def _print_table_separator(self, widths: Dict[str, int], headers: List[str]):
        """Print +----+------+ separator line."""
        parts = ["+"]
        for h in headers:
            parts.append("-" * (widths[h] + 2) + "+")
        self._print("".join(parts))

    def _print_table_row(self, widths: Dict[str, int], headers: List[str], vals: Dict):
        """Print | col1 | col2 | row."""
        parts = ["|"]
        for h in headers:
            val_str = self._format_value(vals.get(h))
            if len(val_str) > self.max_col_width:
                val_str = val_str[:self.max_col_width - 3] + "..."
            w = widths[h]
            # Right-align numbers, left-align strings
            raw_val = vals.get(h)
            if isinstance(raw_val, (int, float)) and not isinstance(raw_val, bool):
                parts.append(f" {val_str:>{w}} |")
            else:
                parts.append(f" {val_str:<{w}} |")
        self._print("".join(parts))

    # ─── Raw Mode ───────────────────────────────────────────────────

    def _render_raw(self, rows: List[Dict[str, Any]], headers: List[str]) -> int:
        """Render values separated by tabs, no alignment."""
        if self.show_headers and headers:
            self._print("\t".join(headers))
        for vals in rows:
            self._print("\t".join(self._format_value(vals.get(h)) for h in headers))
        return len(rows)

    # ─── Helpers ────────────────────────────────────────────────────

    def _format_value(self, value) -> str:
        if value is None:
            return "INF"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return " ".join(self._format_value(v) for v in value)
        return str(value)

    def _classify_error(self, error_type: str) -> str:
        """Map error class name to user-friendly prefix."""
        mapping = {
            "InvalidParameterError": "InvalidParameter",
            "NegativeCycleError": "NegativeCycle",
            "ValueError": "InvalidInput",
            "KeyboardInterrupt": "Interrupted",
        }
        return mapping.get(error_type, f"Error[{error_type}]")

    def _print(self, text: str):
        print(text, file=self.output)
