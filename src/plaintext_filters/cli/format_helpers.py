"""Shared text formatting primitives for CLI output."""

from __future__ import annotations

from plaintext_filters.lib.align import Alignment, align_text


def tabular(rows: list[list[str]], sep: str = "  ", width: int = 0) -> str:
    """Align columns by max width per column, cutting lines past ``width``.

    >>> tabular([["r1", "done", "5.0s"], ["r20", "failed", "21.6s"]])
    'r1   done    5.0s\\nr20  failed  21.6s'
    >>> tabular([["r1", "done", "5.0s"], ["r20", "failed", "21.6s"]], width=8)
    'r1   don\\nr20  fai'
    """
    if not rows:
        return ""
    col_count = max(len(row) for row in rows)
    col_widths = [
        max((len(row[col]) if col < len(row) else 0) for row in rows)
        for col in range(col_count)
    ]
    lines: list[str] = []
    for row in rows:
        cells = [
            align_text(row[col] if col < len(row) else "", col_widths[col], Alignment.LEFT)
            for col in range(col_count)
        ]
        line = sep.join(cells)
        if 0 < width < len(line):
            line = align_text(line, width, Alignment.LEFT)
        lines.append(line.rstrip())
    return "\n".join(lines)
