"""
CSS document builders: file headers, the index import graph, and the
application-owned scaffold.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .ir.config import Prefixes

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def generate_header(
    title: str,
    source: str | None = None,
    description: str | None = None,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Build the block comment that opens every generated file.

    Args:
        title: First line of the comment.
        source: Optional origin shown as ``Source: ...``.
        description: Optional free text; each line is prefixed with `` * ``.
        generated_at: Timestamp to embed (defaults to now). Pass one value
            for every file of a run to keep the run consistent.
    """
    stamp = (generated_at or datetime.now()).strftime(TIMESTAMP_FORMAT)
    lines = [
        "/**",
        f" * {title}",
        " *",
        f" * Generated: {stamp}",
        " * DO NOT EDIT - This file is auto-generated",
    ]
    if source:
        lines.append(f" * Source: {source}")
    if description:
        lines.append(" *")
        lines.extend(f" * {line}" for line in description.split("\n"))
    lines.append(" */")
    return "\n".join(lines)


def generate_index_css(
    open_props_files: Iterable[str],
    prefixes: Prefixes,
    palette_subdir: str,
    openprops_subdir: str,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Generate index.css, the three-tier import graph.

    Open Props imports are sorted by file name regardless of input order.
    """
    header = generate_header(
        "Tokens Layer - Main Entry Point",
        description=(
            "Import this file once from your application stylesheet.\n"
            "\n"
            "Prefixes:\n"
            f"  --{prefixes.palette}-palette-*  Material tonal palettes (Tier 1)\n"
            f"  --{prefixes.primitives}-*  Open Props primitives (Tier 1)\n"
            f"  --{prefixes.semantic}-*  Semantic tokens (Tier 2)"
        ),
        generated_at=generated_at,
    )

    lines = [header, ""]
    lines.append("/* Tier 1: Warehouses (Primitives) */")
    lines.append(f'@import "./{palette_subdir}/palettes.css";')
    for name in sorted(open_props_files):
        lines.append(f'@import "./{openprops_subdir}/{name}.css";')
    lines.append("")
    lines.append("/* Tier 2: Showroom (Semantic) */")
    lines.append('@import "./semantic.css";')
    lines.append("")
    lines.append("/* Tier 3: App-Specific */")
    lines.append('@import "./app.css";')
    lines.append("")
    return "\n".join(lines)


APP_CSS = """\
/**
 * App-Specific Tokens (Tier 3)
 *
 * This file is NOT generated. It is created once and never overwritten,
 * so edit it freely. Build on the --ui-* semantic tokens here.
 */

:root {
  /* Layout */
  --sidebar-width: 16rem;
  --header-height: 4rem;

  /* Containers */
  --container-sm: 640px;
  --container-md: 768px;
  --container-lg: 1024px;
  --container-xl: 1280px;
}
"""


def generate_app_css() -> str:
    """Generate the app.css scaffold (written only when absent)."""
    return APP_CSS
