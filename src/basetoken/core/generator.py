"""
Token generation entry point.

Resolves configuration, expands the seed into Material palettes and
schemes, fetches Open Props primitives and writes every tier to disk:

    {dir}/index.css
    {dir}/{palette_subdir}/palettes.css
    {dir}/{openprops_subdir}/{file}.css
    {dir}/semantic.css
    {dir}/app.css            (only if absent)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from .colors import get_hue, normalize_hex
from .config import merge_config
from .css import generate_app_css, generate_index_css
from .errors import ConfigError
from .ir.config import ColorFormat, TokenConfig
from .material import DEFAULT_SCHEME, generate_material_theme
from .openprops import OpenPropsFetcher, generate_open_props_css
from .palettes import generate_palettes_css
from .semantic import generate_semantic_css

logger = logging.getLogger(__name__)


class CSSSourceFetcher(Protocol):
    """Anything that returns raw Open Props CSS for a logical file name."""

    def fetch(self, file_name: str) -> str: ...


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    output_dir: Path
    seed: str
    seed_hue: float
    scheme: str
    written: list[Path] = field(default_factory=list)
    preserved: list[Path] = field(default_factory=list)


def write_css_file(path: Path, content: str, *, overwrite: bool = True) -> bool:
    """Write a CSS file, creating parent directories.

    Args:
        path: Target path.
        content: File content.
        overwrite: If False, leave an existing file untouched.

    Returns:
        True if the file was written, False if it was preserved.
    """
    if path.exists() and not overwrite:
        logger.debug(f"Skipping existing file: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {path}")
    return True


def generate_tokens(
    seed: str,
    output: str | Path | None = None,
    format: ColorFormat | str | None = None,
    scheme: str = DEFAULT_SCHEME,
    *,
    config: TokenConfig | Mapping[str, Any] | None = None,
    fetcher: CSSSourceFetcher | None = None,
    generated_at: datetime | None = None,
) -> GenerationResult:
    """Generate all token files for a seed color.

    Args:
        seed: Seed color as hex.
        output: Output directory (overrides ``config.output.dir``).
        format: Color format (overrides ``config.format``).
        scheme: Material scheme variant, e.g. ``tonal-spot``.
        config: Resolved TokenConfig or a partial mapping to merge.
        fetcher: Open Props source; defaults to an HTTP fetcher on
            ``config.openprops.base_url``.
        generated_at: Timestamp shared by every header of this run.

    Returns:
        GenerationResult listing written and preserved files.

    Raises:
        InvalidColorError: If the seed is not a valid hex color.
        ConfigError: If the config or scheme variant is invalid.
        FetchError: If an Open Props file cannot be retrieved.
    """
    resolved = config if isinstance(config, TokenConfig) else merge_config(config)
    if format is None:
        fmt = resolved.format
    else:
        try:
            fmt = ColorFormat(format)
        except ValueError as e:
            known = ", ".join(f.value for f in ColorFormat)
            raise ConfigError(f"Unknown color format '{format}' (expected one of: {known})") from e
    prefixes = resolved.prefixes
    out_dir = Path(output) if output is not None else Path(resolved.output.dir)
    stamp = generated_at or datetime.now()

    seed_hex = normalize_hex(seed)
    seed_hue = get_hue(seed_hex)
    logger.info(f"Generating tokens for {seed_hex} ({scheme}, {fmt.value}) into {out_dir}")

    theme = generate_material_theme(seed_hex, scheme)

    # Nothing is written until every document has rendered
    documents: list[tuple[Path, str, bool]] = []

    # Tier 1: Material palettes
    documents.append(
        (
            out_dir / resolved.output.palette_subdir / "palettes.css",
            generate_palettes_css(theme.palettes, seed_hex, prefixes, fmt, generated_at=stamp),
            True,
        )
    )

    # Tier 1: Open Props primitives
    owned_fetcher = None
    if fetcher is None:
        owned_fetcher = fetcher = OpenPropsFetcher(resolved.openprops.base_url)
    try:
        for file_name in resolved.openprops.files:
            raw = fetcher.fetch(file_name)
            documents.append(
                (
                    out_dir / resolved.output.openprops_subdir / f"{file_name}.css",
                    generate_open_props_css(
                        file_name, raw, prefixes.primitives, seed_hue, generated_at=stamp
                    ),
                    True,
                )
            )
    finally:
        if owned_fetcher is not None:
            owned_fetcher.close()

    # Tier 2: semantic API
    documents.append(
        (
            out_dir / "semantic.css",
            generate_semantic_css(
                theme.light,
                theme.dark,
                resolved.semantic,
                prefixes,
                fmt,
                seed_hue,
                generated_at=stamp,
            ),
            True,
        )
    )

    documents.append(
        (
            out_dir / "index.css",
            generate_index_css(
                resolved.openprops.files,
                prefixes,
                resolved.output.palette_subdir,
                resolved.output.openprops_subdir,
                generated_at=stamp,
            ),
            True,
        )
    )

    # Tier 3: app-owned, never overwritten
    documents.append((out_dir / "app.css", generate_app_css(), False))

    result = GenerationResult(output_dir=out_dir, seed=seed_hex, seed_hue=seed_hue, scheme=scheme)
    for path, content, overwrite in documents:
        if write_css_file(path, content, overwrite=overwrite):
            result.written.append(path)
        else:
            result.preserved.append(path)

    logger.info(
        f"Generated {len(result.written)} files ({len(result.preserved)} preserved) in {out_dir}"
    )
    return result
