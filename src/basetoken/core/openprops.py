"""
Open Props primitive CSS: retrieval, transformation and prefixing.

Upstream Open Props files target ``:where(html)`` and a custom media
query; they are rewritten to plain ``:root`` / ``prefers-color-scheme``
CSS and namespaced with the primitives prefix.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from types import TracebackType

import httpx

from .colors import round_half_up
from .css import generate_header
from .errors import FetchError

logger = logging.getLogger(__name__)

# Logical file names whose upstream source file is named differently
OPEN_PROPS_SOURCE_NAMES: dict[str, str] = {
    "easings": "easing",
}

SHADOW_SATURATION = "10%"
SHADOW_LIGHTNESS = "15%"

_IMPORT_RE = re.compile(r"^[ \t]*@import\s[^;]*;[ \t]*\n?", re.MULTILINE)
_WHERE_HTML_RE = re.compile(r":where\(\s*html\s*\)")
_OSDARK_RE = re.compile(r"@media\s*\(\s*--OSdark\s*\)")
_SHADOW_COLOR_RE = re.compile(r"--shadow-color\s*:[^;]*;")
_ROOT_OPEN_RE = re.compile(r":root\s*\{")
_BLANK_RUN_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")
# A definition starts a declaration: line start, '{' or ';' before it
_DEFINITION_RE = re.compile(r"(^|[\s{;])--([A-Za-z0-9_-]+)(\s*:)", re.MULTILINE)


# =============================================================================
# Transformation
# =============================================================================


def _inject_shadow_color(css: str, seed_hue: float) -> str:
    """Set the light-mode --shadow-color from the seed hue.

    Only the part before the first @media block is touched, so the dark
    mode declaration keeps its authored value.
    """
    declaration = f"--shadow-color: {round_half_up(seed_hue)} {SHADOW_SATURATION} {SHADOW_LIGHTNESS};"

    media_at = css.find("@media")
    light, rest = (css, "") if media_at == -1 else (css[:media_at], css[media_at:])

    if _SHADOW_COLOR_RE.search(light):
        light = _SHADOW_COLOR_RE.sub(declaration, light, count=1)
    else:
        match = _ROOT_OPEN_RE.search(light)
        if match:
            light = f"{light[: match.end()]}\n  {declaration}{light[match.end() :]}"
        else:
            light = f":root {{\n  {declaration}\n}}\n\n{light}"

    return light + rest


def transform_open_props_css(css: str, file_name: str, seed_hue: float) -> str:
    """Rewrite upstream Open Props CSS for standalone use.

    - strips ``@import`` statements
    - ``:where(html)`` -> ``:root``
    - ``@media (--OSdark)`` -> ``@media (prefers-color-scheme: dark)``
    - for ``shadows`` only, tints the light-mode ``--shadow-color`` with
      the seed hue
    - trims surrounding blank lines
    """
    result = _IMPORT_RE.sub("", css)
    result = _WHERE_HTML_RE.sub(":root", result)
    result = _OSDARK_RE.sub("@media (prefers-color-scheme: dark)", result)

    if file_name == "shadows":
        result = _inject_shadow_color(result, seed_hue)

    result = _BLANK_RUN_RE.sub("\n\n", result)
    return result.strip()


def prefix_open_props_css(css: str, prefix: str) -> str:
    """Namespace custom property definitions: ``--size-1:`` -> ``--op-size-1:``.

    ``var(--name)`` usages are left as they are.
    """
    return _DEFINITION_RE.sub(
        lambda m: f"{m.group(1)}--{prefix}-{m.group(2)}{m.group(3)}",
        css,
    )


def file_title(file_name: str) -> str:
    """'sizes' -> 'Sizes'."""
    return " ".join(part.capitalize() for part in file_name.split("-"))


def generate_open_props_css(
    file_name: str,
    raw_css: str,
    prefix: str,
    seed_hue: float,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Generate one Open Props tier-1 file: header + transformed, prefixed CSS."""
    header = generate_header(
        f"{file_title(file_name)} Tokens",
        "Open Props (https://open-props.style)",
        f"Naming: --{prefix}-*",
        generated_at=generated_at,
    )
    body = prefix_open_props_css(transform_open_props_css(raw_css, file_name, seed_hue), prefix)
    return f"{header}\n\n{body}\n"


# =============================================================================
# Retrieval
# =============================================================================


def open_props_url(base_url: str, file_name: str) -> str:
    """URL of the upstream source for a logical Open Props file name."""
    source = OPEN_PROPS_SOURCE_NAMES.get(file_name, file_name)
    return f"{base_url.rstrip('/')}/props.{source}.css"


class OpenPropsFetcher:
    """HTTP client for Open Props source files."""

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> OpenPropsFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch(self, file_name: str) -> str:
        """Fetch the raw CSS for one logical file name.

        Raises:
            FetchError: On transport errors or non-2xx responses.
        """
        url = open_props_url(self.base_url, file_name)
        logger.debug(f"Fetching Open Props {file_name} from {url}")
        try:
            resp = self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Failed to fetch Open Props '{file_name}': HTTP {e.response.status_code}",
                url=url,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch Open Props '{file_name}': {e}", url=url) from e
        return resp.text
