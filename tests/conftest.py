"""Shared pytest fixtures for basetoken tests."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from basetoken.core.ir.config import SEMANTIC_CATEGORIES, SemanticConfig
from basetoken.core.openprops import OpenPropsFetcher

OPEN_PROPS_BASE_URL = "https://open-props.test/src"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def light_scheme() -> dict[str, str]:
    """Minimal light scheme."""
    return {
        "primary": "#6750A4",
        "onPrimary": "#FFFFFF",
        "primaryContainer": "#EADDFF",
        "onPrimaryContainer": "#21005D",
        "surface": "#FFFBFE",
        "onSurface": "#1C1B1F",
        "surfaceContainer": "#F3EDF7",
        "error": "#B3261E",
        "onError": "#FFFFFF",
        "outline": "#79747E",
    }


@pytest.fixture
def dark_scheme() -> dict[str, str]:
    """Minimal dark scheme."""
    return {
        "primary": "#D0BCFF",
        "onPrimary": "#381E72",
        "primaryContainer": "#4F378B",
        "onPrimaryContainer": "#EADDFF",
        "surface": "#1C1B1F",
        "onSurface": "#E6E1E5",
        "surfaceContainer": "#211F26",
        "error": "#F2B8B5",
        "onError": "#601410",
        "outline": "#938F99",
    }


@pytest.fixture
def empty_semantic() -> SemanticConfig:
    """Semantic config with every category empty."""
    return SemanticConfig(**{category: {} for category in SEMANTIC_CATEGORIES})


@pytest.fixture
def test_palettes() -> dict[str, dict[str, str]]:
    """Palettes for seed #FFDE3F, without an error ramp."""
    return {
        "primary": {
            "0": "#000000", "5": "#151100", "10": "#221B00", "15": "#2D2500",
            "20": "#3A3000", "25": "#463B00", "30": "#534600", "35": "#615200",
            "40": "#6E5D00", "50": "#8B7600", "60": "#A88F00", "70": "#C7AA00",
            "80": "#E5C524", "90": "#FFE25E", "95": "#FFF1BE", "98": "#FFF9EE",
            "99": "#FFFBFF", "100": "#FFFFFF",
        },
        "secondary": {
            "0": "#000000", "5": "#151100", "10": "#211B01", "15": "#2C2506",
            "20": "#373010", "25": "#433B1A", "30": "#4F4724", "35": "#5B522F",
            "40": "#675E3A", "50": "#817750", "60": "#9B9168", "70": "#B7AB80",
            "80": "#D3C69A", "90": "#F0E2B4", "95": "#FEF1C1", "98": "#FFF9EE",
            "99": "#FFFBFF", "100": "#FFFFFF",
        },
        "tertiary": {
            "0": "#000000", "5": "#001508", "10": "#00210F", "15": "#002D17",
            "20": "#083820", "25": "#16442A", "30": "#234F35", "35": "#2F5B40",
            "40": "#3B684B", "50": "#548163", "60": "#6D9B7B", "70": "#87B695",
            "80": "#A1D2AF", "90": "#BDEECA", "95": "#CBFDD8", "98": "#E9FFEC",
            "99": "#F5FFF4", "100": "#FFFFFF",
        },
        "neutral": {
            "0": "#000000", "5": "#12110C", "10": "#1D1B16", "15": "#282620",
            "20": "#32302A", "25": "#3E3B35", "30": "#494640", "35": "#55524B",
            "40": "#615E57", "50": "#7A776F", "60": "#949088", "70": "#AFABA2",
            "80": "#CBC6BD", "90": "#E7E2D9", "95": "#F6F0E7", "98": "#FFF9EF",
            "99": "#FFFBFF", "100": "#FFFFFF",
        },
        "neutral-variant": {
            "0": "#000000", "5": "#131107", "10": "#1E1B10", "15": "#29261A",
            "20": "#343024", "25": "#3F3B2E", "30": "#4B4739", "35": "#575244",
            "40": "#635E50", "50": "#7C7767", "60": "#969080", "70": "#B1AB9A",
            "80": "#CDC6B4", "90": "#EAE2D0", "95": "#F8F0DD", "98": "#FFF9EE",
            "99": "#FFFBFF", "100": "#FFFFFF",
        },
    }


@pytest.fixture
def open_props_transport(fixtures_dir: Path) -> httpx.MockTransport:
    """Serve tests/fixtures/open_props/*.css as if from the upstream repo."""
    source_dir = fixtures_dir / "open_props"

    def handler(request: httpx.Request) -> httpx.Response:
        path = source_dir / request.url.path.rsplit("/", 1)[-1]
        if not path.exists():
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, text=path.read_text(encoding="utf-8"))

    return httpx.MockTransport(handler)


@pytest.fixture
def open_props_fetcher(open_props_transport: httpx.MockTransport):
    """OpenPropsFetcher backed by the fixture files."""
    client = httpx.Client(transport=open_props_transport)
    fetcher = OpenPropsFetcher(OPEN_PROPS_BASE_URL, client=client)
    yield fetcher
    client.close()
