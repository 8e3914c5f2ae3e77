"""
Pytest fixtures for Graveyard tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graveyard.products import Product  # noqa: E402


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_data_path(temp_dir: Path, monkeypatch) -> Path:
    """Point the data directory at a temp dir and clear env overrides."""
    monkeypatch.setenv("GRAVEYARD_DATA_PATH", str(temp_dir))
    monkeypatch.delenv("GRAVEYARD_MIN_SCORE", raising=False)
    monkeypatch.delenv("GRAVEYARD_DEBOUNCE_MS", raising=False)
    monkeypatch.delenv("GRAVEYARD_DEBUG", raising=False)
    return temp_dir


@pytest.fixture
def reader_example() -> list[Product]:
    """Three-product collection: two Readers and an Inbox."""
    return [
        Product(
            name="Reader",
            identifier="reader",
            description="Feed aggregator",
            product_category="Productivity",
            shutdown_reason="Bad Business Model",
            lifespan_months=60,
            lifespan_category="5-10 years",
            raw_type="service",
            date_close="2013-07-01",
        ),
        Product(
            name="Inbox",
            identifier="inbox",
            description="Email client with bundles",
            product_category="Communication",
            shutdown_reason="Competition",
            lifespan_months=36,
            lifespan_category="2-5 years",
            raw_type="app",
            date_close="2019-04-02",
        ),
        Product(
            name="Reader Lite",
            identifier="reader-lite",
            description="Trimmed feed aggregator",
            product_category="Productivity",
            shutdown_reason="Competition",
            lifespan_months=12,
            lifespan_category="1-2 years",
            raw_type="app",
            date_close="2011-01-15",
        ),
    ]


@pytest.fixture
def catalog_records() -> list[dict]:
    """Raw catalog records using the JSON (camelCase) keys."""
    return [
        {
            "name": "Google Reader",
            "identifier": "google-reader",
            "description": "RSS and Atom feed reader with sharing",
            "dateOpen": "2005-10-07",
            "dateClose": "2013-07-01",
            "lifespanMonths": 93,
            "lifespanCategory": "5-10 years",
            "type": "service",
            "productCategory": "Productivity",
            "shutdownReason": "Strategic Misalignment",
            "shutdownReasonDetail": "Declining usage as readers moved to social feeds",
            "notableFeatures": ["Shared items", "Offline reading"],
        },
        {
            "name": "Stadia",
            "identifier": "stadia",
            "description": "Cloud gaming platform streaming games to any screen",
            "dateOpen": "2019-11-19",
            "dateClose": "2023-01-18",
            "lifespanMonths": 38,
            "lifespanCategory": "2-5 years",
            "type": "Service",
            "productCategory": "Gaming",
            "shutdownReason": "Bad Market Fit",
            "notableFeatures": ["Controller with direct Wi-Fi", "Instant play links"],
        },
        {
            "name": "Nexus Q",
            "identifier": "nexus-q",
            "description": "Spherical media streaming device",
            "dateOpen": "2012-06-27",
            "dateClose": "2013-01",
            "lifespanMonths": 7,
            "lifespanCategory": "Less than 1 year",
            "type": "hardware",
            "productCategory": "Physical Devices",
            "shutdownReason": "Bad Timing",
            "notableFeatures": None,
        },
        {
            "name": "Allo",
            "identifier": "allo",
            "description": "Smart messaging app with an assistant built in",
            "dateOpen": "2016-09-21",
            "dateClose": "2019-03-12",
            "lifespanMonths": 29,
            "lifespanCategory": "2-5 years",
            "type": "apps",
            "productCategory": "Communication",
            "shutdownReason": "Competition",
            "notableFeatures": ["Smart reply", "Incognito chats"],
        },
        {
            "name": "Wave",
            "identifier": "wave",
            "description": "Real-time collaborative messaging and documents",
            "dateOpen": "2009-05-27",
            "dateClose": "2012-04-30",
            "lifespanMonths": 35,
            "lifespanCategory": "2-5 years",
            "type": "widget",
            "productCategory": "Communication",
            "shutdownReason": "Bad Market Fit",
            "notableFeatures": ["Live typing", "Playback of edits"],
        },
    ]


@pytest.fixture
def catalog_products(catalog_records) -> list[Product]:
    """Validated products from catalog_records."""
    return [Product.model_validate(record) for record in catalog_records]
