"""Test setup for akafoe_menu."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

SAMPLE_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Mensa   der
    Ruhr-Universit\xc3\xa4t</title>
  <updated>2021-05-02T06:00:00+02:00</updated>
  <entry>
    <id>http://www.akafoe.de/speiseplan/1/21-05-01</id>
    <title>Samstag</title>
    <content type="xhtml">
      <div xmlns="http://www.w3.org/1999/xhtml">
        <p><strong>Komponentenessen</strong></p>
        <ul><li>Gestern 1,00 EUR - 2,00 EUR</li></ul>
      </div>
    </content>
  </entry>
  <entry>
    <id>http://www.akafoe.de/speiseplan/1/21-05-02</id>
    <title>Sonntag</title>
    <content type="xhtml">
      <div xmlns="http://www.w3.org/1999/xhtml">
        <p><strong>Komponentenessen</strong></p>
        <ul>
          <li>Spaghetti Bolognese (vegetarian) 1,50 EUR - 3,00 EUR</li>
          <li>Currywurst & Pommes (1,2) (A) 2,10 EUR - 3,80 EUR</li>
        </ul>
        <p><strong>Beilagen</strong></p>
        <ul>
          <li>Salat,Dressing 0,60 EUR - 1,00 EUR</li>
        </ul>
        <hr/>
        <p><strong>Aktion</strong></p>
      </div>
    </content>
  </entry>
</feed>
"""


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def feed_document() -> bytes:
    """A small Atom feed with entries for 2021-05-01 and 2021-05-02."""
    return SAMPLE_FEED


@pytest.fixture
def today() -> date:
    return date(2021, 5, 2)


@pytest.fixture
def network_timeout() -> float:
    """Default timeout for network operations in seconds."""
    return 60.0
