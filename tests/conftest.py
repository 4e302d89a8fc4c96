from datetime import date
from pathlib import Path

import pytest
import requests
from bs4 import BeautifulSoup

from yaweather.config import AppSettings

FIXTURES = Path(__file__).parent / "fixtures"
FULL_URL = "http://full.test/"
MOBILE_URL = "http://mobile.test/"
TODAY = date(2024, 5, 1)  # Wednesday


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeClient:
    """Serves fixture pages by URL prefix and records every request."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def get_document(self, url):
        self.calls.append(url)
        for prefix, page in self.pages.items():
            if url.startswith(prefix):
                if isinstance(page, Exception):
                    raise page
                return BeautifulSoup(load_fixture(page), "html.parser")
        raise requests.HTTPError(f"404 for {url}")


@pytest.fixture
def settings():
    return AppSettings(city="moscow", base_url=FULL_URL, base_url_mobile=MOBILE_URL, color=False)


@pytest.fixture
def client():
    return FakeClient({FULL_URL: "full_page.html", MOBILE_URL: "mobile_page.html"})
