from __future__ import annotations

import logging
from typing import Protocol

import requests
from bs4 import BeautifulSoup

LOGGER = logging.getLogger(__name__)


class DocumentSource(Protocol):
    def get_document(self, url: str) -> BeautifulSoup:  # pragma: no cover - structural contract
        ...


class PageClient:
    """Fetches a weather page and parses it into a queryable document."""

    def __init__(self, session: requests.Session) -> None:
        self.session = session

    def get_document(self, url: str) -> BeautifulSoup:
        # the site sets its cookies on the first hit and serves the page on the second
        self.session.get(url)
        LOGGER.debug("GET %s", url)
        resp = self.session.get(url)
        resp.raise_for_status()
        # bytes, so the page's own <meta charset> wins over the header guess
        return BeautifulSoup(resp.content, "html.parser")
