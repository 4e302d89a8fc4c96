import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import requests

from yaweather import pipeline
from yaweather.config import AppSettings
from yaweather.ingest.page import PageClient
from yaweather.pipeline import ExtractionError, extract
from yaweather.util.http import create_session

from conftest import TODAY, load_fixture

PAGES = {
    "/moscow": "full_page.html",
    "/touch/moscow": "mobile_page.html",
}


class _FixtureHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.server.paths.append(self.path)
        page = PAGES.get(self.path)
        if page is None:
            self.send_error(404)
            return
        body = load_fixture(page).encode("utf-8")
        self.send_response(200)
        # no charset on purpose, requests then assumes ISO-8859-1
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_site():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _FixtureHandler)
    server.paths = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server, f"http://127.0.0.1:{server.server_address[1]}/"
    finally:
        server.shutdown()
        server.server_close()


def test_page_client_decodes_cyrillic_without_charset_header(local_site):
    server, base = local_site
    session = create_session("yaweather-tests", timeout=5)
    doc = PageClient(session).get_document(base + "moscow")
    session.close()
    assert doc.select_one("h1").get_text().strip() == "Погода в Москве"
    # cookie-priming hit, then the real one
    assert server.paths == ["/moscow", "/moscow"]


def test_page_client_raises_on_http_error(local_site):
    _, base = local_site
    session = create_session("yaweather-tests", timeout=5)
    with pytest.raises(requests.HTTPError):
        PageClient(session).get_document(base + "nowhere")
    session.close()


def test_extract_against_local_server(local_site, monkeypatch):
    server, base = local_site
    closed = []

    def tracking_session(*args, **kwargs):
        session = create_session(*args, **kwargs)
        real_close = session.close

        def close():
            closed.append(True)
            real_close()

        session.close = close
        return session

    monkeypatch.setattr(pipeline, "create_session", tracking_session)
    settings = AppSettings(city="moscow", base_url=base, base_url_mobile=base + "touch/", days=3, timeout=5)
    forecast = extract(settings, today=TODAY)

    assert forecast.now.city == "Погода в Москве"
    assert forecast.now.humidity == "63%"
    assert forecast.days[0].desc == "небольшой дождь"
    assert len(forecast.days) == 3
    assert [row.temp for row in forecast.hours] == [2, 0, -1]
    assert sorted(server.paths) == ["/moscow", "/moscow", "/touch/moscow", "/touch/moscow"]
    assert closed == [True]


def test_extract_missing_page_is_fatal(local_site):
    _, base = local_site
    settings = AppSettings(city="atlantis", base_url=base, show_hours=False, timeout=5)
    with pytest.raises(ExtractionError):
        extract(settings, today=TODAY)
