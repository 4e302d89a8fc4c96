from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

DEFAULT_TIMEOUT = 30


class TimeoutHTTPAdapter(HTTPAdapter):
    def __init__(self, *args, timeout: float = DEFAULT_TIMEOUT, **kwargs) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request, **kwargs):  # type: ignore[override]
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(user_agent: str, timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """Session with a default socket timeout and no retries: one GET per source."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    adapter = TimeoutHTTPAdapter(timeout=timeout, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
