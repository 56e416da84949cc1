import logging
from typing import Any, Dict, Optional

import requests

from tunegrab.core.errors import UpstreamError

logger = logging.getLogger(__name__)


def status_text(resp: requests.Response) -> str:
    """'404 Not Found' style status line."""
    return f"{resp.status_code} {resp.reason}".strip()


class HttpClient:
    """
    Thin JSON client over a requests Session.

    Every failure mode (transport, non-200, undecodable body) surfaces as
    UpstreamError so callers only prefix context.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None,
                 headers: Optional[Dict[str, str]] = None) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(str(e)) from e
        return self._decode(resp)

    def post_form(self, url: str, data: Dict[str, str], auth=None,
                  headers: Optional[Dict[str, str]] = None) -> Any:
        logger.debug("POST %s", url)
        form_headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if headers:
            form_headers.update(headers)
        try:
            resp = self.session.post(url, data=data, auth=auth, headers=form_headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(str(e)) from e
        return self._decode(resp)

    def _decode(self, resp: requests.Response) -> Any:
        if resp.status_code != 200:
            raise UpstreamError(status_text(resp))
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"malformed JSON response: {e}") from e

    def close(self):
        self.session.close()
