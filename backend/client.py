# client.py
import os
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_URL = os.getenv("FACTS_API_URL", "http://127.0.0.1:8000")


class FactsAPIError(RuntimeError):
    def __init__(self, status: int, detail: str):
        super().__init__(f"HTTP {status}: {detail}")
        self.status = status
        self.detail = detail


def _session():
    s = requests.Session()
    # POST is not retried; adding a fact twice would hit the duplicate check
    retry = Retry(total=3, connect=3, read=3, backoff_factor=0.5,
                  status_forcelist=[502, 503, 504],
                  allowed_methods=["GET"])
    adapter = HTTPAdapter(max_retries=retry, pool_connections=4, pool_maxsize=8)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


class FactsClient:
    def __init__(self, base_url: str = DEFAULT_URL, token: Optional[str] = None,
                 timeout=(5, 30), session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or _session()

    def _check(self, r: requests.Response) -> dict:
        if r.status_code >= 400:
            # Surface useful info
            try:
                body = r.json()
                detail = body.get("detail", r.text[:500]) if isinstance(body, dict) else r.text[:500]
            except ValueError:
                detail = r.text[:500]
            raise FactsAPIError(r.status_code, detail)
        return r.json()

    def health(self) -> dict:
        r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        return self._check(r)

    def random_facts(self, count: int) -> List[str]:
        r = self.session.get(f"{self.base_url}/v1/facts/{count}", timeout=self.timeout)
        return self._check(r)["facts"]

    def add_fact(self, description: str, token: Optional[str] = None) -> dict:
        headers = {"x-token": token or self.token or ""}
        r = self.session.post(f"{self.base_url}/v1/facts/new",
                              json={"description": description},
                              headers=headers, timeout=self.timeout)
        return self._check(r)
