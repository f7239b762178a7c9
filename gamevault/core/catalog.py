# gamevault/core/catalog.py

import logging
from urllib.parse import quote
import requests
from gamevault.config import Settings
from gamevault.errors import UpstreamError


logger = logging.getLogger(__name__)


# -------------------------------
# RAWG catalog client
# -------------------------------

class CatalogClient:
    """
    Thin client over the RAWG games API. Responses are relayed as-is;
    every failure surfaces as an UpstreamError.
    """

    def __init__(self, api_key: str, base_url: str, page_size: int = 40,
                 timeout: float = 5.0, session: requests.Session | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, session: requests.Session | None = None):
        return cls(
            api_key=settings.rawg_api_key,
            base_url=settings.rawg_base_url,
            page_size=settings.rawg_page_size,
            timeout=settings.upstream_timeout,
            session=session,
        )

    def _get(self, path: str, params: dict):
        url = f"{self.base_url}{path}"
        try:
            return self.session.get(url, params={**params, "key": self.api_key}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Catalog request to %s failed: %s", path, e)
            raise UpstreamError("Unexpected error") from e

    @staticmethod
    def _json(response):
        try:
            return response.json()
        except ValueError as e:
            logger.error("Catalog returned a non-JSON body (status %s)", response.status_code)
            raise UpstreamError("Unexpected error") from e

    def search_games(self, search: str) -> list:
        response = self._get("/games", {"search": search, "page_size": self.page_size})
        if not response.ok:
            logger.warning("Catalog search returned %s", response.status_code)
            raise UpstreamError("Game API error")

        data = self._json(response)
        if not isinstance(data, dict):
            raise UpstreamError("Unexpected error")
        return data.get("results", [])

    def get_game(self, game_id: str) -> dict:
        response = self._get(f"/games/{quote(game_id, safe='')}", {})
        if response.status_code == 404:
            raise UpstreamError("Game not found", status_code=404)
        if not response.ok:
            logger.warning("Catalog lookup of %r returned %s", game_id, response.status_code)
            raise UpstreamError("Game API error")
        return self._json(response)

    def close(self):
        self.session.close()
