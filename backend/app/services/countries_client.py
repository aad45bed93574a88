"""REST Countries client used by the public /api/countries routes."""

import httpx
from typing import Optional, Dict, Any, List
from urllib.parse import quote

from app.core.config import settings
from app.core.exceptions import CountryNotFoundError, UpstreamServiceError
from app.core.logging_config import logger


class CountriesClient:
    """
    Thin read-only wrapper around restcountries.com.

    Payloads are returned exactly as the upstream service sends them.
    """

    LIST_FIELDS = "name,population,region,capital,flags,cca3,languages"

    def __init__(self, base_url: str = settings.COUNTRIES_API_URL,
                 timeout: float = settings.COUNTRIES_API_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Tests pass an httpx.MockTransport here
        self.transport = transport

    async def get_all(self) -> List[Dict[str, Any]]:
        """All countries with the fields the country list needs."""
        return await self._get("/all", params={"fields": self.LIST_FIELDS})

    async def get_by_name(self, name: str) -> List[Dict[str, Any]]:
        return await self._get(f"/name/{quote(name)}", query=name)

    async def get_by_region(self, region: str) -> List[Dict[str, Any]]:
        return await self._get(f"/region/{quote(region)}", query=region)

    async def get_by_code(self, code: str) -> Dict[str, Any]:
        """Single country by its cca2/cca3 code."""
        countries = await self._get(f"/alpha/{quote(code)}", query=code)
        if isinstance(countries, list):
            if not countries:
                raise CountryNotFoundError(code)
            return countries[0]
        return countries

    async def get_by_language(self, language: str) -> List[Dict[str, Any]]:
        """
        Countries where any spoken language contains ``language``.

        The upstream API has no language filter, so this fetches everything
        and matches case-insensitively on the language names.
        """
        needle = language.lower()
        countries = await self.get_all()
        return [
            country for country in countries
            if any(needle in str(lang).lower() for lang in (country.get("languages") or {}).values())
        ]

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None,
                   query: Optional[str] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise CountryNotFoundError(query or path)
            logger.error(f"[Countries] {url} returned {e.response.status_code}")
            raise UpstreamServiceError()
        except httpx.HTTPError as e:
            logger.error(f"[Countries] Request to {url} failed: {type(e).__name__}: {e}")
            raise UpstreamServiceError()
