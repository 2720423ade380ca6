# civic_connectors/civicinfo/async_client.py

from typing import Optional

from civic_connectors.core.httpx_client import AsyncHTTPClient
from civic_connectors.civicinfo.api_client import BaseCivicInfoClient, Levels, Request
from civic_connectors.civicinfo.schema import CivicInfoResponse


class AsyncCivicInfoClient(BaseCivicInfoClient):
    """
    Variante asynchrone (httpx) de CivicInfoClient, même contrat.

    S'utilise de préférence dans un bloc 'async with' pour fermer la connexion.
    """

    def __init__(self, api_key: str, http_client: Optional[AsyncHTTPClient] = None, **kwargs):
        super().__init__(api_key, **kwargs)
        self.http = http_client if http_client is not None else AsyncHTTPClient(timeout=self.timeout,
                                                                               verify=self.verify_tls)

    async def execute(self) -> CivicInfoResponse:
        url = self.get_request_url()
        status_code, text = await self.http.fetch(url, api_key=self.api_key)
        return self._store_response(url, status_code, text)

    async def _query(self, request: Request) -> CivicInfoResponse:
        self._prepare(request)
        return await self.execute()

    # ---------------- Endpoints ----------------
    async def list_elections(self) -> CivicInfoResponse:
        return await self._query(self._elections_request())

    async def voter_info(self, address: str, election_id: Optional[str] = None,
                         official_only: bool = False) -> CivicInfoResponse:
        return await self._query(self._voter_info_request(address, election_id, official_only))

    async def representatives_by_address(self, address: str, levels: Levels = None, roles: Levels = None,
                                         include_offices: Optional[bool] = None) -> CivicInfoResponse:
        return await self._query(self._representatives_by_address_request(address, levels, roles, include_offices))

    async def representatives_by_division(self, ocd_id: str, levels: Levels = None, roles: Levels = None,
                                          recursive: Optional[bool] = None) -> CivicInfoResponse:
        return await self._query(self._representatives_by_division_request(ocd_id, levels, roles, recursive))

    async def search(self, query: str) -> CivicInfoResponse:
        return await self._query(self._search_request(query))

    async def aclose(self):
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
