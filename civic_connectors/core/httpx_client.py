import httpx
from .exceptions import TransportError
from .logger import get_logger
from .utils import redact_key
from typing import Optional, Tuple

logger = get_logger(__name__)


class AsyncHTTPClient:
    """Transport HTTP asynchrone basé sur httpx."""

    def __init__(self, timeout: float = 10.0, verify: bool = True):
        self.timeout = timeout
        self.verify = verify
        # verify est fixé à la création du client httpx
        self._client = httpx.AsyncClient(timeout=timeout, verify=verify)

    async def fetch(self, url: str, api_key: Optional[str] = None) -> Tuple[int, str]:
        logger.debug(f"➡️ GET {url} | verify={self.verify} timeout={self.timeout}")

        try:
            response = await self._client.get(url)

        except httpx.HTTPError as e:
            # Gérer les erreurs de connexion/timeout de httpx
            logger.error(f"HTTPX Error on {url}: {type(e).__name__}")
            raise TransportError(f"Erreur HTTPX: {redact_key(str(e), api_key)}") from e

        logger.debug(f"⬅️ Response {response.status_code}: {response.text[:300]}")
        return response.status_code, response.text

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        """Ouverture du client pour le context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Fermeture propre de la connexion."""
        await self.aclose()
