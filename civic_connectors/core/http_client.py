import requests
from typing import Optional, Tuple
from .exceptions import TransportError
from .logger import get_logger
from .utils import redact_key

logger = get_logger(__name__)

class HTTPClient:
    """Transport HTTP synchrone basé sur requests."""

    def __init__(self, timeout: float = 10.0, verify: bool = True):
        self.timeout = timeout
        self.verify = verify

    def fetch(self, url: str, api_key: Optional[str] = None) -> Tuple[int, str]:
        """
        GET sur une URL complète.
        La clé API est masquée dans les erreurs (les logs sont filtrés par le logger).
        Le code de statut n'est pas interprété ici : retourne (status_code, texte brut).
        """
        logger.debug(f"➡️ GET {url} | verify={self.verify} timeout={self.timeout}")
        try:
            response = requests.get(url, timeout=self.timeout, verify=self.verify)
        except requests.RequestException as e:
            logger.error(f"Requests Error on {url}: {type(e).__name__}")
            raise TransportError(f"Erreur requests: {redact_key(str(e), api_key)}") from e
        logger.debug(f"⬅️ Response {response.status_code}: {response.text[:300]}")
        return response.status_code, response.text
