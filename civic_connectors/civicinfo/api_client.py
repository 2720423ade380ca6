# civic_connectors/civicinfo/api_client.py

from typing import Optional, Tuple, Dict, Any, Sequence, Union
from urllib.parse import quote

from civic_connectors.core import config
from civic_connectors.core.exceptions import APIError, InvalidArgumentError, InvalidStateError
from civic_connectors.core.http_client import HTTPClient
from civic_connectors.core.logger import get_logger
from civic_connectors.core.utils import encode_query_string
from civic_connectors.civicinfo.schema import CivicInfoResponse

logger = get_logger(__name__)

Request = Tuple[str, Dict[str, Any]]
Levels = Union[str, Sequence[str], None]


class BaseCivicInfoClient:
    """
    Partie commune aux clients synchrone et asynchrone de l'API Civic Information.

    Gère la clé API, la construction des URLs, la validation des paramètres
    et l'accès au dernier résultat. Le transport HTTP est fourni par la sous-classe.

    Endpoints:
     - elections                   https://developers.google.com/civic-information/docs/v2/elections/electionQuery
     - voterinfo                   https://developers.google.com/civic-information/docs/v2/elections/voterInfoQuery
     - representatives             https://developers.google.com/civic-information/docs/v2/representatives/representativeInfoByAddress
     - representatives/{ocdId}     https://developers.google.com/civic-information/docs/v2/representatives/representativeInfoByDivision
     - divisions                   https://developers.google.com/civic-information/docs/v2/divisions/search
    """

    def __init__(self, api_key: str,
                 base_url: Optional[str] = None,
                 api_version: Optional[str] = None,
                 timeout: Optional[float] = None,
                 verify_tls: Optional[bool] = None,
                 raise_for_status: bool = False):
        self.api_key = api_key
        self.base_url = (base_url or config.get_base_url()).rstrip("/") + "/"
        self.api_version = (api_version or config.get_api_version()).strip("/")
        self.timeout = timeout if timeout is not None else config.get_timeout()
        self.verify_tls = verify_tls if verify_tls is not None else config.get_verify_tls()
        self.raise_for_status = raise_for_status

        if not self.verify_tls:
            logger.warning("Vérification TLS désactivée pour %s : connexion non sécurisée.", self.base_url)

        self._request_url: Optional[str] = None
        self._last_response: Optional[CivicInfoResponse] = None

    @classmethod
    def from_env(cls, **kwargs):
        """Construit le client avec la clé lue dans CIVICINFO_API_KEY (.env accepté)."""
        return cls(config.get_civicinfo_api_key(), **kwargs)

    # ---------------- Clé API ----------------
    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str):
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError("Your API key is required and must be a string.")
        self._api_key = value

    def set_key(self, api_key: str):
        self.api_key = api_key
        return self

    # ---------------- Validation utilitaires ----------------
    @staticmethod
    def _require_text(value: Any, message: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError(message)
        return value

    # ---------------- Construction des URLs ----------------
    def build_request_url(self, endpoint_path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Assemble l'URL : base + version + '/' + endpoint + '/?' + query string.
        La clé API est ajoutée en dernier et remplace un éventuel 'key' fourni.
        """
        query = dict(params or {})
        query.pop("key", None)
        query["key"] = self.api_key
        return f"{self.base_url}{self.api_version}/{endpoint_path}/?{encode_query_string(query)}"

    def _elections_request(self) -> Request:
        return "elections", {}

    def _voter_info_request(self, address: str, election_id: Optional[str] = None,
                            official_only: bool = False) -> Request:
        self._require_text(address, "Address is required.")
        params: Dict[str, Any] = {"address": address}
        # nom documenté par l'API : electionId (et non electionID)
        if election_id is not None and str(election_id).strip():
            params["electionId"] = str(election_id)
        if official_only is True:
            params["officialOnly"] = True
        return "voterinfo", params

    def _representatives_by_address_request(self, address: str, levels: Levels = None, roles: Levels = None,
                                            include_offices: Optional[bool] = None) -> Request:
        self._require_text(address, "Address is required.")
        params = {"address": address, "levels": levels, "roles": roles, "includeOffices": include_offices}
        return "representatives", params

    def _representatives_by_division_request(self, ocd_id: str, levels: Levels = None, roles: Levels = None,
                                             recursive: Optional[bool] = None) -> Request:
        self._require_text(ocd_id, "ocdID is required.")
        # l'identifiant OCD contient des '/' et ':' : encodé avant concaténation au chemin
        endpoint = "representatives/" + quote(ocd_id, safe="")
        return endpoint, {"levels": levels, "roles": roles, "recursive": recursive}

    def _search_request(self, query: str) -> Request:
        self._require_text(query, "Query is required.")
        return "divisions", {"query": query}

    def _prepare(self, request: Request) -> str:
        endpoint, params = request
        self._request_url = self.build_request_url(endpoint, params)
        logger.debug("GET %s | url=%s", endpoint, self._request_url)
        return self._request_url

    def _store_response(self, url: str, status_code: int, text: str) -> CivicInfoResponse:
        response = CivicInfoResponse(url=url, status_code=status_code, text=text)
        if self.raise_for_status and not response.ok:
            logger.error("API Error %s on %s", status_code, url)
            raise APIError(f"HTTP {status_code}: {text}")
        self._last_response = response
        return response

    # ---------------- Accès au dernier résultat ----------------
    def get_request_url(self) -> str:
        """Utilitaire pour vérifier quelle requête HTTP a été construite."""
        if self._request_url:
            return self._request_url
        raise InvalidStateError("Request URL Not Set.")

    def get_last_response(self) -> CivicInfoResponse:
        if self._last_response is None:
            raise InvalidStateError("No JSON result to return.")
        return self._last_response

    def get_json(self) -> str:
        return self.get_last_response().json_text()

    def get_object(self) -> Any:
        if self._last_response is None:
            raise InvalidStateError("No JSON result to return as object.")
        return self._last_response.to_object()

    def get_mapping(self) -> Any:
        if self._last_response is None:
            raise InvalidStateError("No JSON result to return as mapping.")
        return self._last_response.to_mapping()


class CivicInfoClient(BaseCivicInfoClient):
    """
    Client synchrone pour l'API Google Civic Information (v2).

    Chaque méthode de requête construit l'URL, exécute le GET et retourne
    un CivicInfoResponse immuable. Le dernier résultat reste aussi accessible via
    get_request_url() / get_json() / get_object() / get_mapping().

    Une instance n'est pas prévue pour être partagée entre threads.
    """

    def __init__(self, api_key: str, http_client: Optional[HTTPClient] = None, **kwargs):
        super().__init__(api_key, **kwargs)
        # HTTPClient wrapper (testable / injectable)
        self.http = http_client if http_client is not None else HTTPClient(timeout=self.timeout,
                                                                          verify=self.verify_tls)

    def execute(self) -> CivicInfoResponse:
        """
        Exécute le GET sur la dernière URL construite.
        En cas d'échec du transport, le résultat précédent est conservé.
        """
        url = self.get_request_url()
        status_code, text = self.http.fetch(url, api_key=self.api_key)
        return self._store_response(url, status_code, text)

    def _query(self, request: Request) -> CivicInfoResponse:
        self._prepare(request)
        return self.execute()

    # ---------------- Endpoints ----------------
    def list_elections(self) -> CivicInfoResponse:
        """Liste des élections disponibles."""
        return self._query(self._elections_request())

    def voter_info(self, address: str, election_id: Optional[str] = None,
                   official_only: bool = False) -> CivicInfoResponse:
        """
        Informations utiles à un électeur selon son adresse d'inscription.
        electionId n'est envoyé que s'il est fourni, officialOnly uniquement s'il vaut True.
        """
        return self._query(self._voter_info_request(address, election_id, official_only))

    def representatives_by_address(self, address: str, levels: Levels = None, roles: Levels = None,
                                   include_offices: Optional[bool] = None) -> CivicInfoResponse:
        """Géographie politique et représentants pour une adresse."""
        return self._query(self._representatives_by_address_request(address, levels, roles, include_offices))

    def representatives_by_division(self, ocd_id: str, levels: Levels = None, roles: Levels = None,
                                    recursive: Optional[bool] = None) -> CivicInfoResponse:
        """Représentants d'une division géographique (identifiant OCD)."""
        return self._query(self._representatives_by_division_request(ocd_id, levels, roles, recursive))

    def search(self, query: str) -> CivicInfoResponse:
        """
        Recherche de divisions politiques par nom ou par identifiant OCD.
        Pour une correspondance exacte sur un ocdId, le passer comme chaîne littérale.
        """
        return self._query(self._search_request(query))
