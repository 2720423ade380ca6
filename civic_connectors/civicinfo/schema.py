from pydantic import BaseModel, Field, ConfigDict
from typing import Any

from civic_connectors.core.utils import parse_json


# --- Réponse brute d'une requête Civic Information ---

class CivicInfoResponse(BaseModel):
    """
    Résultat immuable d'un appel à l'API Civic Information.

    Le corps est conservé tel quel : aucune validation du schéma renvoyé par Google.
    """
    url: str            = Field(..., description="URL complète de la requête (contient la clé API)")
    status_code: int    = Field(..., description="Code de statut HTTP (non interprété)")
    text: str           = Field(..., description="Corps de la réponse, JSON brut")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json_text(self) -> str:
        return self.text

    def to_object(self) -> Any:
        """JSON décodé en valeurs Python génériques (dict, list, scalaires)."""
        return parse_json(self.text)

    def to_mapping(self) -> Any:
        """JSON décodé avec les objets en OrderedDict, dans l'ordre des clés du texte source."""
        return parse_json(self.text, ordered=True)
