import json
import re
from collections import OrderedDict
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .exceptions import ParseError

# --- Fonctions utilitaires d'encodage et de décodage ---

_KEY_PARAM = re.compile(r"([?&]key=)[^&#\s'\"()]+")


def _format_value(value: Any) -> str:
    # l'API attend true/false en minuscules
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    Sérialise un mapping en query string 'cle=valeur&...'.

    - les valeurs None sont ignorées
    - les booléens deviennent 'true' / 'false'
    - une liste (ou tuple) devient un paramètre répété : tag=a&tag=b
      (jamais tag[0]=a&tag[1]=b)
    - les valeurs sont percent-encodées, les espaces deviennent '+'
    """
    if not params:
        return ""

    pairs: List[Tuple[str, str]] = []
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((name, _format_value(v)) for v in value if v is not None)
        else:
            pairs.append((name, _format_value(value)))

    return urlencode(pairs)


def parse_json(text: str, ordered: bool = False) -> Any:
    """
    Décode un texte JSON.
    Avec ordered=True, les objets JSON deviennent des OrderedDict dans l'ordre du texte source.
    """
    try:
        if ordered:
            return json.loads(text, object_pairs_hook=OrderedDict)
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(f"Réponse JSON invalide : {e}") from e


def redact_key(text: str, api_key: Optional[str] = None) -> str:
    """
    Masque la clé API (paramètre key=...) dans une URL ou un message.
    Si api_key est fourni, sa forme encodée est aussi masquée partout dans le texte.
    """
    if api_key:
        text = text.replace(urlencode({"key": api_key}), "key=***")
    return _KEY_PARAM.sub(r"\1***", text)

