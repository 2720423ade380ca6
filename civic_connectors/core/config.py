# civic_connectors/core/config.py

from dotenv import load_dotenv
import os

from .exceptions import InvalidArgumentError

load_dotenv()

DEFAULT_BASE_URL = "https://www.googleapis.com/civicinfo/"
DEFAULT_API_VERSION = "v2"
DEFAULT_TIMEOUT = 10.0


def get_civicinfo_api_key() -> str:
    key = os.getenv("CIVICINFO_API_KEY")
    if not key:
        raise InvalidArgumentError("CIVICINFO_API_KEY manquante. Définir la var d'environnement ou passer la clé au client.")
    return key


def get_base_url() -> str:
    return os.getenv("CIVICINFO_BASE_URL", DEFAULT_BASE_URL)


def get_api_version() -> str:
    return os.getenv("CIVICINFO_API_VERSION", DEFAULT_API_VERSION)


def get_timeout() -> float:
    raw = os.getenv("CIVICINFO_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgumentError(f"CIVICINFO_TIMEOUT invalide : {raw!r} (nombre de secondes attendu).")


def get_verify_tls() -> bool:
    """La vérification TLS reste active sauf désactivation explicite (0, false, no, off)."""
    raw = os.getenv("CIVICINFO_VERIFY_TLS", "true")
    return raw.strip().lower() not in ("0", "false", "no", "off")
