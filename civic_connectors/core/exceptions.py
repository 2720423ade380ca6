# civic_connectors/core/exceptions.py
class APIError(Exception):
    """Erreur lors de l'appel d'une API externe"""
    pass


class InvalidArgumentError(APIError, ValueError):
    """Argument obligatoire absent, vide ou de mauvais type (clé API, adresse, ...)."""
    pass


class InvalidStateError(APIError, RuntimeError):
    """Accesseur ou exécution appelé avant l'étape qui le prépare."""
    pass


class NetworkOrServerError(APIError):
    """Erreur de connexion ou code de statut non géré (4xx, 5xx)."""
    pass


class TransportError(NetworkOrServerError):
    """Échec du transport HTTP (connexion, TLS, timeout)."""
    pass


class ParseError(APIError, ValueError):
    """Le corps de la réponse n'est pas du JSON valide."""
    pass
