import json
import os
import pytest
from unittest.mock import Mock, AsyncMock

from civic_connectors.civicinfo.api_client import CivicInfoClient
from civic_connectors.civicinfo.async_client import AsyncCivicInfoClient

API_KEY = "123ABC"


def load_text(filename):
    """Charge le JSON brut depuis tests/civicinfo/test_data/"""
    base_dir = os.path.dirname(os.path.abspath(__file__))
    path = os.path.join(base_dir, "test_data", filename)
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def load_json_text():
    return load_text


@pytest.fixture
def client():
    """Client synchrone avec un transport mocké (aucun appel réseau)."""
    http = Mock()
    http.fetch = Mock(return_value=(200, load_text("elections.json")))
    return CivicInfoClient(api_key=API_KEY, http_client=http, verify_tls=True)


@pytest.fixture
def async_client():
    """Client asynchrone avec un transport mocké."""
    http = Mock()
    http.fetch = AsyncMock(return_value=(200, load_text("elections.json")))
    http.aclose = AsyncMock()
    return AsyncCivicInfoClient(api_key=API_KEY, http_client=http, verify_tls=True)
