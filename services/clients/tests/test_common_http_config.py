# services/clients/tests/test_common_http_config.py
"""Tests für die HTTP-Konfiguration des Core-API-Clients."""

import httpx
import pytest

from config.settings import create_test_settings
from services.clients.common.http_config import (
    HTTPClientConfig,
    create_httpx_client_config,
    create_json_headers,
)


class TestHTTPClientConfig:
    """Tests für HTTPClientConfig."""

    def test_default_values(self) -> None:
        """Prüft die Standardwerte."""
        config = HTTPClientConfig()

        assert config.timeout == 30.0
        assert config.connect_timeout == 5.0
        assert config.connection_limit == 100
        assert config.keepalive_connection_limit == 30
        assert config.verify_ssl is True
        assert config.headers == {}

    def test_slots(self) -> None:
        """Prüft, dass HTTPClientConfig __slots__ verwendet."""
        config = HTTPClientConfig()

        with pytest.raises(AttributeError):
            config.dynamic_attribute = "test"  # type: ignore

    def test_from_settings(self) -> None:
        """Prüft, dass Timeout und JSON-Header aus den Settings übernommen werden."""
        config = HTTPClientConfig.from_settings(create_test_settings(core_api_timeout_seconds=2.5))

        assert config.timeout == 2.5
        assert config.connect_timeout == 2.5
        assert config.headers["Accept"] == "application/json"


class TestCreateHttpxClientConfig:
    """Tests für create_httpx_client_config."""

    def test_defaults(self) -> None:
        """Prüft, dass ohne Argumente Timeout und Limits gesetzt werden."""
        result = create_httpx_client_config()

        assert isinstance(result["timeout"], httpx.Timeout)
        assert result["timeout"].read == 30.0
        assert result["timeout"].connect == 5.0
        assert isinstance(result["limits"], httpx.Limits)
        assert result["verify"] is True
        assert "base_url" not in result
        assert "headers" not in result

    def test_base_url_headers_and_overrides(self) -> None:
        """Prüft, dass Base-URL, Headers und Overrides übernommen werden."""
        config = HTTPClientConfig(timeout=12.0, headers={"X-Test": "1"})

        result = create_httpx_client_config(config, base_url="http://core:4000", trust_env=False)

        assert result["base_url"] == "http://core:4000"
        assert result["headers"] == {"X-Test": "1"}
        assert result["timeout"].read == 12.0
        assert result["trust_env"] is False

    def test_result_builds_async_client(self) -> None:
        """Prüft, dass die Konfiguration direkt an httpx.AsyncClient übergeben werden kann."""
        client = httpx.AsyncClient(**create_httpx_client_config(base_url="http://core:4000"))

        assert client.base_url.host == "core"
        assert client.base_url.port == 4000


class TestCreateJsonHeaders:
    """Tests für create_json_headers."""

    def test_default_headers(self) -> None:
        """Prüft die Standard-JSON-Headers."""
        assert create_json_headers() == {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def test_additional_headers(self) -> None:
        """Prüft, dass zusätzliche Headers ergänzt werden."""
        headers = create_json_headers({"X-Request-Id": "abc"})

        assert headers["X-Request-Id"] == "abc"
        assert headers["Accept"] == "application/json"
