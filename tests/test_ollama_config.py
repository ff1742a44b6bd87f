"""Tests for Ollama config validation, URL resolution and UI metadata."""

from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from modelgate.core.config import Settings
from modelgate.exceptions import ConfigError
from modelgate.providers.ollama import OllamaConfig, OllamaProvider, resolve_base_url


class TestParseAndValidate:
    """Tests for OllamaProvider.parse_and_validate."""

    def test_empty_defaults_to_local(self):
        config = OllamaProvider.parse_and_validate({})

        assert config == OllamaConfig(mode="local", base_url=None, api_key=None)

    def test_empty_mode_defaults_to_local(self):
        config = OllamaProvider.parse_and_validate({"mode": ""})

        assert config.mode == "local"

    def test_local_with_base_url(self):
        config = OllamaProvider.parse_and_validate(
            {"mode": "local", "baseURL": "http://gpu-box:11434"}
        )

        assert config.mode == "local"
        assert config.base_url == "http://gpu-box:11434"
        assert config.api_key is None

    def test_cloud_with_api_key(self):
        config = OllamaProvider.parse_and_validate({"mode": "cloud", "apiKey": "x"})

        assert config.mode == "cloud"
        assert config.api_key == "x"
        assert config.base_url is None

    def test_cloud_without_api_key(self):
        with pytest.raises(ConfigError, match="API Key is required"):
            OllamaProvider.parse_and_validate({"mode": "cloud"})

    def test_cloud_with_empty_api_key(self):
        with pytest.raises(ConfigError, match="API Key is required"):
            OllamaProvider.parse_and_validate({"mode": "cloud", "apiKey": ""})

    def test_invalid_mode(self):
        with pytest.raises(ConfigError, match="Invalid mode"):
            OllamaProvider.parse_and_validate({"mode": "bogus"})

    @pytest.mark.parametrize("raw", [None, "str", 42, ["mode", "local"]])
    def test_non_mapping_rejected(self, raw):
        with pytest.raises(ConfigError, match="Expected object"):
            OllamaProvider.parse_and_validate(raw)

    def test_values_coerced_to_strings(self):
        config = OllamaProvider.parse_and_validate({"mode": "cloud", "apiKey": 12345})

        assert config.api_key == "12345"

    def test_falsy_values_become_none(self):
        config = OllamaProvider.parse_and_validate({"baseURL": "", "apiKey": None})

        assert config.base_url is None
        assert config.api_key is None

    def test_config_error_is_value_error(self):
        """Test callers catching ValueError still see config errors."""
        with pytest.raises(ValueError):
            OllamaProvider.parse_and_validate({"mode": "bogus"})

    def test_config_is_immutable(self):
        config = OllamaProvider.parse_and_validate({})

        with pytest.raises(FrozenInstanceError):
            config.mode = "cloud"


class TestResolveBaseURL:
    """Tests for resolve_base_url."""

    def test_local_default(self):
        assert resolve_base_url(OllamaConfig(mode="local")) == "http://localhost:11434"

    def test_local_configured(self):
        config = OllamaConfig(mode="local", base_url="http://x:1")

        assert resolve_base_url(config) == "http://x:1"

    def test_cloud_ignores_base_url(self):
        config = OllamaConfig(mode="cloud", base_url="http://x:1", api_key="k")

        assert resolve_base_url(config) == "https://ollama.com"

    def test_docker_env_does_not_change_runtime_default(self):
        with patch(
            "modelgate.providers.ollama.get_settings",
            return_value=Settings(_env_file=None, docker=True),
        ):
            assert resolve_base_url(OllamaConfig()) == "http://localhost:11434"


class TestProviderConfigFields:
    """Tests for the configuration UI schema."""

    def test_field_order_and_types(self):
        fields = OllamaProvider.get_provider_config_fields()

        assert [f.key for f in fields] == ["mode", "baseURL", "apiKey"]
        assert [f.type for f in fields] == ["select", "string", "string"]
        assert all(f.scope == "server" for f in fields)

    def test_mode_field(self):
        mode = OllamaProvider.get_provider_config_fields()[0]

        assert mode.required is True
        assert mode.default == "local"
        assert [o.value for o in mode.options] == ["local", "cloud"]

    def test_env_backed_fields(self):
        _, base_url, api_key = OllamaProvider.get_provider_config_fields()

        assert base_url.env == "OLLAMA_BASE_URL"
        assert base_url.required is False
        assert api_key.env == "OLLAMA_API_KEY"
        assert api_key.placeholder == "ollama_xxxxxxxxxxxxx"

    def test_base_url_placeholder_outside_docker(self):
        with patch(
            "modelgate.providers.ollama.get_settings",
            return_value=Settings(_env_file=None, docker=False),
        ):
            base_url = OllamaProvider.get_provider_config_fields()[1]

        assert base_url.placeholder == "http://localhost:11434"

    def test_base_url_placeholder_in_docker(self):
        with patch(
            "modelgate.providers.ollama.get_settings",
            return_value=Settings(_env_file=None, docker=True),
        ):
            base_url = OllamaProvider.get_provider_config_fields()[1]

        assert base_url.placeholder == "http://host.docker.internal:11434"


class TestProviderMetadata:
    def test_metadata(self):
        metadata = OllamaProvider.get_provider_metadata()

        assert metadata.key == "ollama"
        assert metadata.name == "Ollama"
