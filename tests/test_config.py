"""Tests for configuration loading and the startup failure path."""

import pytest

from core.config import DEFAULT_API_URL, SlabConfig, load_config
from core.errors import ConfigError
from tools import mcp_server


class TestLoadConfig:

    def test_token_and_default_url(self):
        config = load_config({"SLAB_API_TOKEN": "abc"})
        assert config == SlabConfig(api_token="abc", api_url=DEFAULT_API_URL)

    def test_custom_url(self):
        config = load_config({"SLAB_API_TOKEN": "abc", "SLAB_API_URL": "https://slab.local/graphql"})
        assert config.api_url == "https://slab.local/graphql"

    def test_blank_url_uses_default(self):
        assert load_config({"SLAB_API_TOKEN": "abc", "SLAB_API_URL": " "}).api_url == DEFAULT_API_URL

    @pytest.mark.parametrize("environ", [{}, {"SLAB_API_TOKEN": ""}, {"SLAB_API_TOKEN": "   "}])
    def test_missing_token(self, environ):
        with pytest.raises(ConfigError, match="SLAB_API_TOKEN environment variable is required"):
            load_config(environ)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SLAB_API_TOKEN", "from-env")
        monkeypatch.delenv("SLAB_API_URL", raising=False)
        assert load_config().api_token == "from-env"


class TestServerStartup:

    def test_missing_token_exits_before_serving(self, monkeypatch, capsys):
        monkeypatch.delenv("SLAB_API_TOKEN", raising=False)
        monkeypatch.setattr("core.config.load_dotenv", lambda: None)
        monkeypatch.setattr(
            mcp_server.mcp, "run", lambda *a, **kw: pytest.fail("server must not start")
        )
        with pytest.raises(SystemExit) as exc_info:
            mcp_server.main()
        assert exc_info.value.code == 1
        assert "SLAB_API_TOKEN environment variable is required" in capsys.readouterr().err

    def test_tools_require_configured_service(self, monkeypatch):
        monkeypatch.setattr(mcp_server, "_service", None)
        with pytest.raises(RuntimeError):
            mcp_server._get_service()
