"""Tests for environment-driven configuration and context construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from xibo_tools.foundation import ClientCredentialsAuth, CmsContext, NoAuth, XiboSettings, get_settings
from xibo_tools.foundation.config import clear_settings_cache


def test_cms_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CMS_URL", " https://cms.example.com/ ")

    settings = XiboSettings(_env_file=None)

    assert settings.cms_url == "https://cms.example.com"
    assert settings.is_configured
    assert settings.token_url == "https://cms.example.com/api/authorize/access_token"


def test_prefixed_cms_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CMS_URL", raising=False)
    monkeypatch.setenv("XIBO_CMS_URL", "https://other.example.com")

    assert XiboSettings(_env_file=None).cms_url == "https://other.example.com"


def test_unconfigured_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CMS_URL", raising=False)
    monkeypatch.delenv("XIBO_CMS_URL", raising=False)

    settings = XiboSettings(_env_file=None)

    assert settings.cms_url == ""
    assert not settings.is_configured


def test_nested_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XIBO_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("XIBO_LOG_LEVEL", "debug")
    monkeypatch.setenv("XIBO_UPLOAD_DIR", "/tmp/xibo-uploads")

    settings = XiboSettings(_env_file=None)

    assert settings.http.timeout == 5.0
    assert settings.logging.level == "DEBUG"
    assert settings.paths.upload_dir == Path("/tmp/xibo-uploads")


def test_secret_is_masked(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XIBO_CLIENT_SECRET", "s3cret-value")

    settings = XiboSettings(_env_file=None)

    assert settings.client_secret.get_secret_value() == "s3cret-value"
    assert "s3cret-value" not in repr(settings)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CMS_URL", "https://first.example.com")
    first = get_settings()
    monkeypatch.setenv("CMS_URL", "https://second.example.com")

    assert get_settings() is first

    clear_settings_cache()
    assert get_settings().cms_url == "https://second.example.com"


def test_context_uses_client_credentials_when_configured() -> None:
    settings = XiboSettings(_env_file=None, cms_url="https://cms.test", client_id="abc", client_secret="s3cret")

    ctx = CmsContext.from_settings(settings)

    assert isinstance(ctx.auth, ClientCredentialsAuth)
    assert ctx.auth.token_url == "https://cms.test/api/authorize/access_token"
    assert "s3cret" not in ctx.auth.model_dump_json()


def test_context_without_credentials_uses_no_auth() -> None:
    settings = XiboSettings(_env_file=None, cms_url="https://cms.test", client_id="", client_secret="")

    assert isinstance(CmsContext.from_settings(settings).auth, NoAuth)
