from __future__ import annotations

import logging

import httpx
import pytest

from dialopts import DialSettings, settings_from_options
from dialopts import options
from dialopts.config_types import ImpersonationConfig
from dialopts.errors import (
    HTTPClientWithQuotaProjectError,
    ImpersonationWithoutScopesError,
    MultipleCredentialsError,
    ValidationError,
)


class _FakeTokenSource:
    def token(self) -> str:
        return "token"


def test_settings_from_no_options() -> None:
    assert settings_from_options() == DialSettings()


def test_scalar_options_last_write_wins() -> None:
    ds = settings_from_options(
        options.with_endpoint("https://a.example.test"),
        options.with_user_agent("ua/1"),
        options.with_endpoint("https://b.example.test"),
        options.with_quota_project("proj-1"),
        options.with_request_reason("audit"),
    )
    assert ds.endpoint == "https://b.example.test"
    assert ds.user_agent == "ua/1"
    assert ds.quota_project == "proj-1"
    assert ds.request_reason == "audit"


def test_fields_populated_by_options() -> None:
    ts = _FakeTokenSource()
    ds = settings_from_options(
        options.with_default_endpoint("https://default.example.test"),
        options.with_default_mtls_endpoint("https://mtls.example.test"),
        options.with_scopes("scope-a", "scope-b"),
        options.with_token_source(ts),
        options.with_credentials_file("f.json"),
        options.with_telemetry_disabled(),
        options.with_custom_claims({"aud": "x"}),
    )
    assert ds.default_endpoint == "https://default.example.test"
    assert ds.default_mtls_endpoint == "https://mtls.example.test"
    assert ds.scopes == ["scope-a", "scope-b"]
    assert ds.token_source is ts
    assert ds.credentials_file == "f.json"
    assert ds.telemetry_disabled is True
    assert ds.custom_claims == {"aud": "x"}


def test_custom_claims_are_copied() -> None:
    claims = {"aud": "x"}
    ds = settings_from_options(options.with_custom_claims(claims))
    claims["aud"] = "y"
    assert ds.custom_claims == {"aud": "x"}


def test_settings_from_options_raises_first_conflict() -> None:
    with httpx.Client() as client:
        with pytest.raises(HTTPClientWithQuotaProjectError, match="with_quota_project"):
            settings_from_options(options.with_http_client(client), options.with_quota_project("proj-1"))


def test_settings_from_options_credentials_conflict() -> None:
    with pytest.raises(ValidationError) as exc:
        settings_from_options(options.with_api_key("key"), options.with_credentials_json(b"{}"))
    assert isinstance(exc.value, MultipleCredentialsError)


def test_impersonation_option() -> None:
    cfg = ImpersonationConfig(target="sa@example.iam", delegates=("d@example.iam",))
    with pytest.raises(ImpersonationWithoutScopesError):
        settings_from_options(options.impersonate_credentials(cfg))

    ds = settings_from_options(options.impersonate_credentials(cfg), options.with_scopes("scope-a"))
    assert ds.impersonation_config is cfg


def test_skip_validation_option(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="dialopts")
    ds = settings_from_options(
        options.skip_validation(),
        options.without_authentication(),
        options.with_api_key("key"),
    )
    assert ds.no_auth is True
    assert ds.api_key == "key"
    assert "validation skipped" in caplog.text


def test_apply_options_mutates_given_settings() -> None:
    ds = DialSettings(scopes=["scope-a"])
    out = options.apply_options(ds, [options.with_audiences("aud")])
    assert out is ds
    assert ds.audiences == ["aud"]
    assert ds.validate() is not None


def test_reused_list_option_gives_each_record_its_own_list() -> None:
    opt = options.with_scopes("scope-a")
    a = settings_from_options(opt)
    b = settings_from_options(opt)
    a.scopes.append("scope-b")
    assert b.scopes == ["scope-a"]

    aud = options.with_audiences("aud")
    c = settings_from_options(aud)
    d = settings_from_options(aud)
    c.audiences.clear()
    assert d.audiences == ["aud"]


def test_package_logger_has_null_handler() -> None:
    handlers = logging.getLogger("dialopts").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
