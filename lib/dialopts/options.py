from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from .settings import DialSettings

if TYPE_CHECKING:
    import httpx
    from google.auth.credentials import Credentials

    from .config_types import ClientCertSource, ConnPool, ImpersonationConfig, TokenSource

logger = logging.getLogger(__name__)


class ClientOption(Protocol):
    def apply(self, ds: DialSettings) -> None: ...


@dataclass(frozen=True)
class _Field:
    name: str
    value: Any

    def apply(self, ds: DialSettings) -> None:
        setattr(ds, self.name, self.value)


@dataclass(frozen=True)
class _ListField:
    name: str
    items: tuple[str, ...]

    def apply(self, ds: DialSettings) -> None:
        setattr(ds, self.name, list(self.items))


@dataclass(frozen=True)
class _CustomClaims:
    claims: dict[str, Any]

    def apply(self, ds: DialSettings) -> None:
        ds.custom_claims = dict(self.claims)


def with_endpoint(url: str) -> ClientOption:
    """Override the service endpoint, e.g. "https://example.googleapis.com/"."""
    return _Field("endpoint", url)


def with_default_endpoint(url: str) -> ClientOption:
    return _Field("default_endpoint", url)


def with_default_mtls_endpoint(url: str) -> ClientOption:
    return _Field("default_mtls_endpoint", url)


def with_scopes(*scopes: str) -> ClientOption:
    return _ListField("scopes", scopes)


def with_audiences(*audiences: str) -> ClientOption:
    return _ListField("audiences", audiences)


def with_token_source(ts: TokenSource) -> ClientOption:
    return _Field("token_source", ts)


def with_credentials(creds: Credentials) -> ClientOption:
    return _Field("credentials", creds)


def with_credentials_file(path: str) -> ClientOption:
    return _Field("credentials_file", path)


def with_credentials_json(data: bytes) -> ClientOption:
    return _Field("credentials_json", bytes(data))


def with_api_key(key: str) -> ClientOption:
    return _Field("api_key", key)


def with_user_agent(ua: str) -> ClientOption:
    return _Field("user_agent", ua)


def with_http_client(client: httpx.Client) -> ClientOption:
    """Use ``client`` for all requests. Other transport options are then rejected."""
    return _Field("http_client", client)


def with_conn_pool(pool: ConnPool) -> ClientOption:
    return _Field("grpc_conn_pool", pool)


def without_authentication() -> ClientOption:
    return _Field("no_auth", True)


def with_telemetry_disabled() -> ClientOption:
    return _Field("telemetry_disabled", True)


def with_client_cert_source(source: ClientCertSource) -> ClientOption:
    """Supply a client certificate for mTLS. HTTP only."""
    return _Field("client_cert_source", source)


def with_custom_claims(claims: dict[str, Any]) -> ClientOption:
    return _CustomClaims(dict(claims))


def skip_validation() -> ClientOption:
    return _Field("skip_validation", True)


def impersonate_credentials(cfg: ImpersonationConfig) -> ClientOption:
    return _Field("impersonation_config", cfg)


def with_quota_project(project: str) -> ClientOption:
    return _Field("quota_project", project)


def with_request_reason(reason: str) -> ClientOption:
    return _Field("request_reason", reason)


def apply_options(ds: DialSettings, opts: Iterable[ClientOption]) -> DialSettings:
    n = 0
    for opt in opts:
        opt.apply(ds)
        n += 1
    logger.debug("applied %d client options", n)
    return ds


def settings_from_options(*opts: ClientOption) -> DialSettings:
    """Build settings from ``opts`` and raise the first conflict between them."""
    ds = apply_options(DialSettings(), opts)
    if ds.skip_validation:
        logger.debug("dial settings validation skipped")
    err = ds.validate()
    if err is not None:
        raise err
    return ds
