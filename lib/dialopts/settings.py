from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .keys import SettingKey, SettingValue
from .validation import validate

if TYPE_CHECKING:
    import httpx
    from google.auth.credentials import Credentials

    from .config_types import ClientCertSource, ConnPool, ImpersonationConfig, TokenSource
    from .errors import ValidationError

__all__ = ["DialSettings", "SettingKey", "SettingValue"]


@dataclass
class DialSettings:
    """Everything needed to establish a connection with an API service."""

    endpoint: str = ""
    default_endpoint: str = ""
    default_mtls_endpoint: str = ""
    scopes: list[str] = field(default_factory=list)
    token_source: TokenSource | None = None
    credentials: Credentials | None = None
    # if set, token_source is ignored by transports
    credentials_file: str = ""
    credentials_json: bytes | None = None
    user_agent: str = ""
    api_key: str = ""
    audiences: list[str] = field(default_factory=list)
    http_client: httpx.Client | None = None
    grpc_dial_opts: list[tuple[str, Any]] = field(default_factory=list)
    grpc_conn_pool: ConnPool | None = None
    grpc_conn_pool_size: int = 0
    no_auth: bool = False
    telemetry_disabled: bool = False
    client_cert_source: ClientCertSource | None = None
    custom_claims: dict[str, Any] = field(default_factory=dict)
    skip_validation: bool = False
    impersonation_config: ImpersonationConfig | None = None

    # API system parameters
    quota_project: str = ""
    request_reason: str = ""

    _extensions: dict[SettingKey, SettingValue] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def set_setting(self, key: SettingKey, value: SettingValue) -> None:
        # Call from an option's apply(), not from user code.
        if self._extensions is None:
            self._extensions = {}
        self._extensions[key] = value

    def get_setting(self, key: SettingKey) -> tuple[SettingValue | None, bool]:
        if self._extensions is None:
            self._extensions = {}
        if key not in self._extensions:
            return None, False
        return self._extensions[key], True

    def is_set(self, key: SettingKey) -> bool:
        return self._extensions is not None and key in self._extensions

    def validate(self) -> ValidationError | None:
        return validate(self)
