from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import (
    ClientCertSourceWithGRPCError,
    GRPCConnWithConnPoolError,
    HTTPClientWithClientCertSourceError,
    HTTPClientWithConnPoolError,
    HTTPClientWithGRPCConnError,
    HTTPClientWithGRPCDialOptionsError,
    HTTPClientWithQuotaProjectError,
    HTTPClientWithRequestReasonError,
    ImpersonationWithoutScopesError,
    MultipleCredentialsError,
    NoAuthWithCredentialsError,
    ScopesWithAudiencesError,
    ValidationError,
)
from .keys import SettingKey

if TYPE_CHECKING:
    from .settings import DialSettings


def credential_fields(ds: DialSettings) -> tuple[str, ...]:
    present = {
        "credentials": ds.credentials is not None,
        "credentials_json": ds.credentials_json is not None,
        "credentials_file": bool(ds.credentials_file),
        "api_key": bool(ds.api_key),
        "token_source": ds.token_source is not None,
    }
    return tuple(name for name, ok in present.items() if ok)


def grpc_fields(ds: DialSettings) -> tuple[str, ...]:
    present = {
        "grpc_conn": ds.is_set(SettingKey.GRPC_CONN),
        "grpc_conn_pool": ds.grpc_conn_pool is not None,
        "grpc_conn_pool_size": ds.grpc_conn_pool_size != 0,
        "grpc_dial_opts": bool(ds.grpc_dial_opts),
    }
    return tuple(name for name, ok in present.items() if ok)


def validate(ds: DialSettings) -> ValidationError | None:
    """Return the first conflict between the options in ``ds``, or None.

    Nothing is raised and ``ds`` is not modified.
    """
    if ds.skip_validation:
        return None

    creds = credential_fields(ds)
    # raw credentials_json alone does not conflict with no_auth
    auth_creds = tuple(name for name in creds if name != "credentials_json")
    if ds.no_auth and auth_creds:
        return NoAuthWithCredentialsError(auth_creds)

    if ds.scopes and ds.audiences:
        return ScopesWithAudiencesError()

    # token_source together with credentials_file stays accepted for backwards compatibility.
    if len(creds) > 1 and set(creds) != {"token_source", "credentials_file"}:
        return MultipleCredentialsError(creds)

    has_grpc_conn = ds.is_set(SettingKey.GRPC_CONN)
    has_pool = ds.grpc_conn_pool is not None
    has_http_client = ds.http_client is not None
    has_cert_source = ds.client_cert_source is not None

    if has_grpc_conn and has_pool:
        return GRPCConnWithConnPoolError()
    if has_http_client and has_pool:
        return HTTPClientWithConnPoolError()
    if has_http_client and has_grpc_conn:
        return HTTPClientWithGRPCConnError()
    if has_http_client and ds.grpc_dial_opts:
        return HTTPClientWithGRPCDialOptionsError()
    if has_http_client and ds.quota_project:
        return HTTPClientWithQuotaProjectError()
    if has_http_client and ds.request_reason:
        return HTTPClientWithRequestReasonError()
    if has_http_client and has_cert_source:
        return HTTPClientWithClientCertSourceError()
    if has_cert_source:
        conflicting = grpc_fields(ds)
        if conflicting:
            return ClientCertSourceWithGRPCError(conflicting)

    imp = ds.impersonation_config
    if imp is not None and not imp.scopes and not ds.scopes:
        return ImpersonationWithoutScopesError()
    return None
