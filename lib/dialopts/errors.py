from __future__ import annotations


class DialOptsError(Exception):
    """Base dialopts error."""


class ValidationError(DialOptsError):
    """Conflicting dial settings.

    ``settings`` names the fields of ``DialSettings`` that conflict.
    """

    message = "invalid dial settings"
    settings: tuple[str, ...] = ()

    def __init__(self, message: str | None = None, settings: tuple[str, ...] | None = None):
        super().__init__(message or self.message)
        if settings is not None:
            self.settings = settings


class NoAuthWithCredentialsError(ValidationError):
    message = "without_authentication is incompatible with any option that provides credentials"

    def __init__(self, credential_fields: tuple[str, ...]):
        super().__init__(
            f"{self.message}: {', '.join(credential_fields)}",
            ("no_auth", *credential_fields),
        )


class ScopesWithAudiencesError(ValidationError):
    message = "with_scopes is incompatible with with_audiences"
    settings = ("scopes", "audiences")


class MultipleCredentialsError(ValidationError):
    message = "multiple credential options provided"

    def __init__(self, fields: tuple[str, ...]):
        super().__init__(f"{self.message}: {', '.join(fields)}", fields)


class GRPCConnWithConnPoolError(ValidationError):
    message = "with_grpc_conn is incompatible with with_conn_pool"
    settings = ("grpc_conn", "grpc_conn_pool")


class HTTPClientWithConnPoolError(ValidationError):
    message = "with_http_client is incompatible with with_conn_pool"
    settings = ("http_client", "grpc_conn_pool")


class HTTPClientWithGRPCConnError(ValidationError):
    message = "with_http_client is incompatible with with_grpc_conn"
    settings = ("http_client", "grpc_conn")


class HTTPClientWithGRPCDialOptionsError(ValidationError):
    message = "with_http_client is incompatible with gRPC dial options"
    settings = ("http_client", "grpc_dial_opts")


class HTTPClientWithQuotaProjectError(ValidationError):
    message = "with_http_client is incompatible with with_quota_project"
    settings = ("http_client", "quota_project")


class HTTPClientWithRequestReasonError(ValidationError):
    message = "with_http_client is incompatible with with_request_reason"
    settings = ("http_client", "request_reason")


class HTTPClientWithClientCertSourceError(ValidationError):
    message = "with_http_client is incompatible with with_client_cert_source"
    settings = ("http_client", "client_cert_source")


class ClientCertSourceWithGRPCError(ValidationError):
    message = (
        "with_client_cert_source is currently only supported for HTTP. "
        "gRPC settings are incompatible"
    )

    def __init__(self, grpc_fields: tuple[str, ...]):
        super().__init__(
            f"{self.message}: {', '.join(grpc_fields)}",
            ("client_cert_source", *grpc_fields),
        )


class ImpersonationWithoutScopesError(ValidationError):
    message = "impersonate_credentials requires scopes being provided"
    settings = ("impersonation_config", "scopes")
