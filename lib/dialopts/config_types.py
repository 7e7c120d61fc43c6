from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import grpc

ClientCertSource = Callable[[], tuple[bytes, bytes]]


@dataclass(frozen=True)
class ImpersonationConfig:
    target: str
    scopes: tuple[str, ...] = ()
    delegates: tuple[str, ...] = ()


class TokenSource(Protocol):
    def token(self) -> Any: ...


class ConnPool(Protocol):
    """A set of gRPC channels that requests are balanced between."""

    def num(self) -> int: ...

    def conn(self) -> grpc.Channel: ...

    def close(self) -> None: ...
