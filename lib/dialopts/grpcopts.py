from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

import grpc

from .keys import SettingKey, SettingValue
from .options import ClientOption
from .settings import DialSettings


@dataclass(frozen=True)
class GRPCConnSetting(SettingValue):
    key: ClassVar[SettingKey] = SettingKey.GRPC_CONN

    value: grpc.Channel

    def apply(self, ds: DialSettings) -> None:
        ds.set_setting(self.key, self)


def get_grpc_conn(ds: DialSettings) -> grpc.Channel | None:
    v, ok = ds.get_setting(SettingKey.GRPC_CONN)
    if not ok or not isinstance(v, GRPCConnSetting):
        return None
    return v.value


@dataclass(frozen=True)
class _GRPCDialOption:
    opt: tuple[str, Any]

    def apply(self, ds: DialSettings) -> None:
        ds.grpc_dial_opts.append(self.opt)


@dataclass(frozen=True)
class _GRPCConnectionPool:
    size: int

    def apply(self, ds: DialSettings) -> None:
        ds.grpc_conn_pool_size = self.size


def with_grpc_conn(conn: grpc.Channel) -> ClientOption:
    """Use ``conn`` as the basis of communications instead of dialing one.

    Only for services that support gRPC. Takes precedence over the other
    transport options.
    """
    return GRPCConnSetting(conn)


def with_grpc_dial_option(name: str, value: Any) -> ClientOption:
    """Append a channel option, e.g. ("grpc.max_receive_message_length", 1 << 24)."""
    return _GRPCDialOption((name, value))


def with_grpc_connection_pool(size: int) -> ClientOption:
    """Balance requests over a pool of ``size`` gRPC channels.

    Experimental; may change or be removed.
    """
    return _GRPCConnectionPool(int(size))
