from __future__ import annotations

from enum import Enum
from typing import ClassVar


class SettingKey(str, Enum):
    """Keys of the extension side-table. Each key holds exactly one value type."""

    GRPC_CONN = "grpc_conn"


class SettingValue:
    """Base of the values stored in the side-table.

    Subclasses bind themselves to one ``SettingKey`` through ``key`` so a
    typed accessor can check the variant instead of casting blindly.
    """

    key: ClassVar[SettingKey]
