from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

Number = Union[int, float, Decimal]


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class ReportType(str, Enum):
    CSV = "CSV"
    HTML = "HTML"


# --- Report input records ---


@dataclass
class Item:
    id: Any
    name: str
    value: Number
    priority: bool | None = None  # None until a role strategy enriches it

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class User:
    name: str
    role: Role | str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
