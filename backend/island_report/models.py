from dataclasses import dataclass
from enum import Enum
from typing import Any


class Verdict(str, Enum):
    ok = "OK"
    ko = "KO"


@dataclass(frozen=True)
class ResourceTallyEntry:
    kind: Any
    amount: int


@dataclass(frozen=True)
class EventRecord:
    category: Any
    description: str


@dataclass(frozen=True)
class Budget:
    initial: int
    remaining: int
