"""
Tagged results returned by the store access services.

Callers branch on ``StoreResult.outcome`` instead of inspecting the shape of
whatever exception the database driver raised.
"""

import enum
from dataclasses import dataclass
from typing import Any


class Outcome(enum.Enum):
    OK = "ok"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StoreResult:
    outcome: Outcome
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def success(cls, value=None):
        return cls(Outcome.OK, value)

    @classmethod
    def duplicate(cls):
        return cls(Outcome.DUPLICATE)

    @classmethod
    def not_found(cls):
        return cls(Outcome.NOT_FOUND)
