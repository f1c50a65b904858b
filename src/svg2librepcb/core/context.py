"""Identifier and clock capabilities threaded through the builders.

Builders never call uuid or datetime themselves. They receive a
GenerationContext carrying an identifier source and a clock, so a test can
inject a fixed sequence and a frozen timestamp and compare whole documents.
"""

import itertools
import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol


class IdentifierSource(Protocol):
    """Supplies globally unique identifiers in canonical UUID text form."""

    def next_id(self) -> str: ...


class RandomIdentifierSource:
    """Random (version 4) UUIDs."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdentifierSource:
    """Deterministic UUID-shaped identifiers.

    Produces 00000000-0000-4000-8000-000000000001, ...0002 and so on.
    Safe to share between threads.

    Example:
        ids = SequentialIdentifierSource()
        ids.next_id()  # '00000000-0000-4000-8000-000000000001'
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = next(self._counter)
        return str(uuid.UUID(f"00000000-0000-4000-8000-{value:012x}"))


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def fixed_clock(timestamp: str) -> Callable[[], str]:
    """Build a clock that always returns the same timestamp."""
    return lambda: timestamp


@dataclass
class GenerationContext:
    """Capabilities shared by every builder of one generation pass.

    Attributes:
        ids: Source of fresh identifiers
        clock: Callable returning the creation timestamp text
    """

    ids: IdentifierSource = field(default_factory=RandomIdentifierSource)
    clock: Callable[[], str] = utc_timestamp

    def new_id(self) -> str:
        """Allocate a fresh identifier."""
        return self.ids.next_id()

    def resolve_id(self, override: str | None) -> str:
        """Use a caller-supplied identifier, or allocate one."""
        if override:
            return override
        return self.new_id()

    def now(self) -> str:
        """Creation timestamp for a document."""
        return self.clock()

    @classmethod
    def deterministic(cls, timestamp: str = "2020-01-01T00:00:00Z") -> "GenerationContext":
        """Context with sequential identifiers and a frozen clock."""
        return cls(ids=SequentialIdentifierSource(), clock=fixed_clock(timestamp))
