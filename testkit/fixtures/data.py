"""Deterministic test data: sequential counters and fixed samples.

Nothing here is random. Two TestData instances with the same start value
produce identical sequences, so failures reproduce exactly.
"""

from __future__ import annotations

from typing import Any

SAMPLE_STRINGS: tuple[str, ...] = (
    "alpha",
    "bravo",
    "charlie",
    "delta",
    "echo",
)
SAMPLE_INT = 42
SAMPLE_FLOAT = 3.14
SAMPLE_BOOL = True


class TestData:
    """Sequential value generators for building test inputs.

    Example:
        data = TestData()
        data.next_id()      # 1
        data.next_id()      # 2
        data.next_string()  # "item_1"
        data.next_email()   # "user1@example.com"
    """

    __test__ = False

    def __init__(self, start: int = 1) -> None:
        self.start = start
        self._counters: dict[str, int] = {}

    def next_int(self, name: str) -> int:
        """Next value of the counter called name (start, start + 1, ...)."""
        value = self._counters.get(name, self.start)
        self._counters[name] = value + 1
        return value

    def next_id(self) -> int:
        return self.next_int("id")

    def next_string(self, prefix: str = "item") -> str:
        """prefix_1, prefix_2, ... with an independent counter per prefix."""
        return f"{prefix}_{self.next_int(f'string:{prefix}')}"

    def next_name(self) -> str:
        return f"User {self.next_int('name')}"

    def next_email(self, domain: str = "example.com") -> str:
        return f"user{self.next_int(f'email:{domain}')}@{domain}"

    def reset(self) -> None:
        """Restart every counter at start."""
        self._counters.clear()

    def sample_string(self) -> str:
        return SAMPLE_STRINGS[0]

    def sample_strings(self, count: int) -> list[str]:
        """count values cycling through SAMPLE_STRINGS in order."""
        return [SAMPLE_STRINGS[i % len(SAMPLE_STRINGS)] for i in range(count)]

    def sample_int(self) -> int:
        return SAMPLE_INT

    def sample_float(self) -> float:
        return SAMPLE_FLOAT

    def sample_bool(self) -> bool:
        return SAMPLE_BOOL

    def sample_list(self) -> list[int]:
        return [1, 2, 3]

    def sample_dict(self) -> dict[str, Any]:
        return {"id": 1, "name": "sample", "active": True}
