"""Lookup result type and the MISSING failure sentinel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Lookup", "MISSING"]


class _Missing:
    """Falsy sentinel for a lookup that did not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Lookup:
    """Outcome of resolving a key path.

    ``found`` tells a stored ``False`` or ``None`` apart from an absent key;
    ``value`` is ``MISSING`` whenever ``found`` is False.
    """

    found: bool
    value: Any = MISSING

    @classmethod
    def hit(cls, value: Any) -> Lookup:
        return cls(found=True, value=value)

    @classmethod
    def miss(cls) -> Lookup:
        return cls(found=False)

    def __bool__(self) -> bool:
        return self.found

    def unwrap_or(self, default: Any) -> Any:
        """Return the value if found, otherwise ``default``."""
        return self.value if self.found else default
