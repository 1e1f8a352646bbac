"""Do-block configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# raise = PatternMatchError, fail = route through the instance's fail()
type MismatchPolicy = Literal["raise", "fail"]

_MISMATCH_POLICIES = ("raise", "fail")


@dataclass(frozen=True, slots=True)
class DoPolicy:
    """
    How a compiled do-block behaves at evaluation time.

    on_mismatch: what happens when a bound or let value does not fit its pattern
    trace: emit structlog debug events for desugaring, steps and mismatches
    """

    on_mismatch: MismatchPolicy = "raise"
    trace: bool = False

    def __post_init__(self) -> None:
        if self.on_mismatch not in _MISMATCH_POLICIES:
            raise ValueError(
                f"DoPolicy.on_mismatch must be one of {_MISMATCH_POLICIES}, got {self.on_mismatch!r}"
            )


DEFAULT_POLICY = DoPolicy()


__all__ = ("DEFAULT_POLICY", "DoPolicy", "MismatchPolicy")
