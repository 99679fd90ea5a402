"""Test helpers: hypothesis strategies and a call-counting probe.

Keep this file tiny and purpose-built; suites import from here rather than
defining their own container strategies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hypothesis import strategies as st

from castor.option import NONE, Some
from castor.result import Err, Ok

# Hashable, equality-sane payloads (no NaN, so structural equality holds).
payloads = st.one_of(
    st.integers(),
    st.text(max_size=12),
    st.booleans(),
    st.none(),
    st.tuples(st.integers(), st.text(max_size=4)),
)

options = st.one_of(payloads.map(Some), st.just(NONE))
oks = payloads.map(Ok)
errs = payloads.map(Err)
results = st.one_of(oks, errs)

# Total, deterministic functions over arbitrary payloads.
functions = st.sampled_from(
    [
        lambda x: x,
        repr,
        lambda x: (x, x),
        lambda x: type(x).__name__,
        lambda x: [x],
    ]
)


@dataclass
class CallProbe:
    """Callable that records every argument it is invoked with."""

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


def divide(x: float, y: float) -> Ok[float] | Err[str]:
    if y == 0:
        return Err("Cannot divide by zero")
    return Ok(x / y)
