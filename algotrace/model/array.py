"""
array.py — Array Model
======================
The mutable sequence every sort engine works on.  Engines only touch
the values through compare and swap, so that each mutation lines
up with exactly one emitted event.

Values are integers in the public API, but any values work as long as
the optional `key` function maps them to something orderable (the
stability tests sort tagged tuples by their first element).
"""

import random
from typing import Any, Callable, Iterable, List, Optional

from algotrace.model.base import RunGuardedModel


class ArrayModel(RunGuardedModel):
    """
    Attributes:
        key : Function applied to values before comparing (identity by default).
    """

    def __init__(self, values: Iterable[Any] = (), key: Optional[Callable[[Any], Any]] = None):
        super().__init__()
        self._values: List[Any] = list(values)
        self.key: Callable[[Any], Any] = key if key is not None else _identity

    # ------------------------------------------------------------------
    # Elementary operations
    # ------------------------------------------------------------------
    def greater(self, i: int, j: int) -> bool:
        """True if a[i] > a[j] under the key."""
        return self.key(self._values[i]) > self.key(self._values[j])

    def less_or_equal(self, i: int, j: int) -> bool:
        return not self.greater(i, j)

    def swap(self, i: int, j: int) -> None:
        v = self._values
        v[i], v[j] = v[j], v[i]

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def values(self) -> List[Any]:
        """Snapshot copy of the current contents."""
        return list(self._values)

    def __getitem__(self, i: int) -> Any:
        return self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(list(self._values))

    # ------------------------------------------------------------------
    # Reset / generation
    # ------------------------------------------------------------------
    def reset(self, values: Iterable[Any]) -> None:
        """Load new contents between runs."""
        self._ensure_idle()
        self._values = list(values)

    @classmethod
    def generate_random(
        cls,
        size: int = 20,
        low: int = 1,
        high: int = 100,
        seed: Optional[int] = None,
    ) -> "ArrayModel":
        """Uniform random integers in [low, high], the default bar chart."""
        rng = random.Random(seed)
        return cls(rng.randint(low, high) for _ in range(size))

    def __repr__(self) -> str:
        return f"ArrayModel({self._values!r})"


def _identity(value: Any) -> Any:
    return value
