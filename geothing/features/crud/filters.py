"""Present/absent wrapper for optional filter values."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Opt(Generic[T]):
    """A filter value that is either present or absent.

    ``Opt.of(0)`` and ``Opt.of(False)`` are present filters; only
    ``Opt.absent()`` leaves the predicate out of the result set selection.
    """

    present: bool = False
    value: T | None = None

    def __post_init__(self) -> None:
        if self.present and self.value is None:
            raise ValueError("a present filter needs a value, use Opt.absent()")

    @classmethod
    def of(cls, value: T) -> "Opt[T]":
        return cls(present=True, value=value)

    @classmethod
    def absent(cls) -> "Opt[T]":
        return cls()

    @classmethod
    def from_optional(cls, value: T | None) -> "Opt[T]":
        """Wrap a value where None means the caller omitted the filter."""
        return cls.absent() if value is None else cls.of(value)

    def to_param(self) -> T | None:
        """Value bound to the query: the filter value, or SQL NULL when absent."""
        return self.value if self.present else None


ABSENT: Opt = Opt()
