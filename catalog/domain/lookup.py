# catalog/domain/lookup.py
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Wynik zapytania po id: rekord albo brak.
    Brak nie jest bledem na poziomie repo, decyduje wolajacy.
    """

    value: Optional[T] = None

    @classmethod
    def of(cls, value: Optional[T]) -> "Lookup[T]":
        return cls(value)

    @classmethod
    def missing(cls) -> "Lookup[T]":
        return cls(None)

    @property
    def found(self) -> bool:
        return self.value is not None

    def or_raise(self, error: Callable[[], Exception]) -> T:
        if self.value is None:
            raise error()
        return self.value
