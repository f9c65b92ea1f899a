from abc import ABCMeta
from abc import abstractmethod
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from typing import TypeVar

KT = TypeVar("KT")
VT = TypeVar("VT")


class MultiDict(Mapping[KT, VT], metaclass=ABCMeta):
    """
    An append-only sequence of (key, value) fields with a read-only dict view.

    Subclasses decide which keys are equal (`_kconv`) and how the values
    of a repeated key are combined for `md[key]` (`_reduce_values`).
    Field order is insertion order and is never changed.
    """

    fields: tuple[tuple[KT, VT], ...]
    """The fields in insertion order, repeated keys included."""

    def __init__(self, fields: Iterable[tuple[KT, VT]] = ()):
        self.fields = tuple((k, v) for k, v in fields)

    def __repr__(self):
        return f"{type(self).__name__}{list(self.fields)!r}"

    @staticmethod
    @abstractmethod
    def _reduce_values(values: Sequence[VT]) -> VT:
        """Combine all values of one key into the value returned by `md[key]`."""

    @staticmethod
    @abstractmethod
    def _kconv(key: KT) -> KT:
        """Canonical form of a key; keys with the same canonical form are equal."""

    def __getitem__(self, key: KT) -> VT:
        values = self.get_all(key)
        if not values:
            raise KeyError(key)
        return self._reduce_values(values)

    def __iter__(self) -> Iterator[KT]:
        seen = set()
        for key, _ in self.fields:
            canonical = self._kconv(key)
            if canonical not in seen:
                seen.add(canonical)
                yield key

    def __len__(self) -> int:
        return len({self._kconv(key) for key, _ in self.fields})

    def get_all(self, key: KT) -> list[VT]:
        """
        All values for key, in field order.
        Empty if the key is not present.
        """
        key = self._kconv(key)
        return [value for k, value in self.fields if self._kconv(k) == key]

    def add(self, key: KT, value: VT) -> None:
        """Append a field, keeping any existing values for the same key."""
        self.fields += ((key, value),)

    def items(self, multi: bool = False):
        """
        With `multi`, every field in order.
        Otherwise one (first key spelling, reduced value) pair per key.
        """
        if multi:
            return self.fields
        return super().items()
