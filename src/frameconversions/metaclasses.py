"""Metaclasses for frameconversions."""

from collections.abc import Iterator
from typing import Any


class FrozenNamespaceMeta(type):
    """Metaclass for constant tables: dict-style access, membership, iteration and immutability.

    Public (non-underscore) class attributes are the entries of the table.
    """

    def __getitem__(cls, key: str) -> Any:
        """Get an entry by name."""
        if key not in cls:
            msg = f"{cls.__name__} has no entry '{key}'."
            raise KeyError(msg)
        return getattr(cls, key)

    def __contains__(cls, key: object) -> bool:
        """Check whether an entry exists."""
        return isinstance(key, str) and not key.startswith("_") and key in cls.__dict__

    def __iter__(cls) -> Iterator[str]:
        """Iterate over the entry names in definition order."""
        return (key for key in cls.__dict__ if not key.startswith("_"))

    def __len__(cls) -> int:
        """Number of entries."""
        return sum(1 for _ in cls)

    def __setattr__(cls, key: str, value: Any) -> None:
        """Prevent modification of attributes."""
        msg = f"{cls.__name__} is immutable."
        raise TypeError(msg)

    def __delattr__(cls, _: str) -> None:
        """Prevent deletion of attributes."""
        msg = f"{cls.__name__} is immutable."
        raise TypeError(msg)

    def __call__(cls, *_: Any, **__: Any) -> Any:
        """Prevent instantiation."""
        msg = f"{cls.__name__} cannot be instantiated."
        raise TypeError(msg)
