"""Token capability consumed by TokenAmount."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Token(Protocol):
    """Standard interface for a token.

    ``decimals`` fixes the scale of every amount of this token. ``equals`` is
    the only identity check token-math performs; address and decimals alone
    are not assumed to identify a token.
    """

    address: str
    decimals: int

    def equals(self, other: Any) -> bool: ...
