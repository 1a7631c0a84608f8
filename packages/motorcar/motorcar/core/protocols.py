"""motorcar: Protocol Definitions
---------------------------------------------------------
Defines the structural contract that every engine variant satisfies. A Car only
ever talks to its engine through this contract, so new variants can be added
without touching the Car.

Public API
----------
``EngineBase`` : Protocol for engine variants (start, stop, type)
``DescribedEngine`` : EngineBase plus registry metadata (name, description)
``Echo`` : Type of the line sink engines and cars write their messages to

Notes
-----
- Duck typing is supported; variants need not inherit from these protocols
- ``isinstance(obj, EngineBase)`` checks structure only, not behavior
- A Car needs only ``EngineBase``; metadata is optional and read by the CLI

"""

from collections.abc import Callable
from typing import Any, ClassVar, Protocol, runtime_checkable

__all__ = [
    "EngineBase",
    "DescribedEngine",
    "Echo",
]

Echo = Callable[[str], Any]


@runtime_checkable
class EngineBase(Protocol):
    """Protocol for engine variants.

    Engine classes must define:
    - start() / stop() - Emit one line announcing the transition
    - type() - Return a stable human-readable label

    Variants created through the registry are built with an ``echo`` keyword
    argument (a line sink, possibly None) and should accept it.

    Examples
    --------
    >>> class SteamEngine:
    ...     def start(self): print("Steam engine is starting...")
    ...     def stop(self): print("Steam engine is stopping...")
    ...     def type(self): return "Steam Engine"
    >>> isinstance(SteamEngine(), EngineBase)
    True

    """

    def start(self) -> None:
        """Announce that the engine has started."""
        ...

    def stop(self) -> None:
        """Announce that the engine has stopped."""
        ...

    def type(self) -> str:
        """Return the variant label, e.g. ``"Petrol Engine"``.

        Must be pure: repeated calls return the identical string.
        """
        ...


@runtime_checkable
class DescribedEngine(EngineBase, Protocol):
    """Engine that also carries registry metadata.

    - name: ClassVar[str] - Registry key for the variant
    - description: ClassVar[str] - Human-readable description (can be empty)
    """

    name: ClassVar[str]
    description: ClassVar[str]
