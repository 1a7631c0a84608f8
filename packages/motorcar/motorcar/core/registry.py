"""motorcar: Engine Registry
---------------------------
Centralized table of engine variants keyed by name, with a factory interface
used by the CLI and the configuration layer to pick engines by name.

Behavior
--------
- Support eager registration of builders and dotted-path lazy registration;
  lazy targets are imported on first ``create()``.
- Third-party variants are discovered through the ``motorcar.engines`` entry
  point group.

Notes
-----
- Error codes are bracketed in messages. CarRegistryError: [400] duplicate,
  [401] duplicate lazy, [402] import failure, [403] missing attribute,
  [404] construction failure, [405] result is not an engine. CarConfigError:
  [501] unknown name.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from importlib import import_module
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, Optional

from .errors import CarConfigError, CarError, CarRegistryError, get_logger
from .protocols import EngineBase

__all__ = [
    "RegistryCenter",
    "registry",
    "discover_plugins",
]

Builder = Callable[..., Any]

logger = get_logger()


@dataclass
class _Entry:
    """Internal record describing a registry entry."""

    kind: str  # "callable" | "dotted"
    builder: Optional[Builder] = None
    target: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)


class RegistryCenter:
    """Registry of engine variants with factory-style lookup.

    Methods
    -------
    register(name, builder, *, overwrite=False, **meta) -> None
        Register a builder immediately.
    register_lazy(name, target, *, overwrite=False, **meta) -> None
        Register a dotted path for deferred import.
    decorator(name, **meta) -> Callable
        Return a decorator that registers the decorated class on import.
    create(name, /, **kwargs) -> Any
        Resolve and construct a variant.
    list() -> Dict[str, Dict[str, Any]]
        List entries with metadata.

    Examples
    --------
    >>> rc = RegistryCenter()
    >>> rc.register_lazy("petrol", "motorcar.engines.petrol:PetrolEngine")
    >>> rc.create("petrol").type()
    'Petrol Engine'
    """

    def __init__(self) -> None:
        self._table: Dict[str, _Entry] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    @staticmethod
    def _infer_builder_type(builder: Any) -> str:
        if isinstance(builder, type):
            return "class"
        if callable(builder):
            return "function"
        return "object"

    # --------------------------- registration ---------------------------
    def register(
        self, name: str, builder: Builder, *, overwrite: bool = False, **meta: Any
    ) -> None:
        """Register a builder immediately.

        Parameters
        ----------
        name : str
            Public key under which to register the builder (case-insensitive).
        builder : Callable[..., Any]
            Class or function that constructs the engine.
        overwrite : bool, default False
            When False, duplicate keys raise a conflict; when True, existing
            entries are replaced.
        **meta : Any
            Optional metadata stored with the entry (e.g. ``tags``).

        Raises
        ------
        CarRegistryError
            - [400] Duplicate registration when ``overwrite`` is False.

        """
        nm = self._key(name)
        if not overwrite and nm in self._table:
            raise CarRegistryError(f"[400] Duplicate registration: engine:{nm}")
        full_meta = dict(meta or {})
        full_meta.setdefault("registered_at", datetime.now(timezone.utc).isoformat())
        full_meta.setdefault("builder_type", self._infer_builder_type(builder))
        full_meta.setdefault("delayed_import", False)
        self._table[nm] = _Entry(kind="callable", builder=builder, meta=full_meta)
        logger.debug(f"Registered engine '{nm}'")

    def register_lazy(
        self, name: str, target: str, *, overwrite: bool = False, **meta: Any
    ) -> None:
        """Register by dotted path without importing until ``create()``.

        Parameters
        ----------
        name : str
            Public key (case-insensitive).
        target : str
            Dotted path such as ``"pkg.module:ClassName"`` or
            ``"pkg.module.ClassName"``.
        overwrite : bool, default False
            Replace an existing entry instead of raising.
        **meta : Any
            Optional metadata stored with the entry.

        Raises
        ------
        CarRegistryError
            - [401] Duplicate lazy registration when ``overwrite`` is False.

        """
        nm = self._key(name)
        if not overwrite and nm in self._table:
            raise CarRegistryError(f"[401] Duplicate lazy registration: engine:{nm}")
        full_meta = dict(meta or {})
        full_meta.setdefault("registered_at", datetime.now(timezone.utc).isoformat())
        full_meta.setdefault("builder_type", "dotted")
        full_meta.setdefault("delayed_import", True)
        full_meta.setdefault("module_path", target)
        self._table[nm] = _Entry(kind="dotted", target=str(target), meta=full_meta)
        logger.debug(f"Registered engine '{nm}' -> {target}")

    def decorator(self, name: str, **meta: Any):
        """Return a decorator that registers the object on import."""

        def _wrap(obj: Any):
            self.register(name, obj, **meta)
            return obj

        return _wrap

    def unregister(self, name: str) -> None:
        """Remove an entry; unknown names are ignored."""
        self._table.pop(self._key(name), None)

    # --------------------------- factory ---------------------------
    def resolve(self, name: str) -> Builder:
        """Return the builder for ``name`` without invoking it.

        Raises
        ------
        CarConfigError
            - [501] Unknown engine name.
        CarRegistryError
            - [402] Failed to import a lazily registered target.
            - [403] Target not found in the imported module.

        """
        nm = self._key(name)
        entry = self._table.get(nm)
        if entry is None:
            available = ", ".join(sorted(self._table)) or "none"
            raise CarConfigError(
                f"[501] Unknown engine '{nm}' (available: {available})"
            )
        if entry.kind == "callable":
            assert entry.builder is not None
            return entry.builder
        assert entry.target is not None
        try:
            return self._import_target(entry.target)
        except CarRegistryError:
            raise
        except Exception as e:
            raise CarRegistryError(
                f"[402] Failed to import engine '{nm}' from '{entry.target}': {e}"
            ) from e

    def create(self, name: str, /, **kwargs: Any) -> Any:
        """Build the engine registered under ``name``.

        Keyword arguments are forwarded to the builder. Lookup errors follow
        ``resolve()``.

        Raises
        ------
        CarRegistryError
            - [404] The builder raised, e.g. on unexpected keyword arguments.
            - [405] The builder returned something that is not an engine.

        """
        builder = self.resolve(name)
        nm = self._key(name)
        try:
            engine = builder(**kwargs)
        except CarError:
            raise
        except Exception as e:
            raise CarRegistryError(f"[404] Failed to build engine '{nm}': {e}") from e
        if not isinstance(engine, EngineBase):
            raise CarRegistryError(
                f"[405] Engine '{nm}' built {type(engine).__name__}, "
                "which does not implement start, stop and type"
            )
        return engine

    @staticmethod
    def _import_target(target: str) -> Any:
        if ":" in target:
            module_name, attr_name = target.split(":", 1)
        else:
            module_name, _, attr_name = target.rpartition(".")
        mod = import_module(module_name)
        if not hasattr(mod, attr_name):
            raise CarRegistryError(f"[403] Target '{target}' not found")
        return getattr(mod, attr_name)

    # --------------------------- introspection ---------------------------
    def list(self) -> Dict[str, Dict[str, Any]]:
        """List entries with their metadata.

        Returns
        -------
        dict[str, dict[str, Any]]
            Mapping from engine name to a copy of its metadata, plus ``kind``.

        """
        return {
            nm: {"kind": entry.kind, **entry.meta}
            for nm, entry in sorted(self._table.items())
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._table


registry = RegistryCenter()


def discover_plugins(group: str = "motorcar.engines") -> int:
    """Register engine variants advertised through Python entry points.

    Each entry point name becomes the registry key and its ``module:attr``
    value the lazy target. Targets that cannot be imported are logged and
    skipped. Names already registered are left alone.

    Returns
    -------
    int
        Number of newly registered variants.

    """
    count = 0
    for ep in entry_points(group=group):
        if ep.name in registry:
            logger.debug(f"Engine plugin '{ep.name}' shadowed by existing entry")
            continue
        registry.register_lazy(ep.name, ep.value, tags=["plugin"])
        try:
            registry.resolve(ep.name)
        except CarRegistryError as e:
            logger.warning(f"Skipping engine plugin '{ep.name}': {e}")
            registry.unregister(ep.name)
            continue
        count += 1
    return count
