"""
motorcar: Engines Subpackage
----------------------------
Built-in engine variants. Registrations are lazy so a variant module is only
imported when a car asks for it by name.

Registry keys
-------------
`petrol` | `electric` | `hybrid`

Factory
-------
>>> from motorcar.core.registry import registry
>>> engine = registry.create("petrol")
"""

from ..core.registry import registry

registry.register_lazy(
    "petrol", "motorcar.engines.petrol:PetrolEngine", tags=["builtin"]
)
registry.register_lazy(
    "electric", "motorcar.engines.electric:ElectricEngine", tags=["builtin"]
)
registry.register_lazy(
    "hybrid", "motorcar.engines.hybrid:HybridEngine", tags=["builtin"]
)

__all__: list[str] = []
