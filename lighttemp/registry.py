"""Technique auto-discovery and registration.

Imports every public module of lighttemp/techniques/ and keeps those that
define a `technique` object of type Technique, keyed by technique name.
"""

import importlib
import pkgutil

from lighttemp.core.types import Technique

_registry: dict[str, Technique] = {}


def discover() -> dict[str, Technique]:
    """Import all technique modules and return the registry."""
    if _registry:
        return _registry

    import lighttemp.techniques as pkg

    for module_info in pkgutil.iter_modules(pkg.__path__):
        if module_info.name.startswith('_'):
            continue
        module = importlib.import_module(f'{pkg.__name__}.{module_info.name}')
        tech = getattr(module, 'technique', None)
        if isinstance(tech, Technique):
            _registry[tech.name] = tech

    return _registry


def get(name: str) -> Technique:
    """Get a technique by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown technique: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_techniques() -> dict[str, Technique]:
    """Return all registered techniques."""
    return discover()
