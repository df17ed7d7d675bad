"""Named generators the host can select from, one per run."""

from typing import Dict, List, Type

from emerald_core.errors import ConfigurationError

_GENERATORS: Dict[str, Type] = {}


def add_generator(name: str, generator_class: Type) -> Type:
    key = name.lower()
    existing = _GENERATORS.get(key)
    if existing is not None and existing is not generator_class:
        raise ConfigurationError(f"Generator '{key}' is already registered by {existing.__name__}")
    _GENERATORS[key] = generator_class
    return generator_class


def get_generator(name: str) -> Type:
    try:
        return _GENERATORS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown generator '{name}' (available: {', '.join(list_generators())})"
        ) from None


def list_generators() -> List[str]:
    return sorted(_GENERATORS)
