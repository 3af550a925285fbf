from __future__ import annotations

from typing import Any, Callable, Dict, Optional


_REGISTRY: Dict[str, Callable[..., Any]] = {}


def register(name: str, factory: Optional[Callable[..., Any]] = None):
    """Register a tracking source factory; usable directly or as a class decorator."""
    if factory is not None:
        _REGISTRY[name] = factory
        return factory

    def _decorator(cls):
        _REGISTRY[name] = cls
        return cls

    return _decorator


def get_source(name: str, **kwargs):
    """Build the named source; kwargs (e.g. seed) go to its factory."""
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown tracking source: {name}") from None
    return factory(**kwargs)


def available_sources() -> Dict[str, Callable[..., Any]]:
    return dict(_REGISTRY)
