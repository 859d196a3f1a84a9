from __future__ import annotations

from typing import Dict, Type

from .interface import Dispatcher
from .nearest_idle import NearestIdleCarDispatcher

__all__ = [
    "Dispatcher",
    "NearestIdleCarDispatcher",
    "DISPATCHER_REGISTRY",
    "get_dispatcher",
]


DISPATCHER_REGISTRY: Dict[str, Type[Dispatcher]] = {
    "nearest_idle": NearestIdleCarDispatcher,
}


def get_dispatcher(name: str, **kwargs) -> Dispatcher:
    cls = DISPATCHER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown dispatcher '{name}'. Available: {', '.join(DISPATCHER_REGISTRY)}")
    return cls(**kwargs)
