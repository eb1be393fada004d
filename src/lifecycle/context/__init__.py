"""Per-invocation context container."""

from .container import ContextContainer, create_context_container

__all__ = [
    "ContextContainer",
    "create_context_container",
]
