"""Typed configuration models for Lambda handlers."""

from .env_vars import HandlerEnvVars, get_handler_env_vars

__all__ = [
    "HandlerEnvVars",
    "get_handler_env_vars",
]
