"""Shared utilities for Lambda handlers."""
