"""Shared helpers used by the configuration layer."""
from .io import read_yaml
from .merge import deep_merge

__all__ = ["read_yaml", "deep_merge"]
