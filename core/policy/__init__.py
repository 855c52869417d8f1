"""Policy generation helpers."""

from .builder import PolicyBuilder, build_policy

__all__ = ["PolicyBuilder", "build_policy"]
