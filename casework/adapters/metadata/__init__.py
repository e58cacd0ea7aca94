"""Metadata adapters for enumerating methods and resolving traits.

Implementations:
- TraitRegistry (marker tags, resolved once per type and cached)
"""

from .registry import TraitRegistry

__all__ = ["TraitRegistry"]
