"""Registry store implementations."""

from rdapview.registry.stores.inmemory import InMemoryRegistryStore

__all__ = ["InMemoryRegistryStore"]
