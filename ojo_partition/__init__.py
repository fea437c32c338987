"""Union-find over hashable elements, with iteration over the members of each part."""

__version__ = "0.1.1"
__all__ = ["partition"]