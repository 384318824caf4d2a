"""Route group exports."""

from . import clusters, health, hotels

__all__ = ["clusters", "health", "hotels"]
