"""Domain layer: entities and value objects. No dependencies on outer layers."""

from abook.domain.entities import Contact

__all__ = ["Contact"]
