"""Base class for keyed entities.

An entity is identified by its integer ``id`` alone. The key is fixed at
construction time; everything else on a subclass may change.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Entity:

    id: int

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__} key 'id' cannot be changed"
            )
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))
