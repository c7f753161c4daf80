"""Scene actors: named objects with bounds that can be rendered."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .bounds3 import Bounds3
from .nameable import NameableObject
from .object_list import ObjectListNode

if TYPE_CHECKING:
    from .renderer import Renderer


class Actor(ObjectListNode, NameableObject, ABC):
    """An abstract object placed in a scene."""

    def __init__(self, name: str = "") -> None:
        NameableObject.__init__(self, name)
        self._scene: Any = None

    def scene(self) -> Any:
        """Return the scene owning this actor, or None."""
        return self._scene

    def is_a(self, cls: type) -> bool:
        """Tell whether this actor is an instance of cls."""
        return isinstance(self, cls)

    @abstractmethod
    def bounds(self) -> Bounds3:
        """Return the bounding box of the actor."""

    @abstractmethod
    def render(self, renderer: Renderer) -> None:
        """Draw the actor with renderer."""