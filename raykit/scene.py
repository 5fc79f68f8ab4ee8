"""Base for objects that build scene elements from parsed scene descriptions."""

from __future__ import annotations

import abc
import enum
from typing import Any


class SceneObjectType(enum.Enum):
    """Kind of element a scene element creator produces."""

    SCENEPROPS = enum.auto()
    CAMERA = enum.auto()
    LIGHT = enum.auto()
    SHADER = enum.auto()
    SHAPE = enum.auto()
    TEXTURE = enum.auto()
    TRANSFORM = enum.auto()
    INSTANCE = enum.auto()
    UNKNOWN_TYPE = enum.auto()


class SceneElementCreator(abc.ABC):
    """Creates scene objects from one named node of a scene tree."""

    def __init__(self, object_type: SceneObjectType = SceneObjectType.UNKNOWN_TYPE) -> None:
        self.object_type = object_type

    @abc.abstractmethod
    def instance(self, element: tuple[str, Any]) -> None:
        """Build the scene object described by a (name, subtree) pair."""