"""Scene description: ambient light, camera, lights and objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from minirt.vector import Vec


class ObjectType(Enum):
    """Kinds of geometric objects a scene may hold."""

    SPHERE = auto()
    PLANE = auto()
    SQUARE = auto()
    TRIANGLE = auto()
    CYLINDER = auto()


@dataclass
class Ambient:
    """Ambient lighting; ``count`` records how many were declared."""

    color: Vec = field(default_factory=Vec)
    ratio: float = 0.0
    count: int = 0


@dataclass
class Camera:
    """Viewpoint; ``count`` records how many were declared."""

    center: Vec = field(default_factory=Vec)
    direction: Vec = field(default_factory=Vec)
    fov: float = 0.0
    count: int = 0


@dataclass
class Light:
    """A point light source."""

    source: Vec = field(default_factory=Vec)
    ratio: float = 0.0
    color: Vec = field(default_factory=Vec)


@dataclass
class SceneObject:
    """A renderable object; ``diameter`` and ``height`` apply where relevant."""

    kind: ObjectType = ObjectType.SPHERE
    center: Vec = field(default_factory=Vec)
    direction: Vec = field(default_factory=Vec)
    diameter: float = 0.0
    height: float = 0.0
    color: Vec = field(default_factory=Vec)
    normal: Vec = field(default_factory=Vec)


@dataclass
class Scene:
    """A complete scene. Newly added objects and lights go to the front."""

    color: Vec = field(default_factory=Vec)
    camera: Camera = field(default_factory=Camera)
    lights: list[Light] = field(default_factory=list)
    ambient: Ambient = field(default_factory=Ambient)
    objects: list[SceneObject] = field(default_factory=list)

    def add_object(self, obj: SceneObject) -> SceneObject:
        """Put ``obj`` at the front of the object list and return it."""
        self.objects.insert(0, obj)
        return obj

    def add_light(self, light: Light) -> Light:
        """Put ``light`` at the front of the light list and return it."""
        self.lights.insert(0, light)
        return light