"""Reading scene descriptions into :class:`~minirt.scene.Scene` objects."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from minirt.scene import Light, ObjectType, Scene, SceneObject
from minirt.textutil import iter_lines, parse_double, parse_int, split_fields
from minirt.vector import Vec

SCENE_SUFFIX = ".rt"


class SceneError(ValueError):
    """Raised when a scene file or one of its lines is invalid."""


def check_file(args: Sequence[str]) -> str:
    """Validate command-line arguments and return the scene path.

    Exactly one argument must follow the program name, it must end in
    ``.rt`` with at least one character before the suffix, and the file
    must be readable.
    """
    if len(args) != 2 or not args[1]:
        raise SceneError("Invalid file (e.g., scene.rt)")
    path = args[1]
    if len(path) < 4 or not path.endswith(SCENE_SUFFIX):
        raise SceneError("Invalid file (e.g., scene.rt)")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise SceneError("Invalid file (e.g., scene.rt)") from exc
    return path


def _triple(text: str | None, what: str) -> Vec:
    if text is None:
        raise SceneError(f"Invalid {what} format")
    parts = split_fields(text, ",")
    if len(parts) != 3:
        raise SceneError(f"Invalid {what} format")
    return Vec(*(parse_double(part) for part in parts))


def parse_color(text: str | None) -> Vec:
    """Parse ``R,G,B`` with each component in [0, 255]."""
    color = _triple(text, "color")
    if any(c < 0 or c > 255 for c in color):
        raise SceneError("Color values must be in [0, 255]")
    return color


def parse_vector(text: str | None) -> Vec:
    """Parse ``x,y,z`` into a vector."""
    return _triple(text, "vector")


def _require(fields: Sequence[str], count: int, message: str) -> None:
    if len(fields) <= count:
        raise SceneError(message)


def _parse_ambient(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 2, "Invalid ambient parameters")
    if scene.ambient.count != 0:
        raise SceneError("Multiple ambient lights defined")
    scene.ambient.count += 1
    ratio = parse_double(fields[1])
    if ratio < 0 or ratio > 1:
        raise SceneError("Ambient ratio must be in [0.0, 1.0]")
    scene.ambient.ratio = ratio
    scene.ambient.color = parse_color(fields[2])


def _parse_camera(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 3, "Invalid camera parameters")
    if scene.camera.count != 0:
        raise SceneError("Multiple cameras defined")
    scene.camera.count += 1
    scene.camera.center = parse_vector(fields[1])
    scene.camera.direction = parse_vector(fields[2]).normalized()
    fov = parse_int(fields[3])
    if fov < 0 or fov > 180:
        raise SceneError("Camera FOV must be in [0, 180]")
    scene.camera.fov = float(fov)


def _parse_light(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 3, "Invalid light parameters")
    source = parse_vector(fields[1])
    ratio = parse_double(fields[2])
    if ratio < 0 or ratio > 1:
        raise SceneError("Light ratio must be in [0.0, 1.0]")
    scene.add_light(Light(source=source, ratio=ratio, color=parse_color(fields[3])))


def _parse_sphere(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 3, "Missing sphere parameters")
    center = parse_vector(fields[1])
    diameter = parse_double(fields[2])
    if diameter <= 0:
        raise SceneError("Sphere diameter must be positive")
    scene.add_object(
        SceneObject(
            kind=ObjectType.SPHERE,
            center=center,
            diameter=diameter,
            color=parse_color(fields[3]),
        )
    )


def _parse_plane(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 3, "Missing plane parameters")
    scene.add_object(
        SceneObject(
            kind=ObjectType.PLANE,
            center=parse_vector(fields[1]),
            direction=parse_vector(fields[2]).normalized(),
            color=parse_color(fields[3]),
        )
    )


def _parse_cylinder(fields: Sequence[str], scene: Scene) -> None:
    _require(fields, 5, "Missing cylinder parameters")
    center = parse_vector(fields[1])
    direction = parse_vector(fields[2]).normalized()
    diameter = parse_double(fields[3])
    height = parse_double(fields[4])
    if diameter <= 0 or height <= 0:
        raise SceneError("Cylinder diameter and height must be positive")
    scene.add_object(
        SceneObject(
            kind=ObjectType.CYLINDER,
            center=center,
            direction=direction,
            diameter=diameter,
            height=height,
            color=parse_color(fields[5]),
        )
    )


_EXACT = {"A": _parse_ambient, "C": _parse_camera, "L": _parse_light}
_PREFIXED = (("sp", _parse_sphere), ("pl", _parse_plane), ("cy", _parse_cylinder))


def parse_line(fields: Sequence[str], scene: Scene) -> None:
    """Apply one split scene line to ``scene``.

    ``A``, ``C`` and ``L`` must match exactly; object identifiers only
    need to start with ``sp``, ``pl`` or ``cy``.
    """
    if not fields:
        return
    ident = fields[0]
    handler = _EXACT.get(ident)
    if handler is None:
        handler = next((h for prefix, h in _PREFIXED if ident.startswith(prefix)), None)
    if handler is None:
        raise SceneError(f"Invalid identifier: {ident!r}")
    handler(fields, scene)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from lines of text; blank lines are ignored."""
    scene = Scene()
    for line in lines:
        fields = split_fields(line, " ")
        if fields:
            parse_line(fields, scene)
    return scene


def load_scene(path: str | Path) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            return parse_scene(iter_lines(stream))
    except OSError as exc:
        raise SceneError(f"Cannot open file: {path}") from exc