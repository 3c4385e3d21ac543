"""Ray-object intersection and shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import ObjectType, Scene, SceneObject
from minirt.vector import EPSILON, Vec


@dataclass(frozen=True)
class Ray:
    """A ray with an origin and a direction."""

    origin: Vec
    direction: Vec

    @staticmethod
    def create(origin: Vec, direction: Vec) -> Ray:
        """Return a ray whose direction is normalized."""
        return Ray(origin, direction.normalized())


@dataclass(frozen=True)
class Hit:
    """Where a ray meets a surface."""

    t: float
    hit_point: Vec
    normal: Vec
    color: Vec


def _nearest_root(a: float, b: float, c: float) -> float | None:
    if a == 0:
        return None
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    t = (-b - root) / (2.0 * a)
    if t < EPSILON:
        t = (-b + root) / (2.0 * a)
    if t < EPSILON:
        return None
    return t


def intersect_sphere(ray: Ray, obj: SceneObject) -> Hit | None:
    """Return the nearest hit on a sphere in front of the ray, if any."""
    oc = ray.origin - obj.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - obj.diameter * obj.diameter / 4.0
    t = _nearest_root(a, b, c)
    if t is None:
        return None
    point = ray.origin + ray.direction * t
    return Hit(t, point, (point - obj.center).normalized(), obj.color)


def intersect_plane(ray: Ray, obj: SceneObject) -> Hit | None:
    """Return the hit on a plane, with the normal facing the ray."""
    denom = obj.direction.dot(ray.direction)
    if abs(denom) < EPSILON:
        return None
    t = (obj.center - ray.origin).dot(obj.direction) / denom
    if t < EPSILON:
        return None
    point = ray.origin + ray.direction * t
    normal = obj.direction
    if ray.direction.dot(normal) > 0:
        normal = -normal
    return Hit(t, point, normal, obj.color)


def intersect_cylinder(ray: Ray, obj: SceneObject) -> Hit | None:
    """Return the hit on a capless cylinder of finite height, if any."""
    axis = obj.direction
    oc = ray.origin - obj.center
    proj_dir = ray.direction - axis * ray.direction.dot(axis)
    proj_oc = oc - axis * oc.dot(axis)
    a = proj_dir.dot(proj_dir)
    b = 2.0 * proj_dir.dot(proj_oc)
    c = proj_oc.dot(proj_oc) - obj.diameter * obj.diameter / 4.0
    t = _nearest_root(a, b, c)
    if t is None:
        return None
    point = ray.origin + ray.direction * t
    height = (point - obj.center).dot(axis)
    if abs(height) > obj.height / 2.0:
        return None
    normal = (point - obj.center - axis * height).normalized()
    return Hit(t, point, normal, obj.color)


_INTERSECTORS = {
    ObjectType.SPHERE: intersect_sphere,
    ObjectType.PLANE: intersect_plane,
    ObjectType.CYLINDER: intersect_cylinder,
}


def intersect(ray: Ray, obj: SceneObject) -> Hit | None:
    """Intersect ``ray`` with ``obj``; unsupported kinds never hit."""
    func = _INTERSECTORS.get(obj.kind)
    return func(ray, obj) if func else None


def compute_lighting(hit: Hit, scene: Scene) -> Vec:
    """Shade a hit with ambient and diffuse light."""
    ambient = scene.ambient.color * (scene.ambient.ratio / 255.0)
    diffuse = Vec()
    for light in scene.lights:
        light_dir = (light.source - hit.hit_point).normalized()
        light_dot = hit.normal.dot(light_dir)
        if light_dot > 0:
            diffuse = diffuse + light.color * (light.ratio * light_dot / 255.0)
    total = ambient + diffuse
    return Vec(
        min(255.0, total.x * hit.color.x / 255.0),
        min(255.0, total.y * hit.color.y / 255.0),
        min(255.0, total.z * hit.color.z / 255.0),
    )


def ray_color(ray: Ray, scene: Scene) -> Vec:
    """Return the shaded colour of the nearest hit, or black."""
    closest: Hit | None = None
    for obj in scene.objects:
        hit = intersect(ray, obj)
        if hit is not None and (closest is None or hit.t < closest.t):
            closest = hit
    if closest is None:
        return Vec()
    return compute_lighting(closest, scene)