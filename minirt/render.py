"""Turning a scene into pixels and writing them out as an image."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from typing import BinaryIO

from minirt.parser import SceneError, check_file, load_scene
from minirt.raytrace import Ray, ray_color
from minirt.scene import Camera, Scene
from minirt.vector import Vec

WIDTH = 800
HEIGHT = 600
_UP = Vec(0.0, 1.0, 0.0)


def ray_direction(camera: Camera, x: int, y: int, width: int, height: int) -> Vec:
    """Return the unit direction of the primary ray through pixel (x, y)."""
    aspect_ratio = width / height
    fov_scale = math.tan(camera.fov * math.pi / 360.0)
    nx = (2.0 * x / width - 1.0) * aspect_ratio * fov_scale
    ny = (1.0 - 2.0 * y / height) * fov_scale
    right = camera.direction.cross(_UP).normalized()
    up = right.cross(camera.direction).normalized()
    return (right * nx + up * ny + camera.direction).normalized()


def pack_pixel(color: Vec) -> int:
    """Pack a colour into a 32-bit RGBA value with full opacity."""
    r, g, b = (int(c) & 0xFFFFFFFF for c in color)
    return ((r << 24) | (g << 16) | (b << 8) | 0xFF) & 0xFFFFFFFF


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> list[list[int]]:
    """Trace one ray per pixel and return rows of packed RGBA pixels."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    origin = scene.camera.center
    return [
        [
            pack_pixel(
                ray_color(
                    Ray.create(origin, ray_direction(scene.camera, x, y, width, height)),
                    scene,
                )
            )
            for x in range(width)
        ]
        for y in range(height)
    ]


def write_ppm(pixels: Sequence[Sequence[int]], stream: BinaryIO) -> None:
    """Write packed RGBA rows to ``stream`` as a binary PPM image."""
    height = len(pixels)
    width = len(pixels[0]) if pixels else 0
    if any(len(row) != width for row in pixels):
        raise ValueError("all pixel rows must have the same length")
    data = bytearray()
    for row in pixels:
        for pixel in row:
            data += bytes(((pixel >> 24) & 0xFF, (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF))
    stream.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
    stream.write(bytes(data))


def main(argv: Sequence[str] | None = None) -> int:
    """Render a ``.rt`` scene file to a PPM image."""
    parser = argparse.ArgumentParser(prog="minirt", description="Render a .rt scene.")
    parser.add_argument("scene", help="scene file ending in .rt")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("-o", "--output", help="output file (default: standard output)")
    args = parser.parse_args(argv)

    try:
        path = check_file(["minirt", args.scene])
        scene = load_scene(path)
        pixels = render(scene, args.width, args.height)
    except (SceneError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "wb") as out:
                write_ppm(pixels, out)
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        write_ppm(pixels, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())