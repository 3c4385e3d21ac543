# minirt

A small ray tracer. It reads a scene described in a `.rt` text file,
shades it with ambient and diffuse lighting, and writes the result as a
binary PPM image. Spheres, planes and capless cylinders of finite height
are supported. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Usage

```
minirt scene.rt > image.ppm
minirt scene.rt --width 320 --height 240 -o image.ppm
```

Options:

| Option               | Meaning                                          |
|----------------------|--------------------------------------------------|
| `scene`              | scene file; its name must end in `.rt`           |
| `--width`            | image width in pixels (default 800)              |
| `--height`           | image height in pixels (default 600)             |
| `-o`, `--output`     | output file (default: standard output)           |

The scene path must name a readable file whose name ends in `.rt` and
has at least four characters. On any scene error the command prints
`Error: ...` to standard error and exits with status 1.

## Scene format

Each line starts with an identifier; fields are separated by spaces and
blank lines are ignored. Vectors and colours are three comma-separated
numbers. Colour components must lie in `[0, 255]`. Numbers are read as
an optional `-`, digits and an optional fractional part; anything after
that is ignored.

| Identifier | Fields                                              |
|------------|-----------------------------------------------------|
| `A`        | ratio `[0,1]`, colour                               |
| `C`        | position, direction, field of view `[0,180]` (integer) |
| `L`        | position, brightness `[0,1]`, colour                |
| `sp`       | centre, diameter (> 0), colour                      |
| `pl`       | point, normal, colour                               |
| `cy`       | centre, axis, diameter (> 0), height (> 0), colour  |

`A`, `C` and `L` must match exactly and `A` and `C` may each appear
only once. Object identifiers only need to start with `sp`, `pl` or
`cy`. Directions are normalized when read. Any number of lights may be
given.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,0 4 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,0,2 0,1,0 1.5 3 0,128,255
```

## Library use

```python
from minirt.parser import load_scene
from minirt.render import render, write_ppm

scene = load_scene("scene.rt")
pixels = render(scene, 320, 240)
with open("out.ppm", "wb") as stream:
    write_ppm(pixels, stream)
```

`render` returns rows of 32-bit RGBA integers (see `pack_pixel`);
`write_ppm` writes their RGB part.

Modules:

- `minirt.vector` — the immutable `Vec` type with `+`, `-`, `*`, `/`,
  unary `-`, `dot`, `cross`, `magnitude` and `normalized`.
- `minirt.scene` — `Scene`, `Ambient`, `Camera`, `Light`, `SceneObject`
  and `ObjectType`; `Scene.add_object` and `Scene.add_light` put new
  entries at the front.
- `minirt.textutil` — `split_fields`, `parse_double`, `parse_int` and
  `iter_lines`.
- `minirt.parser` — `check_file`, `parse_color`, `parse_vector`,
  `parse_line`, `parse_scene` and `load_scene`; invalid input raises
  `SceneError` (a `ValueError`).
- `minirt.raytrace` — `Ray`, `Hit`, `intersect_sphere`,
  `intersect_plane`, `intersect_cylinder`, `intersect`,
  `compute_lighting` and `ray_color`.
- `minirt.render` — `ray_direction`, `pack_pixel`, `render`,
  `write_ppm` and the `main` command.

## Limitations

The package does not open a window or display the image; it only writes
PPM files. There are no shadows, reflections or specular highlights,
cylinders have no end caps, and `SQUARE` and `TRIANGLE` objects exist in
`ObjectType` but cannot be read from a scene file and are never hit.