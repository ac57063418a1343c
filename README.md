# fotones

Building blocks for a photon-mapping renderer, in plain Python with no
third-party dependencies.

## Modules

- `fotones.matrix`: `Matrix`, an immutable rectangular matrix of floats.
  `Matrix.zeros(rows, columns)` builds a zero matrix, `rows` and `columns`
  give its shape, `a @ b` multiplies, `inverse()` inverts a square matrix by
  Gauss–Jordan elimination with partial pivoting (raising
  `SingularMatrixError` for a singular one), and `str()` prints the rows with
  three decimals, aligned between `|` bars.
- `fotones.direction`: `Direction`, a frozen 3D vector with `+`, `-`, unary
  `-`, multiplication and division by a number (division by zero raises
  `ZeroDivisionError`), `abs()` per component, `modulus()`, `normalized()`
  (a zero vector raises `ValueError`), `cross()` and `homogeneous()`, which
  gives a 4×1 `Matrix` ending in 0. The functions `modulus`, `normalize` and
  `cross` do the same as the methods.
- `fotones.basis`: `Basis`, three vectors of three components (the identity
  by default), also built with `Basis.from_directions`; and
  `orthonormal_basis(normal)`, which returns a tangent and a bitangent that
  complete an orthonormal basis with a unit normal.
- `fotones.kdtree`: `KDTree(elements, dimensions, axis_position=None)`, a
  balanced k-d tree. `nearest_neighbors(point, number=1, max_distance=inf,
  norm=euclidean_norm)` returns up to `number` elements closer than
  `max_distance` (`number=None` means no limit). The result is not sorted by
  distance.
- `fotones.photon`: `Photon`, with a position, an incident `Direction` and an
  RGB flux; `coordinate(index)` reads one axis of the position.
- `fotones.photon_map`: `build_photon_map(photons)` makes a 3D `KDTree` of
  photons; `nearby_photons` (by radius and count), `nearby_photons_by_count`
  and `nearby_photons_by_radius` query it.
- `fotones.ppm`: plain P3 PPM images with a `#MAX=` comment giving the real
  value of the brightest component.
  - `read_ppm(path)` returns a `PPMImage` (width, height, values scaled to
    real units, max value, resolution); a malformed file raises
    `PPMFormatError`.
  - `write_ppm(path, image, function_name)` writes the image to
    `output_path(path, function_name)`, that is `<stem>_<function_name>.ppm`,
    and returns that path.
  - `final_file_name(path)` gives the part after the last `/`.
  - `max_rgb_value(pixels)` gives the largest component of rows of pixels.
  - `paint_scene_ppm(path, pixels)` writes rows of (r, g, b) pixels with a
    colour resolution of 1,000,000.
- `fotones.parameters`: `RenderParameters`, a frozen record of every setting
  of a photon-mapping run, and `NeighbourMode` (`RADIUS`, `PERCENTAGE`,
  `COUNT`, `RADIUS_COUNT`).
- `fotones.point_light`: `PointLight`, a position and an RGB power.
- `fotones.bsdf`: `BSDF`, diffuse (`kd`), specular (`ks`) and transmission
  (`kt`) RGB coefficients. `BSDF.from_material(color, name)` uses one of the
  names in `MATERIALS` (`muy_difuso`, `difuso`, `poco_difuso`, `cristal`,
  `refractante`, `espejo`, `plastico`; an unknown name gives zeros);
  `BSDF.from_coefficients(color, kd, ks, kt)` multiplies explicit triples by
  the colour.
- `fotones.camera`: `Camera`, with an origin and front, up and left
  directions. `pixel_width(n)` and `pixel_height(n)` give a pixel's size;
  `corner_direction`, `center_direction` and `random_direction` (which takes
  an optional `random.Random`) give directions in camera coordinates towards a
  pixel.

## Example

```python
import random

from fotones.basis import orthonormal_basis
from fotones.camera import Camera
from fotones.direction import Direction, normalize
from fotones.kdtree import KDTree
from fotones.matrix import Matrix

normal = normalize(Direction(0.0, 1.0, 0.0))
tangent, bitangent = orthonormal_basis(normal)

camera = Camera()
width = camera.pixel_width(256)
height = camera.pixel_height(256)
centre = camera.center_direction(0, width, 0, height)
jittered = camera.random_direction(0, width, 0, height, random.Random(1))

product = Matrix([[1, 2, 3], [4, 5, 6]]) @ Matrix([[10, 11], [20, 21], [30, 31]])

tree = KDTree([(0.0, 0.0), (1.0, 1.0), (5.0, 5.0)], 2)
near = tree.nearest_neighbors((0.9, 0.9), number=2)
```

## What it does not do

There are no scene objects here: no spheres, planes, triangles or meshes, no
ray–object intersection, no scene, no photon tracing or rendering loop, and no
tone-mapping functions. `write_ppm` only takes the name of a transformation to
put in the output file name. There is no command-line program; everything is
used from Python.

## Tests

```
pip install -e ".[test]"
pytest
```