# rockfield

Building blocks for a vector-style asteroid field game. The package holds
the parts of such a game that do not depend on a window, a graphics driver
or an audio device. It has no dependencies outside the standard library.

- `rockfield.matrix` – `SquareMatrix`, a small column-major square matrix
  with matrix–matrix and matrix–vector products, element access through
  `at` and `set_at`, column access by index, and `SquareMatrix.identity`.
- `rockfield.timer` – `Counter`, a countdown that stops once it reaches
  zero, and `Timer`, a frame timer that accumulates game time and can
  sleep to pad each tick to a fixed frame length (`tick_and_delay`).
- `rockfield.wavefront` – `WavefrontImporter`, a reader for triangle
  meshes in the Wavefront OBJ format (`parse`) and their MTL material
  files (`parse_material`), with the dataclasses `Material`,
  `ReferenceGroup` and `Face`; plus `create_vertices`, which flattens a
  parsed mesh into an interleaved buffer of position, normal and colour
  values (nine floats per vertex). Texture and parameter-space vertices
  are ignored, and only the first three corners of a face are read.
- `rockfield.physics` – `BoundingVolumeCircle` and
  `BoundingVolumeHyperRectangle`, `Body` (position, velocity with lower
  and upper speed limits, heading, timed deletion, an optional `fix`
  callback after each move) and `Physics`, which on each `tick` adds
  queued bodies, removes deleted ones, moves all bodies, reports
  collisions through user-supplied callbacks and removes deleted bodies
  again. `is_area_free_of_bodies` tells whether an area is clear.
- `rockfield.shapes` – `ShapeKind` and `shape_points`, the 2D vertex data
  of every game object (ship, flame, torpedo, saucer, four asteroid
  shapes, debris, score digits); `digit_points` for a single digit;
  `flatten_points` to lay points out for a vertex buffer; and
  `tile_offsets`, the nine offsets used to draw objects seamlessly across
  the wrapping screen edges.

## Examples

Multiply two matrices (values are given column by column):

```python
from rockfield.matrix import SquareMatrix

a = SquareMatrix([[1.0, 2.0], [-1.0, 1.5]], 2)
b = SquareMatrix([[2.0, -1.0], [1.0, 0.0]], 2)
product = a * b
print(product.at(0, 0), product.at(1, 0))   # 3.0 2.5
```

Move bodies and report collisions:

```python
from rockfield.physics import Body, BoundingVolumeCircle, Physics

hits = []
physics = Physics(lambda a, b: True, lambda a, b: hits.append((a, b)))
physics.add_body(Body(BoundingVolumeCircle([0.0, 0.0], 1.0), [0.0, -1.0]))
physics.add_body(Body(BoundingVolumeCircle([0.0, -3.0], 1.0), [0.0, 0.5]))
physics.tick(1.0)
print(len(hits))   # 1
```

Read a mesh and build a vertex buffer:

```python
import io
from rockfield.wavefront import WavefrontImporter, create_vertices

obj = io.StringIO(
    "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
    "vn 0 0 1\n"
    "f 1//1 2//1 3//1\n"
)
importer = WavefrontImporter(obj)
importer.parse()
buffer = create_vertices(importer)
print(len(buffer))   # 27: three vertices of nine floats each
```

Faces without a material are coloured white in the vertex buffer.

## What the package does not do

There is no playable game here: no window, no drawing, no sound playback,
no keyboard handling and no command to start anything. The package gives
the geometry, physics, timing and mesh data that such a program would be
built on; rendering the shapes, playing sounds and running the game loop
are left to the program that uses it.

## Running the tests

The test suite uses pytest, available through the `test` extra.