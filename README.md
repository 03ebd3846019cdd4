# modelkit

Building blocks for a small 3D model editor, written with numpy. Matrices
follow the left-handed, row-vector convention: points multiply on the left
(`v @ M`), translation sits in the last row, and matrices compose left to
right.

## Modules

### `modelkit.math3d`

Plain functions on 3-vectors, 4x4 matrices and planes:

- `identity`, `rotation_x`, `rotation_y`, `scaling`, `translation`,
  `quaternion_matrix` (quaternion as `(x, y, z, w)`)
- `look_at_lh`, `perspective_fov_lh`
- `inverse` (raises `ValueError` for a singular matrix)
- `transform_coord` (point, divided by w), `transform_normal` (direction)
- `normalize` (a zero vector stays zero)
- `decompose` returns `(scale, quaternion, translation)` and raises
  `ValueError` when a scale component is zero
- `plane_normalize`, `plane_dot_coord`

### `modelkit.bounds`

Dataclasses for bounding volumes:

- `Ray(position, direction, distance=10.0)`. `get_line(world)` returns the
  two end points of the drawn segment. The world matrix is not applied.
- `BBox(min, max)`. `intersect(ray)` returns the distance along the ray to
  the box, or `None` on a miss. `get_line(world)` returns 24 points (12 edges)
  built from the transformed corners.
- `BSphere(center, radius, stack_count=20, slice_count=20)`.
  `intersect(ray)` tests against a sphere of this radius about the origin.
  It returns `0.0` when the ray starts inside and `None` on a miss.
  `transform(world)` moves the centre as a direction and scales the radius by
  the largest diagonal entry. `get_line(world)` returns a wireframe as pairs
  of points.

### `modelkit.camera`

- `Camera` has `position`, `rotation` (pitch and yaw in radians),
  `rotation_degree` and `matrix` (the view matrix) properties. It also has
  `forward`, `right` and `up` axes and an `update()` method.
- `Fixity` is a camera that refreshes its axes and view matrix on `update()`.
- `Freedom(move_speed=20.0, rotation_speed=2.5)` is a fly camera.
  `update(delta, mouse_pressed, keys, mouse_move)` moves it with
  W/S, A/D and E/Q and turns it with the mouse movement. It only does so while
  `mouse_pressed` is true.
- `Perspective(width, height, fov=pi/4, zn=0.1, zf=1000.0)` has `set(...)`
  and a `matrix` property.
- `Viewport(width, height, x=0, y=0, min_depth=0, max_depth=1)` has `set(...)`.
  `get_direction(view, projection, mouse)` returns the world-space unit
  direction through a screen position.

### `modelkit.frustum`

`Frustum(z_far, camera, perspective)` builds six planes from the camera and
projection, with the far plane moved to `z_far`. Call `update()` after either
of them changes. It offers three tests:

- `contain_point(position)`
- `contain_rect(center, size)`, where `size` holds the half extents
- `contain_cube(center, radius)`

### `modelkit.skin`

- `BoneWeights` keeps `(bone, weight)` influences sorted by descending
  weight. `add_weights` drops non-positive weights. `normalize()` keeps the
  four heaviest influences and scales them to sum to one. `blend_weights()`
  packs them into a `BlendWeight`.
- `BlendWeight` holds four `indices` and four `weights`. `set(index,
  bone_index, weight)` ignores slots outside 0 to 3.
- Handedness helpers:
  - `to_matrix(scale, rotation, translation, right_handed)`
  - `to_position`
  - `to_normal`
  - `flip_uv`

  A right-handed input is mirrored on Z. For `flip_uv`, V becomes `1 - v`.

### `modelkit.export`

- `Material` is a dataclass with a name, three texture file names, RGBA
  `diffuse` and `specular`, and `specular_exp`. `MeshPart` is a frozen
  dataclass with a material name, a start vertex and a vertex count.
- `export_target(save_folder, file_name, default_folder, default_name,
  extension)` returns `(folder, name + extension)`. Empty arguments fall back
  to the defaults.
- `copy_texture_file(texture_file, save_folder)` copies an existing texture
  into the folder and returns its bare file name.
- `write_materials(materials, save_folder, file_name)` creates the folder if
  needed and writes a `<Materials>` XML file. It copies the textures alongside
  and returns the file path. `read_materials(path)` reads such a file back.
- `build_mesh_parts(vertices, material_names)` groups
  `(material name, vertex)` pairs into contiguous runs in the order of
  `material_names`. It returns `(ordered vertices, parts)`.

## What it does not do

The package does not read FBX or any other model file. It draws nothing, has
no editor window and provides no command-line program. It writes material XML
files only. It does not write binary mesh or animation files.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from modelkit.bounds import BBox, Ray

box = BBox([-1.0, -1.0, -1.0], [1.0, 1.0, 1.0])
ray = Ray([0.0, 0.0, -5.0], [0.0, 0.0, 1.0])
hit = box.intersect(ray)  # 4.0
```

```python
from modelkit.skin import BoneWeights

weights = BoneWeights()
weights.add_weights(3, 0.5)
weights.add_weights(7, 0.25)
weights.normalize()
blend = weights.blend_weights()  # indices [3, 7, 0, 0], weights about [0.667, 0.333, 0, 0]
```

```python
from modelkit.camera import Freedom, Perspective
from modelkit.frustum import Frustum

camera = Freedom()
camera.position = (0.0, 0.0, -5.0)
frustum = Frustum(100.0, camera, Perspective(1280, 720))
frustum.update()
frustum.contain_point((0.0, 0.0, 0.0))  # True
```