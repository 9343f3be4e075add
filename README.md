# babyengine

The core of a small 3D engine, built on numpy. It handles the math and the
bookkeeping that a renderer needs, and it does not draw anything itself. You
can pass its matrices and vertex lists to whatever graphics backend you use.

## Modules

- **`babyengine.glmath`**: 4×4 homogeneous transforms acting on column vectors.
  - `translate3d`, `scale3d`, and `rotate3d`, which rotates about `'x'`, `'y'`
    or `'z'` by a number of degrees. Any other axis name gives the identity.
  - `rotation`, which rotates about an arbitrary axis.
  - `look_at`, which builds view matrices.
  - `frustum`, which builds perspective projection matrices.
  - The helpers `vec3` and `normalize`. `normalize` raises `ValueError` for a
    zero vector.
- **`babyengine.transformable`**: `Transformable` holds a `position`, a
  `front`/`up`/`right` frame and a `scale`.
  - `model_matrix()` returns translation × orientation × scale.
  - `global_move` translates the object.
  - `rotate` applies a matrix to the frame and keeps each axis at unit length.
  - `set_orientation` replaces the frame.
  - `rotate_fps` returns a one-degree yaw/pitch step matrix for cursor
    offsets. It keeps the pitch inside a limit.
- **`babyengine.camera`**: `Camera` looks along its negative front axis. It
  offers:
  - `view_matrix()`;
  - `perspective_matrix()`, built from the near and far planes, the half
    field-of-view angle and the aspect ratio;
  - `eye_position()`.
- **`babyengine.lights`**: `Light` holds ambient and source intensities and a
  depth-map size. `ReflectorLight` is a spotlight that looks along its front
  axis. It has its own `view_matrix()` and `perspective_matrix()`.
- **`babyengine.material`**: `Material` is a dataclass. It holds the ambient,
  diffuse and specular coefficients and the gloss, with optional diffuse and
  gloss `Texture`s.
- **`babyengine.curve`**: `Curve` is a sequence of sampled vertices. It also
  keeps its control points and a colour.
- **`babyengine.pathmaker`**: `Pathmaker` collects control points. After
  `remake_curves()`, its `curves` list holds the following, as far as there
  are enough points:
  - the control polygon (2 or more points);
  - a Bézier approximation (3 or more);
  - a cubic interpolation through the last four points (4 or more);
  - a uniform cubic B-spline (4 or more);
  - tangent segments along the B-spline.

  `tangent_vectors` and `second_derivatives` hold the unit first and second
  derivatives at each B-spline sample. `animation_curve()` returns the
  B-spline. It raises `LookupError` when there is none.
- **`babyengine.animator`**: `Animator` steps a `Transformable` through the
  vertices of a curve. At each vertex it sets:
  - front to the tangent;
  - up to tangent × second derivative;
  - right to front × up.

  `animate()` returns `False` once the end is reached.
- **`babyengine.mesh`**: `Mesh` holds vertices, indices, normals and UV
  coordinates.
  - `bounding_box()` returns the mesh's bounds.
  - `apply_transform(matrix)` transforms the vertices.
  - `normalize()` centres the mesh on the origin and scales its largest
    extent to 2.
- **`babyengine.scenegraph`**: `SceneGraph`, made of `SGNode`s, works on whole
  subtrees by node name with these methods:
  - `move_subtree`;
  - `rotate_subtree`, which rotates about the named node;
  - `scale_subtree`;
  - `destroy_subtree`, which detaches every descendant into `detached_nodes`.

  Particle-system nodes move by half the requested distance. A node whose
  `do_rotate` is off is skipped when rotating, together with its subtree.
- **`babyengine.particles`**:
  - `ParticleSpawner` holds live `Particle`s, moves them according to a
    `MoveMode`, and drops expired ones in `cleanup()`. It takes a clock
    callable, so time can be controlled.
  - `ParticleEmitter` spawns batches of particles scattered around its
    position and schedules spawning and cleanup in `update(delta_time)`.
- **`babyengine.input`**: `InputManager` takes key events (`Key`, `KeyAction`)
  and cursor positions in window pixels. It turns them into movement under an
  `InputProfile`:
  - In the flying-camera profile, W/S/A/D/Q/E fly.
  - In the vehicle profile, W/S drive and A/D/Q/E roll and pitch the vehicle.
  - ENTER starts and stops an attached `Animator`.
  - 1 and 2 switch profiles, mounting the camera behind the vehicle or
    freeing it.
  - BACKSPACE breaks the vehicle apart. This works from the flying-camera
    profile only.

  The handling methods return where the cursor should be put back to.
- **`babyengine.collision`**:
  - `check_for_collision` returns the name of the first part that is closer
    than 2 units to an obstacle, or `None`.
  - `handle_collision` unhooks that part and hangs it off the scene root.
- **`babyengine.framerate`**: `FrameRateLimiter.maintain()` measures the frame
  time and waits out the rest of the frame once `set_target_fps` has been
  called. It also refreshes `window_title` to show the target rate.
- **`babyengine.resources`**: `shader_paths` and `model_path` build the paths
  of shader sources and of the spaceship model next to an executable path.
- **`babyengine.scene`**: `build_scene(rng, clock)` assembles a demo scene
  with these parts:
  - a ten-part spaceship;
  - a field of 100 asteroids;
  - two particle clouds;
  - a camera, a light and a spotlight.

  `SpaceScene.step(delta_time)` advances it by one frame. It handles input,
  collisions, flying debris and particles, and returns the name of a part
  that collided.

## Example

```python
from babyengine.glmath import vec3, rotate3d, translate3d
from babyengine.camera import Camera
from babyengine.pathmaker import Pathmaker

m = translate3d(vec3(1.0, 2.0, 3.0)) @ rotate3d("y", 90.0)

camera = Camera(0.1, 100.0, 30.0, 1280 / 800)
view = camera.view_matrix()
projection = camera.perspective_matrix()

paths = Pathmaker()
for point in [(-1, 0, -1), (-2, -1, -2), (-2, -1, 0), (0, 2, 1), (1, 3, 1)]:
    paths.add_control_point(vec3(*point))
paths.remake_curves()
spline = paths.animation_curve()
print(len(spline), spline[0])
```

Running the demo scene without a window:

```python
import random

from babyengine.input import Key, KeyAction
from babyengine.scene import build_scene

scene = build_scene(random.Random(1))
scene.input.key_event(Key.W, KeyAction.PRESS)
for _ in range(10):
    hit = scene.step(1 / 60)
print(scene.camera.eye_position(), hit)
```

## What it does not do

babyengine has no rendering backend of its own. It does not do any of the
following:

- open windows;
- compile shaders;
- upload buffers;
- load model or image files;
- read the keyboard or mouse directly.

Key events and cursor positions must be handed to `InputManager` by the
caller. There is also no command-line program: the demo scene is driven from
Python through `build_scene` and `SpaceScene.step`.

## Tests

The test suite uses pytest. Install the `test` extra and run `pytest`.