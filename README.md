# picsim

Building blocks for particle-in-cell (PIC) plasma simulations on a staggered
Yee grid, in dimensionless units (lengths in `c/w_pe`, time in `1/w_pe`).

## Requirements

Python 3.10 or later, with `numpy` and `scipy`. Install the `test` extra to
run the test suite with pytest.

## What is in the package

| Module | Contents |
| --- | --- |
| `picsim.indexing` | `Axis`, `petsc_index`, `scalar_index`, `vector_index`, `to_step` |
| `picsim.vector3` | `Vector3`, `minimum`, `maximum` |
| `picsim.vector4` | `Vector4`, `minimum`, `maximum` |
| `picsim.vector_utils` | `vector_cast` |
| `picsim.region` | `is_point_within_bounds`, `is_region_within_bounds`, `is_region_intersect_bounds` |
| `picsim.random_generator` | `seed`, `random_01`, `random_sign` |
| `picsim.splines` | `SortParameters`, `FormFactor`, `form_factor`, `spline_of_0th_order` … `spline_of_5th_order` |
| `picsim.point` | `Point`, `bound_reflective`, `bound_periodic` |
| `picsim.shape` | `ShapeType`, `Shape` |
| `picsim.configuration` | `BoundaryType`, `Geometry`, `Configuration` |
| `picsim.world` | `World` |
| `picsim.particles` | `Particles` |
| `picsim.simulation` | `Command`, `CommandOnce`, `Diagnostic`, `Simulation` |
| `picsim.operators` | `YeeShift`, `Identity`, `FiniteDifferenceOperator`, `Rotor`, `Divergence`, `Gradient` |
| `picsim.sync_file` | `SyncFile`, `SyncBinaryFile` |
| `picsim.binary_file` | `BinaryFile` |

## Indexing

Fields are stored in natural ordering: z varies slowest, then y, then x, and
for vector fields the component is fastest.

```python
from picsim.indexing import petsc_index, vector_index, to_step

petsc_index(1, 2, 3, 0, 4, 5, 6, 1)   # ((1 * 5 + 2) * 6 + 3) * 1 + 0 == 45
vector_index(0, 0, 1, 2, (4, 5, 6))   # x = 1, component 2 of a 3-component field
to_step(1.0, 0.4)                     # 3, halves rounded away from zero
```

## Vectors

`Vector3` is a mutable dataclass with `x`, `y`, `z` components that supports
`+`, `-`, multiplication and division by a scalar, in-place forms of these,
indexing and iteration.

```python
from picsim.vector3 import Vector3, minimum, maximum

a = Vector3(1.0, 0.0, 0.0)
b = Vector3(0.0, 1.0, 0.0)

a.cross(b)                            # z component is 1.0
(a + b).length()                      # 1.4142...
Vector3(3.0, 4.0, 0.0).normalized()   # x = 0.6, y = 0.8
a.parallel_to(a + b), a.transverse_to(a + b)
minimum(a, b), maximum(a, b)
str(Vector3(1.0, 2.0, 3.0))           # "1.000000 2.000000 3.000000 "
```

`Vector4` adds a fourth component `c` and offers the same operations except
`cross` and `abs_max`. `vector_cast(vector, dimension, element_type)` converts
between the two: widening to four components sets `c` to zero, narrowing drops
it, and `element_type` (for example `int` or `float`) converts each component.

## Regions

Integer boxes are given by a start and a size.
`is_point_within_bounds` includes both ends, `is_region_within_bounds` checks
that a region fits inside the bounds, and `is_region_intersect_bounds` checks
for an overlap of non-zero volume.

## Random numbers

`picsim.random_generator` keeps one thread-safe generator for the process:
`random_01()` draws a real in `[0, 1)`, `random_sign()` returns `+1` or `-1`,
and `seed(value)` makes the following draws reproducible.

## Particle shapes

```python
from picsim.splines import form_factor, spline_of_2nd_order
from picsim.shape import Shape, ShapeType
from picsim.vector3 import Vector3

spline_of_2nd_order(0.0)              # 0.75

ff = form_factor(2)                   # radius 1.5, width 4
shape = Shape(Vector3(0.5, 0.5, 0.5), ff)
shape.setup(Vector3(1.2, 0.7, 0.3))

shape.start, shape.size               # nodes touched by the particle
weights = shape.electric(0)           # shape products for Ex, Ey, Ez at node 0
shape(0, ShapeType.No, 0)             # single value: node 0, unshifted, x
```

`form_factor(order)` accepts orders 0 to 5 and raises `ValueError` otherwise.
`Shape.setup` fills the unshifted (`No`) and half-cell-shifted (`Sh`) values;
`Shape.setup_moving(old_r, new_r)` fills the `Old` and `New` values over the
nodes touched along the move. Reading values before any setup raises
`RuntimeError`.

## Configuration and world

A run is described by a JSON file with `Out_dir` and a `Geometry` section
holding `dx`, `dy`, `dz`, `dt`, `size_x`, `size_y`, `size_z`, `size_t`,
`diagnose_period`, `da_boundary_x/y/z` (`DM_BOUNDARY_NONE`,
`DM_BOUNDARY_GHOSTED` or `DM_BOUNDARY_PERIODIC`; anything else counts as none)
and `da_processors_x/y/z`.

```python
from picsim.configuration import Configuration
from picsim.world import World

config = Configuration.from_file("config.json")
config.geometry.nx, config.geometry.nt, config.geometry.diagnose_period
config.boundaries()                   # BoundaryType for x, y, z
config.save()                         # copies the JSON file into Out_dir
config.save_sources("src", "sources") # copies a directory tree into Out_dir/sources

world = World.from_configuration(config)
```

Copy failures are raised as `RuntimeError`. `World` covers the whole grid and
raises `ValueError` if more than one processor is requested along any axis.
Its 27 neighbour slots (z-major, centre at index 13) are filled only where the
neighbour is the domain itself across a periodic boundary.

## Particles

```python
from picsim.point import Point, bound_periodic
from picsim.particles import Particles
from picsim.splines import SortParameters
from picsim.vector3 import Vector3

electrons = Particles(
    world,
    SortParameters(Np=100, n=1.0, q=-1.0, m=1.0, sort_name="electrons"),
)
point = Point(Vector3(0.1, 0.2, 0.3), Vector3(0.0, 0.0, 0.5))
electrons.add_particle(point)

electrons.velocity(point)             # p / sqrt(m^2 + p^2)
electrons.communicate()
```

`communicate()` takes out every point that left the world, wraps its
coordinates along periodic axes and puts it back if the neighbour in that
direction exists; points heading through a non-periodic side are dropped.
`bound_reflective` and `bound_periodic` apply wall and wrap-around conditions
to a single point, given the domain sizes.

## Writing a simulation

Subclass `Simulation`, implement `initialize_implementation` and
`timestep_implementation`, and add `Command` objects to `step_presets` and
`Diagnostic` objects to `diagnostics`.

`initialize()` builds the `World` from the configuration, calls
`initialize_implementation`, logs reference units and the geometry through the
`picsim.simulation` logger, and runs the diagnostics at the start step.
`calculate()` runs every step up to `Geometry.nt`: it executes the step
commands, calls `timestep_implementation`, runs the diagnostics and drops
commands whose `needs_to_be_removed` returns true (a `CommandOnce` always
does).

## Operators

```python
from picsim.operators import Rotor, Divergence, Gradient, Identity

rot = Rotor(world, world.spacing)
curl_forward = rot.create_positive()  # scipy.sparse CSR matrix
curl_backward = rot.create_negative()

div = Divergence(world, world.spacing).create_positive()  # vector -> scalar
grad = Gradient(world, world.spacing).create_negative()   # scalar -> vector
eye = Identity(world).create()
```

Entries are wrapped across periodic boundaries; stencil entries that fall
outside a non-periodic grid are left out.

## Output files

```python
from picsim.sync_file import SyncFile, SyncBinaryFile
from picsim.binary_file import BinaryFile

with SyncFile("out/trace.txt") as f:          # parent directories are created
    f.write("t x y z\n")

with SyncBinaryFile("out/energy.bin") as f:
    f.write_real(1.0)                         # float64
    f.write_floats([1.0, 2.0])                # float32

with BinaryFile("out/fields", "E") as f:      # writes out/fields/E.bin
    f.set_memview_subarray((4, 4), (2, 2), (1, 1))
    f.write_floats(range(16))                 # writes the 2x2 inner block
```

`BinaryFile.set_fileview_subarray` places the written values into a block of
each frame of the file instead of writing them one after another.

## What the package does not do

- There is no command-line program; nothing reads a configuration and runs a
  simulation by itself.
- No concrete simulation is included: there is no field solver, particle
  pusher or current deposition, only the `Simulation` base class and the
  pieces such an implementation is built from.
- Everything runs in one process; the domain is not split between processes.