# sbrcs

Monostatic radar cross section (RCS) of a perfectly conducting object,
computed with the shooting-and-bouncing-rays method followed by a
physical-optics integral over the reflected rays.

The object is a bounding volume hierarchy of triangles stored in a binary
`.rba` file. Observation directions, polarisations, frequencies and ray
densities come from a binary `.obs` file, and the results are written to a
binary `.rcs` file with one value per observation.

## Installing

```
pip install .
```

Only the Python standard library is needed. Python 3.10 or later is
required. The tests run with `pip install .[test]` and `pytest`.

## Command line

```
sbrcs-mono-rcs model.rba observations.obs result.rcs
```

The command takes exactly three arguments. It loads the hierarchy and the
observations, computes the RCS for each observation in order, writes the
results, then prints the path of the result file and the time taken in
milliseconds. With the wrong number of arguments, or when a file cannot be
read or parsed, it prints a message to standard error and exits with
status 1.

## Library use

```python
from sbrcs.bvh import ReducedBvhArray
from sbrcs.observation import ObservationArray
from sbrcs.solver import SbrSolver

bvh = ReducedBvhArray.load("model.rba")
observations = ObservationArray.load("observations.obs")

rcs = SbrSolver().monostatic_rcs(bvh, observations)  # an RcsArray
rcs.save("result.rcs")
print(rcs.values)
```

`monostatic_rcs` also accepts any iterable of `Observation` objects. The
steps it runs can be called one by one: `populate_ray_pool` builds a
`RayPool` sized to the object and wavelength, `shoot_and_bounce` traces
each ray through up to four reflections, and `physical_optics_integral`
returns the RCS for one observation.

The modules:

- `sbrcs.vector`: `Vec3`, an immutable three-component vector with
  element-wise arithmetic against vectors and scalars.
- `sbrcs.vecmath`: `dot`, `cross`, `length`, `unit`, `vmin`, `vmax`,
  `reflect`, `cts_to_sph`, `sph_to_cts`, `orthonormal_set`,
  `orthonormalize`, projections onto lines and planes, plane normals,
  `triangle_area` and `tetrahedron_volume`.
- `sbrcs.bounds`: `BoundBox` (union, centre, radius, half-open
  containment) and `BoundSphere` (union).
- `sbrcs.triangle`: `Triangle`, with its normal, centroid and bounding box.
- `sbrcs.mesh_files`: `read_obj` and `read_unv` load Wavefront OBJ and
  universal (UNV, datasets 2411 and 2412) files into a `TriMesh`; bad
  input raises `MeshFormatError`.
- `sbrcs.mesh`: `TriangleMesh.from_file` picks the reader by the `.obj` or
  `.unv` extension and computes the bounding box and sphere.
- `sbrcs.bvh`: `ReducedBvhNode`, `NodeStatus` and `ReducedBvhArray`, the
  flattened hierarchy with `to_bytes`, `from_bytes`, `save` and `load`.
- `sbrcs.observation`: `Observation` and `ObservationArray`.
- `sbrcs.rcs`: `RcsArray`, the result values.
- `sbrcs.ray`: `RayTube`, with box and triangle intersection tests.
- `sbrcs.raypool`: `RayPool`, a square grid of parallel rays launched
  towards a bounding box, in row order or shuffled order.
- `sbrcs.solver`: `SbrSolver`.

## File formats

All values are little-endian.

- `.rba`: a `uint32` node count, then 40 bytes per node: a `uint32`
  status (1 empty, 2 leaf, 4 branch, 8 root) and a 36-byte payload. A
  leaf holds nine `float32` triangle coordinates; other nodes hold six
  `float32` box coordinates (lower, then upper) and `uint32` parent, left
  and right indices. Node 0 is the root.
- `.obs`: a `uint32` count, then 32 bytes per observation: direction and
  polarisation as six `float32`, frequency in hertz as `float32`, rays per
  wavelength as `uint32`.
- `.rcs`: a `uint32` count, then one `float32` per value.

## What it does not do

The package does not build a bounding volume hierarchy from a mesh.
`TriangleMesh` can load OBJ and UNV files, but there is no step that turns
it into a `ReducedBvhArray`; `.rba` files must come from elsewhere, or be
assembled by hand from `ReducedBvhNode.leaf` and `ReducedBvhNode.branch`.
There is also no command for writing `.obs` files; build an
`ObservationArray` in Python and call `save`.