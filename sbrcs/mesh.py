"""Triangle meshes assembled from OBJ or UNV mesh files."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path

from sbrcs.bounds import BoundBox, BoundSphere
from sbrcs.mesh_files import MeshFormatError, PathType, TriMesh, read_obj, read_unv
from sbrcs.triangle import Triangle
from sbrcs.vecmath import length
from sbrcs.vector import Vec3

_READERS = {
    "unv": read_unv,
    "obj": read_obj,
}


@dataclass
class TriangleMesh:
    """A list of triangles with a bounding box and bounding sphere."""

    trigs: list[Triangle] = field(default_factory=list)
    bound_sphere: BoundSphere = field(default_factory=BoundSphere)
    bound_box: BoundBox = field(default_factory=BoundBox)

    @property
    def trig_count(self) -> int:
        """Number of triangles in the mesh."""
        return len(self.trigs)

    def reset(self) -> None:
        """Drop every triangle and clear the bounds."""
        self.trigs.clear()
        self.bound_sphere = BoundSphere()
        self.bound_box = BoundBox()

    def insert(self, trig: Triangle) -> None:
        """Append a triangle."""
        self.trigs.append(trig)

    def calculate_bounds(self) -> None:
        """Recompute the bounds from the triangles; an empty mesh is left as is."""
        if not self.trigs:
            return
        self.bound_box = reduce(
            lambda box, trig: box.union_with(trig.bound_box()),
            self.trigs,
            self.trigs[0].bound_box(),
        )
        center = (self.bound_box.lower + self.bound_box.upper) * 0.5
        self.bound_sphere = BoundSphere(center, length(self.bound_box.upper - center))

    @classmethod
    def from_tri_mesh(cls, data: TriMesh) -> TriangleMesh:
        """Build a mesh from flat vertex coordinates and index triplets."""
        coords = iter(data.vertices)
        points = [Vec3(x, y, z) for x, y, z in zip(coords, coords, coords)]
        corners = iter(data.indices)
        mesh = cls()
        for triplet in zip(corners, corners, corners):
            try:
                v1, v2, v3 = (points[i] for i in triplet)
            except IndexError:
                raise MeshFormatError(f"vertex index out of range: {triplet}") from None
            mesh.insert(Triangle(v1, v2, v3))
        mesh.calculate_bounds()
        return mesh

    @classmethod
    def from_file(cls, path: PathType) -> TriangleMesh:
        """Load a mesh, choosing the reader by the ``.unv`` or ``.obj`` extension."""
        ext = Path(path).suffix[1:].lower()
        reader = _READERS.get(ext)
        if reader is None:
            raise MeshFormatError(f"unsupported mesh file extension: {str(path)!r}")
        return cls.from_tri_mesh(reader(path))