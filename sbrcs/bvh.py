"""Flattened bounding-volume hierarchy nodes and their binary file form.

A file holds a little-endian ``uint32`` node count followed by one 40-byte
record per node: a ``uint32`` status and a 36-byte payload. Leaf payloads are
the nine ``float32`` triangle coordinates; other nodes carry the six
``float32`` box coordinates and the parent, left and right ``uint32`` indices.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from sbrcs.bounds import BoundBox
from sbrcs.mesh_files import PathType
from sbrcs.triangle import Triangle
from sbrcs.vector import Vec3

_COUNT = struct.Struct("<I")
_NODE = struct.Struct("<I36s")
_LEAF = struct.Struct("<9f")
_BRANCH = struct.Struct("<6f3I")


class NodeStatus(IntEnum):
    """Role of a node in the hierarchy."""

    EMPTY = 1
    LEAF = 2
    BRANCH = 4
    ROOT = 8


@dataclass(frozen=True)
class BranchData:
    """Bounding box and links of an inner node."""

    box: BoundBox
    parent: int
    left: int
    right: int


@dataclass(frozen=True)
class ReducedBvhNode:
    """A node holding either a triangle (leaf) or branch data."""

    status: NodeStatus
    data: Optional[BranchData] = None
    trig: Optional[Triangle] = None

    def __post_init__(self) -> None:
        if self.status is NodeStatus.LEAF:
            if self.trig is None:
                raise ValueError("a leaf node needs a triangle")
        elif self.data is None:
            raise ValueError("a non-leaf node needs branch data")

    @classmethod
    def leaf(cls, trig: Triangle) -> ReducedBvhNode:
        """A leaf holding ``trig``."""
        return cls(NodeStatus.LEAF, trig=trig)

    @classmethod
    def branch(
        cls, status: NodeStatus, parent: int, left: int, right: int, box: BoundBox
    ) -> ReducedBvhNode:
        """An inner node with the given links and bounding box."""
        return cls(NodeStatus(status), data=BranchData(box, parent, left, right))


def _encode(node: ReducedBvhNode) -> bytes:
    if node.status is NodeStatus.LEAF:
        t = node.trig
        payload = _LEAF.pack(*t.v1, *t.v2, *t.v3)
    else:
        d = node.data
        payload = _BRANCH.pack(*d.box.lower, *d.box.upper, d.parent, d.left, d.right)
    return _NODE.pack(int(node.status), payload)


def _decode(status_value: int, payload: bytes) -> ReducedBvhNode:
    try:
        status = NodeStatus(status_value)
    except ValueError:
        raise ValueError(f"unknown node status {status_value}") from None
    if status is NodeStatus.LEAF:
        c = _LEAF.unpack(payload)
        return ReducedBvhNode.leaf(Triangle(Vec3(*c[0:3]), Vec3(*c[3:6]), Vec3(*c[6:9])))
    *coords, parent, left, right = _BRANCH.unpack(payload)
    box = BoundBox(Vec3(*coords[0:3]), Vec3(*coords[3:6]))
    return ReducedBvhNode.branch(status, parent, left, right, box)


@dataclass
class ReducedBvhArray:
    """The hierarchy as a flat node list; node 0 is the root."""

    nodes: list[ReducedBvhNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def to_bytes(self) -> bytes:
        """Serialise to the binary file form."""
        return _COUNT.pack(len(self.nodes)) + b"".join(_encode(n) for n in self.nodes)

    @classmethod
    def from_bytes(cls, data: bytes) -> ReducedBvhArray:
        """Parse the binary file form; trailing bytes are ignored."""
        if len(data) < _COUNT.size:
            raise ValueError("data too short for a node count")
        (count,) = _COUNT.unpack_from(data)
        end = _COUNT.size + count * _NODE.size
        if len(data) < end:
            raise ValueError(f"data too short for {count} nodes")
        body = data[_COUNT.size:end]
        return cls([_decode(status, payload) for status, payload in _NODE.iter_unpack(body)])

    def save(self, path: PathType) -> None:
        """Write the array to ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.to_bytes())

    @classmethod
    def load(cls, path: PathType) -> ReducedBvhArray:
        """Read an array from ``path``."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())