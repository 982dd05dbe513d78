"""Radar cross-section results and their binary file form.

A file holds a little-endian ``uint32`` count followed by that many
``float32`` values.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from sbrcs.mesh_files import PathType

_COUNT = struct.Struct("<I")
_VALUE = struct.Struct("<f")


@dataclass
class RcsArray:
    """One radar cross-section value per observation."""

    values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def to_bytes(self) -> bytes:
        """Serialise to the binary file form."""
        return _COUNT.pack(len(self.values)) + struct.pack(f"<{len(self.values)}f", *self.values)

    @classmethod
    def from_bytes(cls, data: bytes) -> RcsArray:
        """Parse the binary file form; trailing bytes are ignored."""
        if len(data) < _COUNT.size:
            raise ValueError("data too short for a value count")
        (count,) = _COUNT.unpack_from(data)
        end = _COUNT.size + count * _VALUE.size
        if len(data) < end:
            raise ValueError(f"data too short for {count} values")
        return cls([v for (v,) in _VALUE.iter_unpack(data[_COUNT.size:end])])

    def save(self, path: PathType) -> None:
        """Write the values to ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.to_bytes())

    @classmethod
    def load(cls, path: PathType) -> RcsArray:
        """Read values from ``path``."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())