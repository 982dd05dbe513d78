"""Observation settings and their binary file form.

A file holds a little-endian ``uint32`` count followed by one 32-byte record
per observation: direction and polarisation as six ``float32``, the
frequency as ``float32`` and the rays per wavelength as ``uint32``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from sbrcs.mesh_files import PathType
from sbrcs.vector import Vec3

_COUNT = struct.Struct("<I")
_RECORD = struct.Struct("<7fI")


@dataclass(frozen=True)
class Observation:
    """One monostatic observation: incidence direction, polarisation,
    frequency in hertz and rays per wavelength."""

    direction: Vec3
    polarization: Vec3
    frequency: float
    ray_per_lam: int


@dataclass
class ObservationArray:
    """A sequence of observations."""

    observations: list[Observation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.observations)

    def to_bytes(self) -> bytes:
        """Serialise to the binary file form."""
        records = (
            _RECORD.pack(*o.direction, *o.polarization, o.frequency, o.ray_per_lam)
            for o in self.observations
        )
        return _COUNT.pack(len(self.observations)) + b"".join(records)

    @classmethod
    def from_bytes(cls, data: bytes) -> ObservationArray:
        """Parse the binary file form; trailing bytes are ignored."""
        if len(data) < _COUNT.size:
            raise ValueError("data too short for an observation count")
        (count,) = _COUNT.unpack_from(data)
        end = _COUNT.size + count * _RECORD.size
        if len(data) < end:
            raise ValueError(f"data too short for {count} observations")
        return cls(
            [
                Observation(Vec3(*v[0:3]), Vec3(*v[3:6]), v[6], v[7])
                for v in _RECORD.iter_unpack(data[_COUNT.size:end])
            ]
        )

    def save(self, path: PathType) -> None:
        """Write the observations to ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.to_bytes())

    @classmethod
    def load(cls, path: PathType) -> ObservationArray:
        """Read observations from ``path``."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())