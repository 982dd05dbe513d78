"""Readers for triangle meshes stored as OBJ or UNV text files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

_C_SPACE = " \t\n\v\f\r"
_LEADING_UINT = re.compile(r"\s*\+?(\d+)")

_UNV_VERTEX_START = "  2411"
_UNV_VERTEX_END = "    -1"
_UNV_TRIG_START = "  2412"
_UNV_TRIG_END = "    -1"


class MeshFormatError(ValueError):
    """Raised when a mesh file does not have the expected layout."""


@dataclass
class TriMesh:
    """Flat triangle mesh: ``vertices`` as x0, y0, z0, x1, ... and
    ``indices`` as 0-based vertex-index triplets."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def search_and_replace(source: str, find: str, replace: str) -> str:
    """Replace every occurrence of ``find``, scanning left to right without
    rescanning inserted text."""
    if not find:
        raise ValueError("search string must not be empty")
    return source.replace(find, replace)


def explode(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``; a trailing empty field is dropped."""
    parts = text.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _squeeze_spaces(line: str) -> str:
    line = line.strip(_C_SPACE)
    for run in ("    ", "   ", "  ", "  ", "  ", "  ", "  "):
        line = search_and_replace(line, run, " ")
    return line


def _parse_face_index(token: str) -> int:
    match = _LEADING_UINT.match(token)
    if match is None:
        raise MeshFormatError(f"bad face index: {token!r}")
    value = int(match.group(1))
    if value < 1:
        raise MeshFormatError(f"face index must start at 1: {token!r}")
    return value - 1


def read_obj(path: PathType) -> TriMesh:
    """Read vertices and triangular faces from an OBJ file.

    Only ``v`` and ``f`` records are used; a face contributes its first three
    vertex indices, ignoring any ``/``-separated texture or normal indices.
    """
    vertices: list[float] = []
    indices: list[int] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\n")
            if not line or line[0] == "#":
                continue
            tokens = line.split()
            if not tokens:
                continue
            tag, args = tokens[0], tokens[1:]
            if tag == "v":
                if len(args) < 3:
                    raise MeshFormatError(f"vertex needs three coordinates: {line!r}")
                try:
                    vertices.extend(float(a) for a in args[:3])
                except ValueError as exc:
                    raise MeshFormatError(f"bad vertex: {line!r}") from exc
            elif tag == "f":
                if len(args) < 3:
                    raise MeshFormatError(f"face needs three vertices: {line!r}")
                indices.extend(_parse_face_index(a) for a in args[:3])
    return TriMesh(vertices, indices)


def _find_line(lines: list[str], marker: str, start: int) -> int:
    try:
        return lines.index(marker, start)
    except ValueError:
        raise MeshFormatError(f"marker {marker!r} not found") from None


def _section(lines: list[str], start_marker: str, end_marker: str, start: int) -> tuple[list[str], int]:
    begin = _find_line(lines, start_marker, start) + 1
    end = _find_line(lines, end_marker, begin)
    return lines[begin:end], end + 1


def read_unv(path: PathType) -> TriMesh:
    """Read a triangle mesh from a UNV file.

    Vertices come from dataset 2411 and triangles from dataset 2412; each
    record is a header line followed by a data line. Fortran ``D`` exponents
    are accepted, and 1-based vertex indices are converted to 0-based.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()

    vertex_block, after = _section(lines, _UNV_VERTEX_START, _UNV_VERTEX_END, 0)
    trig_block, _ = _section(lines, _UNV_TRIG_START, _UNV_TRIG_END, after)
    vertex_count = len(vertex_block) // 2
    trig_count = len(trig_block) // 2

    vertices: list[float] = []
    for record in vertex_block[1 : 2 * vertex_count : 2]:
        fields = explode(search_and_replace(_squeeze_spaces(record), "D", "E"), " ")
        if len(fields) < 3:
            raise MeshFormatError(f"vertex needs three coordinates: {record!r}")
        try:
            vertices.extend(float(f) for f in fields[:3])
        except ValueError as exc:
            raise MeshFormatError(f"bad vertex: {record!r}") from exc

    indices: list[int] = []
    for record in trig_block[1 : 2 * trig_count : 2]:
        fields = explode(_squeeze_spaces(record), " ")
        if len(fields) < 3:
            raise MeshFormatError(f"triangle needs three vertices: {record!r}")
        for f in fields[:3]:
            try:
                idx = int(f) - 1
            except ValueError as exc:
                raise MeshFormatError(f"bad triangle: {record!r}") from exc
            if not 0 <= idx < vertex_count:
                raise MeshFormatError(f"vertex index out of range: {record!r}")
            indices.append(idx)

    return TriMesh(vertices, indices)