"""Reading vertex, normal and face data from Wavefront OBJ text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

from raytracer.hittable import Material, Sphere
from raytracer.vector import Vector

MAX_TOKEN_CHARS = 5
MAX_LINE_TOKENS = 10
MAX_TRIS = 1000

_DELIMITERS = frozenset("\n\r ")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")
_UINT32_MASK = 0xFFFFFFFF


class ObjParseError(ValueError):
    """Raised for OBJ input that cannot be read."""


@dataclass
class ObjObject:
    """Geometry read from an OBJ file."""

    vertices: list[Vector] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)
    tris: list[Sphere] = field(default_factory=list)
    material: Material | None = None

    def __len__(self) -> int:
        return len(self.tris)


def tokenize(line: str) -> list[str]:
    """Split a line into tokens; every newline, carriage return or space ends one.

    Consecutive delimiters produce empty tokens. Text after the last delimiter
    forms a final token when it is not empty.
    """
    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if len(tokens) >= MAX_LINE_TOKENS:
            raise ObjParseError(f"more than {MAX_LINE_TOKENS} tokens on a line")
        tokens.append("".join(current))
        current.clear()

    for char in line:
        if char in _DELIMITERS:
            flush()
        else:
            if len(current) >= MAX_TOKEN_CHARS:
                raise ObjParseError(
                    f"token longer than {MAX_TOKEN_CHARS} characters"
                )
            current.append(char)
    if current:
        flush()
    return tokens


def lines_with_prefix(lines: Iterable[str], prefix: str) -> list[list[str]]:
    """Tokenized lines whose first token is exactly ``prefix``."""
    matches = []
    for line in lines:
        tokens = tokenize(line)
        if tokens and tokens[0] == prefix:
            matches.append(tokens)
    return matches


def _check_length(tokens: list[str]) -> None:
    if len(tokens) != 4:
        raise ObjParseError("malformed line in obj file")


def _leading_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token.lstrip())
    return float(match.group()) if match else 0.0


def _leading_uint32(token: str) -> int:
    match = _INT_PREFIX.match(token.lstrip())
    return int(match.group()) & _UINT32_MASK if match else 0


def parse_vector(tokens: list[str]) -> Vector:
    """Vector from a four-token line such as ``v x y z``."""
    _check_length(tokens)
    x, y, z = (_leading_float(token) for token in tokens[1:])
    return Vector(x, y, z)


def parse_index_triple(tokens: list[str]) -> tuple[int, int, int]:
    """Three unsigned 32-bit indices from a four-token line such as ``f a b c``.

    Only the leading digits of each token count, so ``1/2/3`` reads as 1.
    """
    _check_length(tokens)
    a, b, c = (_leading_uint32(token) for token in tokens[1:])
    return a, b, c


def parse_obj(text: str) -> ObjObject:
    """Read vertices (``v``), normals (``vn``) and faces (``f``) from OBJ text."""
    lines = text.splitlines(keepends=True)
    return ObjObject(
        vertices=[parse_vector(t) for t in lines_with_prefix(lines, "v")],
        normals=[parse_vector(t) for t in lines_with_prefix(lines, "vn")],
        faces=[parse_index_triple(t) for t in lines_with_prefix(lines, "f")],
    )


def parse_obj_file(path: str | PathLike[str]) -> ObjObject:
    """Read an OBJ file from disk."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_obj(handle.read())