"""Reading Wavefront OBJ geometry and MTL material files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

Vector3 = tuple[float, float, float]

_log = logging.getLogger(__name__)

_DEFAULT_NORMAL: Vector3 = (1.0, 1.0, 1.0)


@dataclass
class Material:
    """A material; only its colour (stored as ambient) is kept."""

    ambient: Vector3


@dataclass
class ReferenceGroup:
    """A face corner: a vertex position and its normal."""

    vertice: Vector3
    normal: Vector3


@dataclass
class Face:
    """A polygon given by its corners and an optional material."""

    reference_groups: list[ReferenceGroup] = field(default_factory=list)
    material: Material | None = None


_DEFAULT_MATERIAL = Material((1.0, 1.0, 1.0))


def _parse_floats(words: Sequence[str]) -> Vector3:
    if len(words) < 3:
        raise ValueError(f"three float values expected, got {len(words)}")
    try:
        x, y, z = (float(word) for word in words[:3])
    except ValueError as exc:
        raise ValueError(f"failed to read a float from {' '.join(words[:3])!r}") from exc
    return (x, y, z)


def _lookup(items: Sequence[Vector3], index: int, what: str) -> Vector3:
    if not 1 <= index <= len(items):
        raise IndexError(f"{what} index {index} out of range (1..{len(items)})")
    return items[index - 1]


class WavefrontImporter:
    """Parses OBJ text into vertices, normals, faces and materials.

    Texture coordinates and parameter-space vertices are ignored. Faces are
    read as triangles: corners beyond the third are dropped.
    """

    def __init__(self, stream: Iterable[str]):
        self._stream = stream
        self.counter_clock_wise = True
        self.input_line = 0
        self.vertices: list[Vector3] = []
        self.normals: list[Vector3] = []
        self.faces: list[Face] = []
        self.materials: dict[str, Material] = {}
        self._current_material: Material | None = None

    def parse(self) -> None:
        """Read the whole stream, storing vertices, normals and faces."""
        for number, line in enumerate(self._stream, start=1):
            text = line.strip()
            if not text:
                continue
            self.input_line = number
            kind, rest = text[0], text[1:]
            try:
                if kind == "v":
                    self._parse_vertex_data(rest)
                elif kind == "f":
                    self._parse_face(rest)
                elif kind == "u":
                    self._parse_use_material(text)
                elif kind == "m":
                    self._parse_material_library(text)
            except ValueError as exc:
                raise ValueError(f"line {number}: {exc}") from exc

    def parse_material(self, stream: Iterable[str]) -> None:
        """Read MTL text, storing each material's diffuse colour by name."""
        name = ""
        for line in stream:
            words = line.split()
            if not words:
                continue
            if words[0] == "newmtl":
                name = words[1] if len(words) > 1 else ""
            elif words[0] == "Kd":
                self.materials[name] = Material(_parse_floats(words[1:]))

    def _parse_vertex_data(self, rest: str) -> None:
        marker = rest[:1]
        if marker == "t":
            _log.warning("texture vertices found and ignored (not supported)")
        elif marker == "p":
            _log.warning("parameter space vertices found and ignored (not supported)")
        elif marker == "n":
            self.normals.append(_parse_floats(rest[1:].split()))
        else:
            self.vertices.append(_parse_floats(rest.split()))

    def _parse_face(self, rest: str) -> None:
        corners = rest.split()[:3]
        if len(corners) < 3:
            raise ValueError(f"a face needs three corners, got {len(corners)}")
        parsed: list[tuple[int, int | None]] = []
        for corner in corners:
            parts = corner.split("/")
            try:
                vertex = int(parts[0])
                normal = int(parts[2]) if len(parts) >= 3 and parts[2] else None
            except ValueError as exc:
                raise ValueError(f"malformed face corner {corner!r}") from exc
            parsed.append((vertex, normal))

        face = Face()
        if parsed[0][1] is None:
            _log.warning("no normals given")
            face.reference_groups = [
                ReferenceGroup(_lookup(self.vertices, vertex, "vertex"), _DEFAULT_NORMAL)
                for vertex, _ in parsed
            ]
        else:
            if any(normal is None for _, normal in parsed):
                raise ValueError("either all or no face corners must name a normal")
            face.reference_groups = [
                ReferenceGroup(
                    _lookup(self.vertices, vertex, "vertex"),
                    _lookup(self.normals, normal, "normal"),
                )
                for vertex, normal in parsed
            ]
        if self._current_material is not None:
            face.material = self._current_material
        else:
            _log.warning("no material set for face")
        self.faces.append(face)

    def _parse_use_material(self, text: str) -> None:
        words = text.split()
        if words[0] != "usemtl":
            _log.warning("usemtl expected")
            return
        if len(words) > 1 and words[1] in self.materials:
            self._current_material = self.materials[words[1]]

    def _parse_material_library(self, text: str) -> None:
        words = text.split()
        if words[0] != "mtllib" or len(words) < 2:
            _log.warning("mtllib expected")
            return
        try:
            with open(words[1], encoding="utf-8") as library:
                self.parse_material(library)
        except OSError as exc:
            _log.warning("could not read material library %r: %s", words[1], exc)


def create_vertices(importer: WavefrontImporter) -> list[float]:
    """Flatten faces into ``x y z nx ny nz r g b`` per corner.

    Faces without a material are coloured white.
    """
    vertices: list[float] = []
    for face in importer.faces:
        material = face.material if face.material is not None else _DEFAULT_MATERIAL
        for group in face.reference_groups:
            vertices.extend(group.vertice)
            vertices.extend(group.normal)
            vertices.extend(material.ambient)
    return vertices