"""Writing imported model data: material XML files, textures and mesh parts."""

from __future__ import annotations

import dataclasses
import os
import shutil
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _color(values: Sequence[float] = (0.0, 0.0, 0.0, 0.0)) -> tuple[float, float, float, float]:
    r, g, b, a = (float(v) for v in values)
    return (r, g, b, a)


@dataclass
class Material:
    """Surface description of one material, with texture file names and RGBA colours."""

    name: str = ""
    diffuse_file: str = ""
    diffuse: tuple[float, float, float, float] = field(default_factory=_color)
    specular_file: str = ""
    specular: tuple[float, float, float, float] = field(default_factory=_color)
    specular_exp: float = 0.0
    normal_file: str = ""

    def __post_init__(self) -> None:
        self.diffuse = _color(self.diffuse)
        self.specular = _color(self.specular)
        self.specular_exp = float(self.specular_exp)


@dataclass(frozen=True)
class MeshPart:
    """A run of vertices in a mesh that share one material."""

    material_name: str
    start_vertex: int
    vertex_count: int


def export_target(
    save_folder: str,
    file_name: str,
    default_folder: str,
    default_name: str,
    extension: str,
) -> tuple[str, str]:
    """The folder and file name to write to; empty arguments fall back to the defaults."""
    folder = save_folder or default_folder
    name = file_name or default_name
    return folder, name + extension


def _base_name(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def copy_texture_file(texture_file: str, save_folder: str) -> str:
    """Copy a texture next to the exported files and return its bare file name.

    An empty name stays empty; a texture that does not exist is not copied,
    but its bare file name is still returned.
    """
    if not texture_file:
        return ""
    name = _base_name(texture_file)
    if os.path.isfile(texture_file):
        shutil.copyfile(texture_file, os.path.join(save_folder, name))
    return name


def _number(value: float) -> str:
    return f"{float(value):.8g}"


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def _color_element(parent: ET.Element, tag: str, color: Sequence[float]) -> None:
    element = ET.SubElement(parent, tag)
    for channel, value in zip("RGBA", color):
        _text_element(element, channel, _number(value))


def write_materials(materials: Iterable[Material], save_folder: str, file_name: str) -> str:
    """Write the materials as an XML file, copying their textures alongside.

    The folder is created when missing. The texture paths in the file are the
    bare file names of the copies. Returns the path of the written file.
    """
    os.makedirs(save_folder, exist_ok=True)

    root = ET.Element("Materials")
    for material in materials:
        node = ET.SubElement(root, "Material")
        _text_element(node, "Name", material.name)
        _text_element(node, "DiffuseFile", copy_texture_file(material.diffuse_file, save_folder))
        _text_element(node, "SpecularFile", copy_texture_file(material.specular_file, save_folder))
        _text_element(node, "NormalFile", copy_texture_file(material.normal_file, save_folder))
        _color_element(node, "Diffuse", material.diffuse)
        _color_element(node, "Specular", material.specular)
        _text_element(node, "SpecularExp", _number(material.specular_exp))

    ET.indent(root, space="    ")
    path = os.path.join(save_folder, file_name)
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(_DECLARATION)
        stream.write(ET.tostring(root, encoding="unicode"))
        stream.write("\n")
    return path


def read_materials(path: str) -> list[Material]:
    """Read back a material file written by :func:`write_materials`."""
    root = ET.parse(path).getroot()

    def text(node: ET.Element, tag: str) -> str:
        return node.findtext(tag) or ""

    def color(node: ET.Element, tag: str) -> tuple[float, float, float, float]:
        element = node.find(tag)
        if element is None:
            return _color()
        return _color(float(text(element, c) or 0.0) for c in "RGBA")

    return [
        Material(
            name=text(node, "Name"),
            diffuse_file=text(node, "DiffuseFile"),
            diffuse=color(node, "Diffuse"),
            specular_file=text(node, "SpecularFile"),
            specular=color(node, "Specular"),
            specular_exp=float(text(node, "SpecularExp") or 0.0),
            normal_file=text(node, "NormalFile"),
        )
        for node in root.findall("Material")
    ]


def build_mesh_parts(
    vertices: Iterable[tuple[str, Any]],
    material_names: Iterable[str],
) -> tuple[list[Any], list[MeshPart]]:
    """Group ``(material name, vertex)`` pairs into contiguous parts.

    Parts follow the order of ``material_names``; each keeps the original
    order of its vertices. Materials with no vertices get no part, and
    vertices whose material is not listed are left out.
    """
    pairs = list(vertices)
    out: list[Any] = []
    parts: list[MeshPart] = []
    for name in material_names:
        gathered = [vertex for material, vertex in pairs if material == name]
        if not gathered:
            continue
        parts.append(MeshPart(name, len(out), len(gathered)))
        out.extend(gathered)
    return out, parts


__all__ = [
    "Material",
    "MeshPart",
    "export_target",
    "copy_texture_file",
    "write_materials",
    "read_materials",
    "build_mesh_parts",
]

# Keep dataclasses.replace available for callers updating materials.
replace = dataclasses.replace