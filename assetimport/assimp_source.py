"""
Read a 3D asset through assimp_py (>= 1.2) and adapt it into the source
scene model.

assimp does the format work (FBX, OBJ, DAE, glTF, ...). We always ask it to
triangulate and to convert to a left-handed coordinate system; winding order
is reversed later by the mesh converter.

assimp_py 1.2 layout:
    node.transformation    4 rows of 4 floats
    node.mesh_indices      indices into scene.meshes
    mesh.vertices/normals  flat x, y, z lists
    mesh.texcoords         one flat list per channel, num_uv_components[c] floats per vertex
    mesh.indices           flat triangle list
    bone.weight_vertex_ids / bone.weights   parallel lists
"""

import os

import assimp_py

from .scene import (SourceBone, SourceMaterial, SourceMesh, SourceNode,
                    SourceScene, TextureType)

POST_PROCESS = assimp_py.Process_Triangulate | assimp_py.Process_MakeLeftHanded

# assimp_py texture type constant names per slot
_ASSIMP_TEXTURE_TYPES = {
    TextureType.DIFFUSE: "TextureType_DIFFUSE",
    TextureType.DISPLACEMENT: "TextureType_DISPLACEMENT",
    TextureType.EMISSIVE: "TextureType_EMISSIVE",
    TextureType.HEIGHT: "TextureType_HEIGHT",
    TextureType.LIGHTMAP: "TextureType_LIGHTMAP",
    TextureType.NORMALS: "TextureType_NORMALS",
    TextureType.OPACITY: "TextureType_OPACITY",
    TextureType.REFLECTION: "TextureType_REFLECTION",
    TextureType.SPECULAR: "TextureType_SPECULAR",
}


class SceneReadError(RuntimeError):
    """assimp could not produce a scene for the file."""


def _chunks(flat, size):
    return [tuple(flat[i:i + size]) for i in range(0, len(flat) - size + 1, size)]


def _flatten_matrix(rows):
    """4 rows of 4 -> 16 floats, row-major."""
    return [float(v) for row in rows for v in row]


def _convert_node(node):
    return SourceNode(
        name=node.name,
        transform=_flatten_matrix(node.transformation),
        children=[_convert_node(c) for c in node.children],
        mesh_indices=list(node.mesh_indices),
    )


def _convert_bone(bone):
    return SourceBone(
        name=bone.name,
        offset_matrix=_flatten_matrix(bone.offset_matrix),
        weights=[(int(vi), float(w)) for vi, w in zip(bone.weight_vertex_ids, bone.weights)],
    )


def _convert_mesh(mesh):
    uv = []
    if mesh.texcoords:
        # first channel only
        uv = [t[:2] for t in _chunks(mesh.texcoords[0], mesh.num_uv_components[0])]
    return SourceMesh(
        name=mesh.name,
        vertices=_chunks(mesh.vertices, 3),
        normals=_chunks(mesh.normals or [], 3),
        uv=uv,
        faces=[list(f) for f in _chunks(mesh.indices, 3)],
        bones=[_convert_bone(b) for b in (mesh.bones or [])],
        material_index=mesh.material_index,
    )


def _convert_material(material):
    color = material.get("COLOR_DIFFUSE")
    if color is not None:
        color = tuple(color) + (1.0,) * (4 - len(color))
    textures = {}
    assimp_textures = material.get("TEXTURES") or {}
    for slot, const_name in _ASSIMP_TEXTURE_TYPES.items():
        paths = assimp_textures.get(getattr(assimp_py, const_name))
        if paths:
            textures[slot] = paths[0]
    return SourceMaterial(
        name=material.get("NAME", ""),
        color_diffuse=color,
        textures=textures,
    )


def read_scene(path):
    """Import `path` with assimp and return a SourceScene.

    assimp_py raises FileNotFoundError, ValueError or MemoryError on its own;
    SceneReadError covers an empty result.
    """
    scene = assimp_py.import_file(os.fspath(path), POST_PROCESS)
    if scene is None:
        raise SceneReadError(f"assimp returned no scene for {path}")
    return SourceScene(
        root_node=_convert_node(scene.root_node),
        meshes=[_convert_mesh(m) for m in scene.meshes],
        materials=[_convert_material(m) for m in scene.materials],
    )
