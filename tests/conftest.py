import logging

import pytest

from assetimport.scene import (SourceBone, SourceMaterial, SourceMesh,
                               SourceNode, SourceScene, TextureType)


def translation_matrix(x, y, z):
    return [1.0, 0.0, 0.0, x,
            0.0, 1.0, 0.0, y,
            0.0, 0.0, 1.0, z,
            0.0, 0.0, 0.0, 1.0]


def quad_mesh(name="Body", material_index=0, bones=None):
    return SourceMesh(
        name=name,
        vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
        normals=[(0, 0, 1)] * 4,
        uv=[(0, 0), (1, 0), (1, 1), (0, 1)],
        faces=[[0, 1, 2, 3]],
        bones=bones or [],
        material_index=material_index,
    )


def skinned_scene():
    """Root -> Armature -> Hips -> (Spine -> Head), plus a mesh node.

    The mesh is weighted to Hips, Spine and Head; Armature is not a bone.
    """
    bones = [
        SourceBone("Hips", translation_matrix(0, -1, 0), [(0, 0.7), (1, 0.5), (2, 0.25)]),
        SourceBone("Spine", translation_matrix(0, -2, 0), [(0, 0.7), (1, 0.5)]),
        SourceBone("Head", translation_matrix(0, -3, 0), [(1, 0.5), (2, 0.25)]),
    ]
    mesh = quad_mesh("Body", 0, bones)
    head = SourceNode("Head", translation_matrix(0, 1, 0))
    spine = SourceNode("Spine", translation_matrix(0, 1, 0), [head])
    hips = SourceNode("Hips", translation_matrix(0, 1, 0), [spine])
    armature = SourceNode("Armature", children=[hips])
    body = SourceNode("BodyNode", mesh_indices=[0])
    root = SourceNode("Root", children=[armature, body])
    materials = [SourceMaterial("Skin", (0.8, 0.6, 0.5, 1.0),
                                {TextureType.DIFFUSE: "C:/assets/tex/skin_d.png",
                                 TextureType.NORMALS: "C:/assets/tex/skin_n.png"})]
    return SourceScene(root, [mesh], materials)


@pytest.fixture
def log():
    return logging.getLogger("assetimport.test")


@pytest.fixture
def scene():
    return skinned_scene()
