import numpy as np

from assetimport.meshes import convert_mesh
from assetimport.scene import SourceBone, SourceMaterial, SourceMesh, SourceNode, SourceScene


def test_numpy_inputs_are_accepted():
    mesh = SourceMesh("m", vertices=np.zeros((4, 3)), normals=np.zeros((4, 3)),
                      uv=np.zeros((4, 2)), faces=np.array([[0, 1, 2, 3]]))
    node = SourceNode("n", transform=np.identity(4).reshape(16), mesh_indices=np.array([0]))
    bone = SourceBone("b", offset_matrix=np.identity(4).reshape(16), weights=np.array([[0, 1.0]]))
    assert mesh.vertex_count == 4
    assert len(node.transform) == 16
    assert len(bone.weights) == 1
    assert convert_mesh(mesh).triangles == [2, 1, 0, 3, 2, 0]


def test_defaults():
    node = SourceNode("n")
    assert node.transform[0] == 1.0 and node.children == [] and node.mesh_indices == []
    assert SourceMesh("m").has_bones is False
    assert SourceMaterial("mat").textures == {}
    assert SourceScene().root_node.name == "__root__"


def test_renderer_name_uses_material():
    scene = SourceScene(meshes=[SourceMesh("Body", material_index=1)],
                        materials=[SourceMaterial("A"), SourceMaterial("Skin")])
    assert scene.renderer_name(scene.meshes[0]) == "Body_Skin"
    assert scene.renderer_name(SourceMesh("Loose", material_index=7)) == "Loose_"
