import numpy as np

from assetimport.graph import RendererKind
from assetimport.hierarchy import build_hierarchy
from assetimport.scene import SourceMaterial, SourceNode, SourceScene

from conftest import quad_mesh, translation_matrix


def test_hierarchy_mirrors_source(scene):
    root = build_hierarchy(scene, [])
    assert root.name == "Root"
    assert [c.name for c in root.children] == ["Armature", "BodyNode"]
    hips = root.find("Hips")
    assert hips.parent.name == "Armature"
    assert [n.name for n in root.walk()] == [
        "Root", "Armature", "Hips", "Spine", "Head", "BodyNode", "Body_Skin"]


def test_renderer_nodes_named_after_mesh_and_material(scene):
    renderers = []
    root = build_hierarchy(scene, renderers)
    assert [r.name for r in renderers] == ["Body_Skin"]
    assert renderers[0].node.parent is root.find("BodyNode")
    assert renderers[0].kind is RendererKind.SKINNED
    assert renderers[0].mesh is None


def test_static_renderer_when_bones_disabled(scene):
    renderers = []
    build_hierarchy(scene, renderers, import_armature=False)
    assert renderers[0].kind is RendererKind.STATIC


def test_static_renderer_without_bones():
    mesh = quad_mesh("Crate")
    scene = SourceScene(SourceNode("Root", mesh_indices=[0, 0]), [mesh], [SourceMaterial("Wood")])
    renderers = []
    root = build_hierarchy(scene, renderers)
    assert [r.name for r in renderers] == ["Crate_Wood", "Crate_Wood"]
    assert all(r.kind is RendererKind.STATIC for r in renderers)
    assert len(root.children) == 2


def test_local_transforms_are_kept(scene):
    root = build_hierarchy(scene, [])
    head = root.find("Head")
    np.testing.assert_allclose(head.position, [0, 1, 0])
    np.testing.assert_allclose(head.world_matrix[:3, 3], [0, 3, 0], atol=1e-9)


def test_rotation_and_scale_conversion():
    # 90 degrees about z, scale 2
    m = [0.0, -2.0, 0.0, 1.0,
         2.0, 0.0, 0.0, 2.0,
         0.0, 0.0, 2.0, 3.0,
         0.0, 0.0, 0.0, 1.0]
    scene = SourceScene(SourceNode("Root", m), [], [])
    root = build_hierarchy(scene, [])
    np.testing.assert_allclose(root.scale, [2, 2, 2])
    np.testing.assert_allclose(root.position, [1, 2, 3])
    np.testing.assert_allclose(root.local_matrix, np.array(m).reshape(4, 4), atol=1e-9)


def test_mesh_node_keeps_world_placement_of_owner_parent():
    m = [0.0, -2.0, 0.0, 5.0,
         2.0, 0.0, 0.0, 0.0,
         0.0, 0.0, 2.0, 1.0,
         0.0, 0.0, 0.0, 1.0]
    holder = SourceNode("Holder", m, mesh_indices=[0])
    scene = SourceScene(SourceNode("Root", translation_matrix(0, 3, 0), [holder]),
                        [quad_mesh("Crate")], [SourceMaterial("Wood")])
    renderers = []
    root = build_hierarchy(scene, renderers)
    mesh_node = renderers[0].node
    assert mesh_node.parent is root.find("Holder")
    np.testing.assert_allclose(mesh_node.world_matrix, root.world_matrix, atol=1e-9)
    np.testing.assert_allclose(mesh_node.world_matrix[:3, 3], [0, 3, 0], atol=1e-9)


def test_mesh_node_under_translated_node_sits_at_parent_origin():
    holder = SourceNode("Holder", translation_matrix(5, 0, 0), mesh_indices=[0])
    scene = SourceScene(SourceNode("Root", children=[holder]), [quad_mesh("Crate")],
                        [SourceMaterial("Wood")])
    renderers = []
    build_hierarchy(scene, renderers)
    np.testing.assert_allclose(renderers[0].node.position, [-5, 0, 0], atol=1e-9)
    np.testing.assert_allclose(renderers[0].node.world_matrix[:3, 3], [0, 0, 0], atol=1e-9)


def test_mesh_node_identity_when_owner_untransformed(scene):
    renderers = []
    build_hierarchy(scene, renderers)
    np.testing.assert_allclose(renderers[0].node.local_matrix, np.identity(4), atol=1e-12)
