"""
Node hierarchy builder.

Mirrors the source node tree into TargetNodes, converts each local transform
and adds one child node with a renderer placeholder per mesh reference. No
geometry or materials are attached here.
"""

from .graph import Renderer, RendererKind, TargetNode
from .transforms import convert_node_transform, inverse_transform


def build_hierarchy(scene, renderers, import_armature=True, log=None):
    """Build the target tree for `scene.root_node`.

    Every renderer created is appended to `renderers` in creation order;
    later stages find them by name.
    """
    return _build_from_node(scene, scene.root_node, renderers, import_armature, log)


def _build_from_node(scene, node, renderers, import_armature, log):
    target = TargetNode(node.name)
    target.position, target.rotation, target.scale = convert_node_transform(node.transform)

    for mesh_index in node.mesh_indices:
        mesh = scene.meshes[mesh_index]
        mesh_node = TargetNode(scene.renderer_name(mesh))
        # attached keeping world placement while `target` is still unparented
        mesh_node.position, mesh_node.rotation, mesh_node.scale = inverse_transform(target.local_matrix)
        mesh_node.set_parent(target)
        if mesh.has_bones and import_armature:
            kind = RendererKind.SKINNED
        else:
            kind = RendererKind.STATIC
        renderers.append(Renderer(mesh_node, kind))
        if log:
            log.debug(f"Created {kind.value} renderer {mesh_node.name} under {target.name}")

    for child in node.children:
        child_target = _build_from_node(scene, child, renderers, import_armature, log)
        child_target.set_parent(target)
    return target
