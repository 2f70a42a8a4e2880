"""
Mesh conversion: geometry copy, triangulation with reversed winding and
binding of the result to the renderer created for it.
"""

from .graph import IndexFormat, TargetMesh
from .skinning import process_armature

# Largest vertex count that still fits 16-bit indices
MAX_UINT16_VERTICES = 65000


def triangulate(faces):
    """Fan-triangulate faces with reversed winding.

    Faces with fewer than 3 indices (points, lines) are dropped. A face
    [a, b, c, d] gives (c, b, a) and (d, c, a).
    """
    indices = []
    for face in faces:
        if len(face) < 3:
            continue
        for i in range(len(face) - 2):
            indices.append(face[i + 2])
            indices.append(face[i + 1])
            indices.append(face[0])
    return indices


def index_format_for(vertex_count):
    if vertex_count > MAX_UINT16_VERTICES:
        return IndexFormat.UINT32
    return IndexFormat.UINT16


def convert_mesh(mesh, scene=None, log=None):
    """SourceMesh -> TargetMesh (geometry only, no skin data)."""
    name = scene.renderer_name(mesh) if scene is not None else mesh.name
    if log:
        log.debug(f"Converting Mesh: {name}")
    target = TargetMesh(mesh.name)
    target.vertices = [tuple(v) for v in mesh.vertices]
    target.normals = [tuple(n) for n in mesh.normals]
    target.uv = [tuple(t[:2]) for t in mesh.uv]
    target.triangles = triangulate(mesh.faces)
    target.index_format = index_format_for(len(target.vertices))
    return target


def find_renderer(renderers, name, log=None):
    """First renderer named `name`, or None (logged as a warning)."""
    for renderer in renderers:
        if renderer.name == name:
            return renderer
    if log:
        log.warning(f"Renderer with the name {name} was not found")
    return None


def process_meshes(scene, renderers, materials, root, bones, import_armature=True,
                   bound=None, node_index=None, log=None):
    """Convert every mesh of the scene and attach it to its renderer.

    Meshes whose renderer cannot be found are skipped. A renderer is bound
    once; a second mesh resolving to an already bound renderer (duplicate
    mesh/material naming) is reported and skipped. Skinned meshes are
    handed to the armature processor, which appends to `bones`.
    """
    if log:
        log.debug("Processing Meshes")
    if bound is None:
        bound = set()
    for mesh in scene.meshes:
        name = scene.renderer_name(mesh)
        renderer = find_renderer(renderers, name, log)
        if renderer is None:
            continue
        if id(renderer) in bound:
            if log:
                log.warning(f"Renderer {name} is already bound to another mesh, skipping {mesh.name}")
            continue
        bound.add(id(renderer))

        target_mesh = convert_mesh(mesh, scene, log)
        renderer.mesh = target_mesh
        if 0 <= mesh.material_index < len(materials):
            renderer.material = materials[mesh.material_index]

        if mesh.has_bones and import_armature and renderer.is_skinned:
            process_armature(mesh, renderer, root, bones, node_index=node_index, log=log, name=name)
