"""
Skinning: per-vertex bone weights, bind poses and bone references for a
skinned renderer.

Weights come per bone from the parser and are regrouped per vertex, scaled
down when a vertex is over-weighted (sum > 1), sorted heaviest first and
flattened into the two arrays the renderer consumes:

    bones_per_vertex[v]   number of weights of vertex v (at least 1)
    bone_weights          all weights, vertex after vertex
"""

from .graph import BoneWeight
from .transforms import convert_bind_pose


def build_node_index(root, log=None):
    """name -> node for the whole tree, depth-first pre-order, first name wins."""
    index = {}
    for node in root.walk():
        if node.name in index:
            if log:
                log.debug(f"Duplicate node name {node.name}, keeping the first one")
            continue
        index[node.name] = node
    return index


def collect_vertex_weights(bones):
    """{vertex_id: [BoneWeight, ...]} in bone order."""
    helper = {}
    for bone_index, bone in enumerate(bones):
        for vertex_id, weight in bone.weights:
            helper.setdefault(vertex_id, []).append(BoneWeight(bone_index, float(weight)))
    return helper


def normalize_weights(vertex_weights):
    """Rescale the weights of every vertex whose total exceeds 1.0.

    Under-weighted vertices are left alone.
    """
    for vertex_id, weights in vertex_weights.items():
        total = sum(w.weight for w in weights)
        if total > 1.0:
            vertex_weights[vertex_id] = [BoneWeight(w.bone_index, w.weight / total) for w in weights]
    return vertex_weights


def insert_sorted(entries, entry):
    """Insert before the first entry with a strictly lesser weight.

    Keeps `entries` non-increasing; equal weights stay in arrival order.
    """
    for i, existing in enumerate(entries):
        if existing.weight < entry.weight:
            entries.insert(i, entry)
            return entries
    entries.append(entry)
    return entries


def flatten_weights(vertex_weights, vertex_count):
    """Returns (bones_per_vertex, bone_weights).

    Vertices without any weight get a single (bone 0, 0.0) entry.
    """
    bones_per_vertex = []
    flat = []
    for vertex_id in range(vertex_count):
        weights = vertex_weights.get(vertex_id)
        if not weights:
            bones_per_vertex.append(1)
            flat.append(BoneWeight(0, 0.0))
            continue
        ordered = []
        for w in weights:
            insert_sorted(ordered, w)
        bones_per_vertex.append(len(ordered))
        flat.extend(ordered)
    return bones_per_vertex, flat


def resolve_bones(source_bones, node_index, bones, log=None):
    """Target node per source bone (None if missing); new ones go into `bones`."""
    resolved = []
    for bone in source_bones:
        node = node_index.get(bone.name)
        if node is None:
            if log:
                log.warning(f"Bone {bone.name} has no matching node in the hierarchy")
        elif node not in bones:
            bones.append(node)
        resolved.append(node)
    return resolved


def process_armature(mesh, renderer, root, bones, node_index=None, log=None, name=None):
    """Fill skin data of `renderer.mesh` and bone refs of `renderer` from `mesh`.

    `bones` is the run-wide list of unique bone nodes and is appended to.
    """
    if log:
        log.debug(f"Processing Armature on Mesh: {name or mesh.name}")
    if node_index is None:
        node_index = build_node_index(root, log)
    target_mesh = renderer.mesh

    vertex_weights = collect_vertex_weights(mesh.bones)
    bind_poses = [convert_bind_pose(bone.offset_matrix) for bone in mesh.bones]
    renderer.bones = resolve_bones(mesh.bones, node_index, bones, log)

    normalize_weights(vertex_weights)
    bones_per_vertex, weights = flatten_weights(vertex_weights, target_mesh.vertex_count)

    target_mesh.bind_poses = bind_poses
    target_mesh.set_bone_weights(bones_per_vertex, weights)
    return target_mesh
