"""
Bone node tree: the target hierarchy reduced to nodes used as bones.

Stored as a flat list (arena) of BoneNode records in depth-first order; a
record's parent is the index of its nearest bone ancestor, or -1. Depth
counts bone ancestors only.
"""

from .graph import BoneNode


def build_bone_node_tree(root, bones, bone_nodes=None):
    """Returns the list of BoneNodes for every node of `root` found in `bones`."""
    if bone_nodes is None:
        bone_nodes = []
    bone_ids = {id(b) for b in bones if b is not None}
    # children pushed in reverse so they pop in tree order
    stack = [(root, 0, -1)]
    while stack:
        node, depth, parent = stack.pop()
        if id(node) in bone_ids:
            bone_nodes.append(BoneNode(node, parent, depth))
            parent = len(bone_nodes) - 1
            depth += 1
        for child in reversed(node.children):
            stack.append((child, depth, parent))
    return bone_nodes
