"""
Target scene graph: nodes, renderers, meshes, materials and the skeleton
records produced by a conversion run.

Rotations are quaternions in (w, x, y, z) order, the convention of
trimesh.transformations.
"""

import collections
import copy
import enum

import numpy as np

from .transforms import trs_matrix


# ============================================================
# Nodes
# ============================================================

class TargetNode:
    def __init__(self, name=""):
        self.name = name
        self.position = np.zeros(3)
        self.rotation = np.array([1.0, 0.0, 0.0, 0.0])
        self.scale = np.ones(3)
        self.parent = None
        self.children = []
        self.renderer = None

    def set_parent(self, parent):
        """Attach under `parent`, keeping the local transform as is."""
        if self.parent is not None:
            self.parent.children.remove(self)
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    @property
    def local_matrix(self):
        return trs_matrix(self.position, self.rotation, self.scale)

    @property
    def world_matrix(self):
        if self.parent is None:
            return self.local_matrix
        return self.parent.world_matrix @ self.local_matrix

    def walk(self):
        """Depth-first, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name):
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def __repr__(self):
        return f"TargetNode({self.name}, children={len(self.children)})"


# ============================================================
# Renderers
# ============================================================

class RendererKind(enum.Enum):
    STATIC = "static"
    SKINNED = "skinned"


class Renderer:
    """Drawable attached to a node. Skinned renderers also carry bone refs."""

    def __init__(self, node, kind):
        self.node = node
        self.kind = kind
        self.mesh = None
        self.material = None
        # skinned only, aligned with mesh.bind_poses
        self.bones = []
        node.renderer = self

    @property
    def name(self):
        return self.node.name

    @property
    def is_skinned(self):
        return self.kind is RendererKind.SKINNED

    def __repr__(self):
        return f"Renderer({self.name}, {self.kind.value})"


# ============================================================
# Meshes
# ============================================================

class IndexFormat(enum.Enum):
    UINT16 = 16
    UINT32 = 32


BoneWeight = collections.namedtuple("BoneWeight", ["bone_index", "weight"])


class TargetMesh:
    def __init__(self, name=""):
        self.name = name
        self.vertices = []
        self.normals = []
        self.uv = []
        self.triangles = []
        self.index_format = IndexFormat.UINT16
        self.bind_poses = []
        self.bones_per_vertex = []
        self.bone_weights = []

    @property
    def vertex_count(self):
        return len(self.vertices)

    @property
    def has_bone_weights(self):
        return len(self.bones_per_vertex) > 0

    def set_bone_weights(self, bones_per_vertex, weights):
        if len(bones_per_vertex) != self.vertex_count:
            raise ValueError(f"Expected {self.vertex_count} bone counts, got {len(bones_per_vertex)}")
        if sum(bones_per_vertex) != len(weights):
            raise ValueError("Bone counts do not match the number of weights")
        self.bones_per_vertex = list(bones_per_vertex)
        self.bone_weights = list(weights)

    def vertex_weights(self, vertex_index):
        """Sorted weights of a single vertex."""
        start = sum(self.bones_per_vertex[:vertex_index])
        return self.bone_weights[start:start + self.bones_per_vertex[vertex_index]]

    def __repr__(self):
        return f"TargetMesh({self.name}, verts={len(self.vertices)}, tris={len(self.triangles) // 3})"


# ============================================================
# Materials
# ============================================================

class TargetMaterial:
    def __init__(self, name="", shader="Standard", color=(1.0, 1.0, 1.0, 1.0), properties=None):
        self.name = name
        self.shader = shader
        self.color = tuple(color)
        self.properties = properties or {}

    def clone(self):
        return copy.deepcopy(self)

    def __repr__(self):
        return f"TargetMaterial({self.name}, shader={self.shader})"


class TexturePath:
    def __init__(self, material, texture_type, path):
        self.material = material
        self.texture_type = texture_type
        self.path = path

    def __repr__(self):
        return f"TexturePath({self.material.name}, {self.texture_type.value}, {self.path})"


# ============================================================
# Skeleton
# ============================================================

class BoneNode:
    """Entry of the bone node arena; `parent` is an index into it or -1."""

    def __init__(self, node, parent=-1, depth=0):
        self.node = node
        self.parent = parent
        self.depth = depth

    @property
    def name(self):
        return self.node.name

    def __repr__(self):
        return f"BoneNode({self.name}, parent={self.parent}, depth={self.depth})"
