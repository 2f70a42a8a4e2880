"""
Source scene model.

Plain containers for what the asset parser hands us: a node tree, meshes,
materials and bones. Matrices are 16 floats, row-major, translation in the
last column (the layout assimp uses).
"""

import enum


class TextureType(enum.Enum):
    DIFFUSE = "diffuse"
    DISPLACEMENT = "displacement"
    EMISSIVE = "emissive"
    HEIGHT = "height"
    LIGHTMAP = "lightmap"
    NORMALS = "normals"
    OPACITY = "opacity"
    REFLECTION = "reflection"
    SPECULAR = "specular"


# Order in which material slots are checked and recorded
TEXTURE_SLOTS = (
    TextureType.DIFFUSE,
    TextureType.DISPLACEMENT,
    TextureType.EMISSIVE,
    TextureType.HEIGHT,
    TextureType.LIGHTMAP,
    TextureType.NORMALS,
    TextureType.OPACITY,
    TextureType.REFLECTION,
    TextureType.SPECULAR,
)


def identity_matrix():
    return [1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0]


class SourceNode:
    def __init__(self, name="", transform=None, children=None, mesh_indices=None):
        self.name = name
        self.transform = transform if transform is not None else identity_matrix()
        self.children = children if children is not None else []
        self.mesh_indices = mesh_indices if mesh_indices is not None else []

    def __repr__(self):
        return f"SourceNode({self.name}, children={len(self.children)}, meshes={len(self.mesh_indices)})"


class SourceBone:
    def __init__(self, name="", offset_matrix=None, weights=None):
        self.name = name
        self.offset_matrix = offset_matrix if offset_matrix is not None else identity_matrix()
        # list of (vertex_id, weight)
        self.weights = weights if weights is not None else []

    def __repr__(self):
        return f"SourceBone({self.name}, weights={len(self.weights)})"


class SourceMesh:
    def __init__(self, name="", vertices=None, normals=None, uv=None, faces=None,
                 bones=None, material_index=0):
        self.name = name
        self.vertices = vertices if vertices is not None else []
        self.normals = normals if normals is not None else []
        self.uv = uv if uv is not None else []
        self.faces = faces if faces is not None else []
        self.bones = bones if bones is not None else []
        self.material_index = material_index

    @property
    def vertex_count(self):
        return len(self.vertices)

    @property
    def has_bones(self):
        return len(self.bones) > 0

    def __repr__(self):
        return (f"SourceMesh({self.name}, verts={len(self.vertices)}, "
                f"faces={len(self.faces)}, bones={len(self.bones)})")


class SourceMaterial:
    def __init__(self, name="", color_diffuse=None, textures=None):
        self.name = name
        # (r, g, b, a) in 0..1 or None
        self.color_diffuse = color_diffuse
        # TextureType -> file path
        self.textures = textures if textures is not None else {}

    def __repr__(self):
        return f"SourceMaterial({self.name}, textures={len(self.textures)})"


class SourceScene:
    def __init__(self, root_node=None, meshes=None, materials=None):
        self.root_node = root_node if root_node is not None else SourceNode("__root__")
        self.meshes = meshes if meshes is not None else []
        self.materials = materials if materials is not None else []

    def material_name(self, mesh):
        """Name of the material a mesh refers to ('' if the index is out of range)."""
        if 0 <= mesh.material_index < len(self.materials):
            return self.materials[mesh.material_index].name
        return ""

    def renderer_name(self, mesh):
        """Naming convention for renderer nodes: <meshName>_<materialName>."""
        return f"{mesh.name}_{self.material_name(mesh)}"
