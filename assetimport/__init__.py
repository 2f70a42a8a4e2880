"""
assetimport - convert scenes parsed by assimp into a native scene graph:
node hierarchy, static and skinned renderers, materials with texture paths
and skeleton data.
"""

from .bone_tree import build_bone_node_tree
from .graph import (BoneNode, BoneWeight, IndexFormat, Renderer, RendererKind,
                    TargetMaterial, TargetMesh, TargetNode, TexturePath)
from .hierarchy import build_hierarchy
from .importer import Import
from .materials import convert_materials, default_material
from .meshes import MAX_UINT16_VERTICES, process_meshes, triangulate
from .scene import (TEXTURE_SLOTS, SourceBone, SourceMaterial, SourceMesh,
                    SourceNode, SourceScene, TextureType)
from .skinning import process_armature
from .texture_paths import CommonTexturePath

__version__ = "0.1.0"

__all__ = [
    # Entry point
    'Import',
    # Source model
    'SourceScene',
    'SourceNode',
    'SourceMesh',
    'SourceBone',
    'SourceMaterial',
    'TextureType',
    'TEXTURE_SLOTS',
    # Target graph
    'TargetNode',
    'Renderer',
    'RendererKind',
    'TargetMesh',
    'BoneWeight',
    'IndexFormat',
    'TargetMaterial',
    'TexturePath',
    'BoneNode',
    # Stages
    'build_hierarchy',
    'convert_materials',
    'default_material',
    'CommonTexturePath',
    'process_meshes',
    'triangulate',
    'MAX_UINT16_VERTICES',
    'process_armature',
    'build_bone_node_tree',
]
