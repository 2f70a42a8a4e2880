"""
Import: one conversion run of an asset file into the target scene graph.

Usage:
    imp = Import("models/character.fbx")
    if imp.load():
        root = imp.root
        for renderer in imp.renderers: ...

Stages run in a fixed order: hierarchy, materials, meshes (with skinning),
bone node tree. Outputs are only meaningful once `is_loaded` is True.
"""

import logging
import os
import shutil

from .bone_tree import build_bone_node_tree
from .hierarchy import build_hierarchy
from .materials import convert_materials, default_material
from .meshes import process_meshes
from .skinning import build_node_index
from .texture_paths import CommonTexturePath, normalize_directory


class Import:
    def __init__(self, path, import_armature=True, base_material=None, logger=None,
                 scene_reader=None):
        self.log = logger or logging.getLogger("assetimport")
        self.import_bones = import_armature
        self.source_path = os.fspath(path).replace("\\", "/")
        self.base_material = base_material if base_material is not None else default_material()
        self.scene_reader = scene_reader

        self.scene = None
        self.root = None
        self.bones = []
        self.renderers = []
        self.materials = []
        self.material_textures = {}
        self.bone_nodes = []
        self.copied_path = None
        self._texture_paths = CommonTexturePath()
        self._started = False
        self.is_loaded = False

    # ------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------

    @property
    def source_file_name(self):
        return os.path.basename(self.source_path)

    @property
    def texture_paths(self):
        return self._texture_paths.texture_paths

    @property
    def has_bones(self):
        return len(self.bones) > 0

    @property
    def has_textures(self):
        return len(self._texture_paths) > 0

    @property
    def common_path(self):
        return self._texture_paths.get()

    @common_path.setter
    def common_path(self, value):
        self._texture_paths.set(value)

    # ------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------

    def _read_scene(self):
        reader = self.scene_reader
        if reader is None:
            from .assimp_source import read_scene
            reader = read_scene
        return reader(self.source_path)

    def load(self):
        """Run the whole conversion. Returns `is_loaded`."""
        if self._started:
            raise RuntimeError(f"{self.source_path} was already loaded by this Import")
        self._started = True

        self.log.debug(f"Loading of {self.source_path} started")
        if not os.path.isfile(self.source_path):
            self.log.error(f"File {self.source_path} does not exist")
            return False

        try:
            self.scene = self._read_scene()
        except (RuntimeError, OSError, ValueError, MemoryError) as e:
            self.log.error(f"Assimp import failed ({e}), aborting load process")
            return False
        if self.scene is None:
            self.log.error("Assimp import failed, aborting load process")
            return False

        self.root = build_hierarchy(self.scene, self.renderers, self.import_bones, self.log)
        self.materials = convert_materials(self.scene, self.base_material, self.material_textures,
                                           self.texture_paths, self.log)
        self._texture_paths.invalidate()
        process_meshes(self.scene, self.renderers, self.materials, self.root, self.bones,
                       import_armature=self.import_bones,
                       node_index=build_node_index(self.root, self.log), log=self.log)
        build_bone_node_tree(self.root, self.bones, self.bone_nodes)
        self.is_loaded = True
        self.log.debug(f"Loaded {self.source_file_name}: {len(self.renderers)} renderers, "
                       f"{len(self.materials)} materials, {len(self.bones)} bones")
        return True

    # ------------------------------------------------------------
    # Textures
    # ------------------------------------------------------------

    def copy_textures(self, destination):
        """Copy texture files below the common path into `destination`.

        The relative layout below the common path is kept. Afterwards every
        texture path points into `destination`. Returns the number of files
        copied.
        """
        if not self.has_textures:
            return 0
        destination = normalize_directory(destination)
        common = self.common_path
        copied = 0
        seen = set()
        for texture in self.texture_paths:
            if texture.path in seen:
                continue
            seen.add(texture.path)
            relative = texture.path[len(common):]
            target = destination + relative
            # assimp reports paths relative to the asset file
            source = texture.path
            if not os.path.isabs(source):
                source = os.path.join(os.path.dirname(self.source_path), source)
            if not os.path.isfile(source):
                self.log.warning(f"Texture {texture.path} does not exist, not copied")
                continue
            os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
            shutil.copyfile(source, target)
            copied += 1
        self.common_path = destination
        self.copied_path = destination
        self.log.debug(f"Copied {copied} textures to {destination}")
        return copied

    def __repr__(self):
        state = "loaded" if self.is_loaded else "not loaded"
        return f"Import({self.source_file_name}, {state})"
