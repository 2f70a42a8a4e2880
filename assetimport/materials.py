"""
Material conversion.

Each source material becomes a clone of a base material template with the
diffuse color copied over. Texture files are not loaded; each texture slot
only produces a TexturePath record.
"""

from .graph import TargetMaterial, TexturePath
from .scene import TEXTURE_SLOTS


def default_material():
    """Standard opaque lit material used when the caller supplies none."""
    return TargetMaterial(
        name="Default",
        shader="Standard",
        color=(1.0, 1.0, 1.0, 1.0),
        properties={"render_mode": "opaque", "metallic": 0.0, "glossiness": 0.5},
    )


def convert_material(material, base_material):
    """Returns (TargetMaterial, [TexturePath, ...])."""
    target = base_material.clone()
    target.name = material.name
    if material.color_diffuse is not None:
        r, g, b, a = material.color_diffuse
        target.color = (float(r), float(g), float(b), float(a))

    texture_paths = []
    for slot in TEXTURE_SLOTS:
        path = material.textures.get(slot)
        if path:
            texture_paths.append(TexturePath(target, slot, path))
    return target, texture_paths


def convert_materials(scene, base_material, material_textures, texture_paths, log=None):
    """Convert every scene material, in scene order.

    Fills `material_textures` (material -> its TexturePaths) and appends to
    the global `texture_paths` list. Returns the converted materials.
    """
    if log:
        log.debug("Processing Materials")
    materials = []
    for material in scene.materials:
        if log:
            log.debug(f"Processing Material: {material.name}")
        target, paths = convert_material(material, base_material)
        material_textures[target] = paths
        texture_paths.extend(paths)
        materials.append(target)
    return materials
