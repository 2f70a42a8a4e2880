#!/usr/bin/env python3
"""
Load an asset and print what the converter produced.

Usage: assetimport-inspect <model.fbx> [--no-bones] [--copy-textures DIR] [-v]
"""

import argparse
import logging
import sys

from .importer import Import


def print_node(node, depth=0):
    line = f"{'  ' * depth}{node.name or '(unnamed)'}"
    if node.renderer is not None:
        line += f"  [{node.renderer.kind.value}]"
    print(line)
    for child in node.children:
        print_node(child, depth + 1)


def print_summary(imp):
    print(f"\n{'=' * 60}")
    print(f"FILE: {imp.source_file_name}")
    print(f"{'=' * 60}")

    print("\n--- NODE HIERARCHY ---")
    print_node(imp.root)

    print(f"\n--- RENDERERS ({len(imp.renderers)}) ---")
    for renderer in imp.renderers:
        mesh = renderer.mesh
        if mesh is None:
            print(f"  {renderer.name}: (no mesh)")
            continue
        print(f"  {renderer.name}: verts={mesh.vertex_count} tris={len(mesh.triangles) // 3} "
              f"indices={mesh.index_format.value}bit")
        if renderer.is_skinned:
            names = [b.name if b is not None else "?" for b in renderer.bones]
            print(f"    bones={len(names)}: {', '.join(names)}")

    print(f"\n--- MATERIALS ({len(imp.materials)}) ---")
    for material in imp.materials:
        r, g, b, a = material.color
        print(f"  {material.name}: color=({r:.3f}, {g:.3f}, {b:.3f}, {a:.3f})")
        for texture in imp.material_textures.get(material, []):
            print(f"    {texture.texture_type.value}: {texture.path}")
    print(f"  common path: {imp.common_path}")

    print(f"\n--- BONE TREE ({len(imp.bone_nodes)}) ---")
    for bone_node in imp.bone_nodes:
        parent = imp.bone_nodes[bone_node.parent].name if bone_node.parent >= 0 else "-"
        print(f"{'  ' * (bone_node.depth + 1)}{bone_node.name}  (parent={parent})")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a 3D asset and print the resulting scene graph")
    parser.add_argument("input", help="Asset file (anything assimp reads)")
    parser.add_argument("--no-bones", action="store_true", help="Import skinned meshes as static meshes")
    parser.add_argument("--copy-textures", metavar="DIR", help="Copy textures to DIR and rebase their paths")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    imp = Import(args.input, import_armature=not args.no_bones)
    if not imp.load():
        print(f"ERROR: Failed to load {args.input}")
        return 1

    if args.copy_textures:
        copied = imp.copy_textures(args.copy_textures)
        print(f"Copied {copied} textures to {imp.copied_path}")

    print_summary(imp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
