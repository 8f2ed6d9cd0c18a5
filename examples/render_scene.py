#!/usr/bin/env python3
"""Render the reference scene or a scene loaded from a JSON file.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH         Image width in pixels (default: 500)
    --height HEIGHT       Image height in pixels (default: 500)
    --output OUTPUT       Output file path, .png or .ppm (default: reference.png)
    --scene FILE          JSON scene file (default: built-in reference scene)
    --projection MODE     perspective or parallel (default: perspective)
    --cpu                 Force the CPU backend
    --preview             Show the result in a Matplotlib window
    --quiet               Suppress progress output

Example:
    python -m examples.render_scene --width 256 --height 256 --output small.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import taichi as ti


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the reference scene or a JSON scene file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=500,
        help="Image width in pixels (default: 500)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=500,
        help="Image height in pixels (default: 500)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="reference.png",
        help="Output file path, .png or .ppm (default: reference.png)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in reference scene)",
    )
    parser.add_argument(
        "--projection",
        choices=("perspective", "parallel"),
        default="perspective",
        help="Projection mode (default: perspective)",
    )
    parser.add_argument(
        "--cpu",
        action="store_true",
        help="Force the CPU backend",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    width: int = 500,
    height: int = 500,
    output_path: str = "reference.png",
    scene_path: str | None = None,
    projection: str = "perspective",
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.png or .ppm).
        scene_path: Optional JSON scene file. Files without a view are
            rendered from the reference view.
        projection: "perspective" or "parallel".
        preview: If True, show the image after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.glint.camera.projection import Projection
    from src.glint.core.renderer import Renderer
    from src.glint.scene.description import load_scene_file
    from src.glint.scene.manager import SceneManager
    from src.glint.scene.reference import create_reference_scene, create_reference_view

    if scene_path is None:
        config, view = create_reference_scene(), None
        scene_name = "reference scene"
    else:
        config, view = load_scene_file(scene_path)
        scene_name = scene_path
    if view is None:
        view = create_reference_view()

    if not quiet:
        print(
            f"Loading {scene_name}: {len(config.shapes)} shapes, {len(config.lights)} lights"
        )

    scene = SceneManager(config)
    renderer = Renderer(width, height)

    if not quiet:
        print(f"Rendering {width}x{height} ({projection} projection)...")

    elapsed = renderer.render(scene, view, Projection[projection.upper()])

    output_file = Path(output_path)
    renderer.save_image(output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Render time: {elapsed:.2f}s")

    if preview:
        from src.glint.preview.display import show_preview

        show_preview(renderer.get_image_numpy(), title=f"{scene_name} ({width}x{height})")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    # Use GPU if available, fall back to CPU
    if args.cpu:
        ti.init(arch=ti.cpu, default_fp=ti.f64)
        if not args.quiet:
            print("Using CPU backend")
    else:
        try:
            ti.init(arch=ti.gpu, default_fp=ti.f64)
            if not args.quiet:
                print("Using GPU backend")
        except Exception:
            ti.init(arch=ti.cpu, default_fp=ti.f64)
            if not args.quiet:
                print("Using CPU backend")

    try:
        render_scene(
            width=args.width,
            height=args.height,
            output_path=args.output,
            scene_path=args.scene,
            projection=args.projection,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
