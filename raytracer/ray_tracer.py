import argparse
import logging
import sys
import time

from raytracer.camera import WallCamera
from raytracer.canvas import CanvasWriteError
from raytracer.renderer import render_shaded, render_silhouette
from raytracer.scene_parser import SceneParseError, parse_scene_file
from raytracer.typings.color import Color

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('output_image', type=str, help='Path of the output PPM image')
    parser.add_argument(
        '--mode',
        choices=('shaded', 'silhouette'),
        default='shaded',
        help='Phong shading, or a flat silhouette of every hit',
    )
    parser.add_argument('--size', type=int, default=None, help='Override the canvas size from the scene file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log per-scanline progress')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    parse_start = time.perf_counter()
    try:
        scene = parse_scene_file(args.scene_file)
    except (OSError, SceneParseError) as exc:
        logger.error("Could not load scene %s: %s", args.scene_file, exc)
        return 1
    log_phase("parse_scene", time.perf_counter() - parse_start)

    if args.size is not None:
        if args.size <= 0:
            parser.error('--size must be positive')
        scene.settings.canvas_pixels = args.size
    camera = WallCamera.from_settings(scene.camera_origin, scene.settings)
    logger.info(
        "Rendering %d shape(s) at %dx%d (%s)",
        len(scene.shapes), camera.canvas_pixels, camera.canvas_pixels, args.mode,
    )

    render_start = time.perf_counter()
    if args.mode == 'silhouette':
        canvas = render_silhouette(camera, scene.shapes, Color(1.0, 0.2, 0.2))
    else:
        canvas = render_shaded(camera, scene.shapes, scene.light)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    try:
        canvas.save(args.output_image)
    except CanvasWriteError as exc:
        logger.error("%s", exc)
        return 1
    log_phase("save_image", time.perf_counter() - save_start)
    return 0


if __name__ == '__main__':
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        exit_code = main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
    sys.exit(exit_code)
