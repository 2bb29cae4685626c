# main.py
import argparse
import logging
import sys
import numpy as np
from tqdm import tqdm
from pathtracer.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DEPTH, SAMPLES_PER_PIXEL
from pathtracer.renderer.image_output import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, earth_world


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Render a preset scene with the Monte Carlo path tracer.")
    p.add_argument("--scene", choices=sorted(SCENES), default="cover")
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    p.add_argument("--samples", type=int, default=SAMPLES_PER_PIXEL, help="samples per pixel")
    p.add_argument("--max-depth", type=int, default=MAX_DEPTH, help="bounce cap per path")
    p.add_argument("--seed", type=int, default=None, help="seed for scene and render randomness")
    p.add_argument("--workers", type=int, default=None, help="worker processes (default: one per CPU)")
    p.add_argument("--emission", action="store_true", help="let light materials add radiance")
    p.add_argument("--texture", default=None, help="image for the earth scene")
    p.add_argument("--output", default="image.png", help=".png or .ppm output path")
    p.add_argument("--preview", action="store_true", help="show the result in a window")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def build_scene(name: str, rng, texture=None):
    if name == "earth":
        return earth_world(rng, texture)
    return SCENES[name](rng)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed
    if seed is None:
        seed = np.random.SeedSequence().entropy
        print(f"Seed: {seed} (pass --seed {seed} to reproduce this render)")

    try:
        renderer = Renderer(args.width, args.height, samples_per_pixel=args.samples,
                            max_depth=args.max_depth, workers=args.workers,
                            emission=args.emission, seed=seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    scene_rng = np.random.default_rng(seed)
    try:
        world, settings = build_scene(args.scene, scene_rng, args.texture)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error building scene '{args.scene}': {e}", file=sys.stderr)
        return 1

    print(f"Building BVH for {len(world)} objects...")
    world.build_bvh(settings.time0, settings.time1, scene_rng)

    print(f"Rendering '{args.scene}' at {args.width}x{args.height}, "
          f"{args.samples} samples per pixel, {renderer.workers} worker(s)")
    with tqdm(total=args.height, unit="line", desc="Rendering") as bar:
        def progress(done, total):
            bar.update(done - bar.n)

        image = renderer.render(world, settings, progress=progress)

    try:
        save_image(image, args.output)
    except OSError as e:
        print(f"Error writing {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"Saved {args.output}")

    if args.preview:
        from pathtracer.preview import show_image
        show_image(image, title=f"Path Tracer - {args.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
