"""Command line entry point for procnoise."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .presets import FRACTAL_MODES, NOISE_GENERATORS, NoisePreset, PresetLoader


def _parse_resolution(value: str) -> tuple[int, int]:
    """Parse 'WxH' into (width, height)."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid resolution '{value}', expected WxH")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Resolution must be positive, got '{value}'")
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="procnoise - render seeded noise fields to images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        required=True,
        help="Image file to write (format from extension, e.g. .png)",
    )
    parser.add_argument(
        "-p", "--preset",
        metavar="NAME",
        help="Render a named YAML preset instead of the options below",
    )
    parser.add_argument(
        "--presets-dir",
        metavar="DIR",
        type=Path,
        action="append",
        help="Directory to search for presets (repeatable; default: assets/presets)",
    )
    parser.add_argument(
        "--noise",
        choices=list(NOISE_GENERATORS.keys()),
        default="perlin",
        help="Base noise type (default: perlin)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible output (default: random)",
    )
    parser.add_argument(
        "--fractal",
        choices=list(FRACTAL_MODES.keys()),
        default="fbm",
        help="Fractal mode (default: fbm)",
    )
    parser.add_argument("--octaves", type=int, default=4, help="Octave count (default: 4)")
    parser.add_argument("--persistence", type=float, default=0.5, help="Amplitude decay (default: 0.5)")
    parser.add_argument("--lacunarity", type=float, default=2.0, help="Frequency growth (default: 2.0)")
    parser.add_argument("--scale", type=float, default=4.0, help="Noise scale (default: 4.0)")
    parser.add_argument("--z", type=float, help="Sample a slice of 3D noise at this depth")
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        type=_parse_resolution,
        help="Output resolution (default: 256x256, or the preset's size)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_preset(args: argparse.Namespace) -> NoisePreset:
    """Build the preset to render from parsed arguments.

    Raises:
        FileNotFoundError: If a named preset does not exist
        ValueError: If the preset or options are invalid
    """
    if args.preset:
        loader = PresetLoader(args.presets_dir)
        preset = loader.load(args.preset)
        if args.resolution is not None:
            preset = replace(preset, size=args.resolution)
        return preset

    return NoisePreset(
        name="custom",
        noise_type=args.noise,
        seed=args.seed,
        fractal=args.fractal,
        octaves=args.octaves,
        persistence=args.persistence,
        lacunarity=args.lacunarity,
        size=args.resolution or (256, 256),
        scale=args.scale,
        z=args.z,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the procnoise renderer."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        preset = build_preset(args)
        generator = preset.build_generator()
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    width, height = preset.size

    print("procnoise - Seeded Noise Renderer")
    print("=" * 40)
    print(f"Preset:    {preset.name}")
    print(f"Generator: {generator!r}")
    print(f"Size:      {width}x{height} (scale {preset.scale})")

    output_path = Path(args.output)
    preset.save(output_path)
    print(f"Saved render to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
