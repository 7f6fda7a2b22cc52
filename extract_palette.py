#!/usr/bin/env python3
"""
extract_palette.py
Print the dominant colour palette of one image or every image in a folder.

Usage:
  python extract_palette.py INPUT --size N --max-resolution N --step N --threshold X
                            --sort [population|population-asc|hex] --json --jobs J --debug

Input:
  Any Pillow-readable image, or a folder of them. Pixels with alpha < 128 are ignored.

Output:
  One line per swatch: hex, readable text colour, pixel count, share, hue,
  saturation and luminance. --json prints {file name: [swatch, ...]} instead.

Exit status:
  0 on success, 1 if any image failed to load or read, 2 if INPUT does not exist.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Sequence

from palette_extract.constants import IMAGE_EXTENSIONS, PALETTE_DEFAULTS, SORT_MODES, PaletteConfig
from palette_extract.core_types import PaletteColor
from palette_extract.errors import PaletteError
from palette_extract.extract import extract_with_config
from palette_extract.ranking import sort_palette
from palette_extract.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    palette_line,
    print_banner,
    print_config_line,
    warn,
)

# CLI args


def _default_jobs() -> int:
    """Leave a core free for the system."""
    return max(1, (os.cpu_count() or 2) - 1)


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette extraction.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        size, max_resolution, step, threshold: extraction knobs
        sort: display order
        json: bool, machine-readable output
        jobs: files processed in parallel
        debug: bool for timings and sizes
    """
    parser = argparse.ArgumentParser(
        prog="extract_palette",
        description="Extract a readable colour palette from image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--size",
        type=int,
        default=PALETTE_DEFAULTS.palette_size,
        help="Maximum number of colours to report",
    )
    parser.add_argument(
        "--max-resolution",
        type=int,
        default=PALETTE_DEFAULTS.max_resolution,
        help="Downscale so the longer side is at most this many pixels",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=PALETTE_DEFAULTS.sample_step,
        help="Sample every Nth pixel",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=PALETTE_DEFAULTS.near_duplicate_threshold,
        help="RGB distance for merging near-duplicate colours (<=0 disables)",
    )
    parser.add_argument(
        "--sort", choices=list(SORT_MODES), default="population", help="Display order"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--jobs", type=int, default=_default_jobs(), help="Files processed in parallel"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose timings")
    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> PaletteConfig:
    return PaletteConfig(
        palette_size=args.size,
        max_resolution=args.max_resolution,
        sample_step=args.step,
        near_duplicate_threshold=args.threshold,
    ).normalised()


def _list_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing


class ImageResult(NamedTuple):
    path: Path
    palette: List[PaletteColor]
    failure: Optional[str]
    seconds: float


def _extract_one(path: Path, config: PaletteConfig, sort_mode: str) -> ImageResult:
    """Extract and sort one image's palette; PaletteError becomes a failure message."""
    t_start = time.perf_counter()
    try:
        palette = sort_palette(extract_with_config(path, config), sort_mode)
    except PaletteError as exc:
        return ImageResult(path, [], str(exc), time.perf_counter() - t_start)
    return ImageResult(path, palette, None, time.perf_counter() - t_start)


def _extract_all(
    files: List[Path], config: PaletteConfig, sort_mode: str, jobs: int
) -> List[ImageResult]:
    """Run extractions, in parallel when jobs > 1. Results keep file order."""
    if jobs <= 1 or len(files) <= 1:
        return [_extract_one(p, config, sort_mode) for p in files]
    with ThreadPoolExecutor(max_workers=jobs) as ex:
        return list(ex.map(lambda p: _extract_one(p, config, sort_mode), files))


def _report_image(result: ImageResult, sort_mode: str, debug: bool) -> None:
    print_banner(result.path.name)
    if result.failure is not None:
        error(f"{result.path.name}: {result.failure}")
        return

    if not result.palette:
        log("No opaque pixels sampled; palette is empty.")
    else:
        log(f"Colours ({len(result.palette)}, sorted by {sort_mode}):")
        for colour in result.palette:
            log(palette_line(colour))

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Swatches", len(result.palette)),
                    ("Sampled", sum(c.population for c in result.palette)),
                    ("Time", format_total_duration_compact(result.seconds)),
                ]
            )
        )


def _json_payload(results: List[ImageResult]) -> Dict[str, object]:
    payload: Dict[str, object] = {}
    for r in results:
        if r.failure is not None:
            payload[r.path.name] = {"error": r.failure}
        else:
            payload[r.path.name] = [c.as_dict() for c in r.palette]
    return payload


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles single file or folder. In folder mode supports --jobs parallelism
    while preserving readable output ordering.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    config = _config_from_args(args)

    src = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    files = _list_images(src) if src.is_dir() else [src]
    if not files:
        warn(f"no images found in {src}")
        return 0

    if not args.json:
        print_config_line(
            "extract",
            [
                ("Size", config.palette_size),
                ("Max res", config.max_resolution),
                ("Step", config.sample_step),
                ("Threshold", config.near_duplicate_threshold),
                ("Images", len(files)),
                ("Jobs", args.jobs),
                ("Debug", args.debug),
            ],
            debug=False,
        )

    t_start = time.perf_counter()
    results = _extract_all(files, config, args.sort, args.jobs)

    if args.json:
        print(json.dumps(_json_payload(results), indent=2), flush=True)
    else:
        for result in results:
            _report_image(result, args.sort, args.debug)
        if args.debug:
            debug_log(f"Total {format_total_duration_compact(time.perf_counter() - t_start)}")

    return 0 if all(r.failure is None for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
