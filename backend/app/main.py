"""Command-line entry point — generate blob frames and package the animation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from dotenv import load_dotenv
from pydantic import ValidationError

from app.config import Settings
from app.engine.config import BlobConfig
from app.engine.errors import BlobError
from app.engine.frames import build_frames
from app.models.blob import BlobRequest, BlobResult
from app.svg.animation import build_animated_svg, build_keyframes_css, build_static_svg, key_times
from app.svg.serializer import frames_to_d

logger = logging.getLogger(__name__)

FORMATS = ("svg", "animated", "css", "paths", "json")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def generate(
    req: BlobRequest,
    settings: Settings | None = None,
    config: BlobConfig | None = None,
) -> BlobResult:
    """Run the full pipeline for one request: frames → path data → packaged outputs."""
    settings = settings or Settings()
    config = config or BlobConfig()
    rng = np.random.default_rng(req.seed)

    frames = build_frames(req.frames, req.complexity, req.contrast, rng=rng, config=config)
    paths = frames_to_d(frames, req.precision)

    return BlobResult(
        complexity=req.complexity,
        contrast=req.contrast,
        seed=req.seed,
        paths=paths,
        key_times=key_times(len(paths)),
        static_svg=build_static_svg(paths[0], fill=settings.fill, view_box=config.view_box),
        animated_svg=build_animated_svg(
            paths,
            duration=settings.animation_duration,
            fill=settings.fill,
            view_box=config.view_box,
        ),
        keyframes_css=build_keyframes_css(paths),
    )


def render(result: BlobResult, fmt: str) -> str:
    if fmt == "svg":
        return result.static_svg
    if fmt == "animated":
        return result.animated_svg
    if fmt == "css":
        return result.keyframes_css
    if fmt == "paths":
        return "\n".join(result.paths)
    return result.model_dump_json(indent=2)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blobmorph", description="Random blob shapes and morph animations")
    parser.add_argument("--complexity", type=int, default=settings.default_complexity, help="Points per blob")
    parser.add_argument("--contrast", type=float, default=settings.default_contrast, help="Radius irregularity")
    parser.add_argument("--frames", type=int, default=settings.frame_count, help="Frames in the animation")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for reproducible output")
    parser.add_argument("--precision", type=int, default=settings.precision, help="Decimals in path data")
    parser.add_argument(
        "--full-precision",
        action="store_true",
        help="Write coordinates with full float precision (lossless)",
    )
    parser.add_argument("--format", choices=FORMATS, default="animated", help="What to emit")
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings()
    configure_logging(settings.blobmorph_log_level)

    args = build_parser(settings).parse_args(argv)

    try:
        req = BlobRequest(
            complexity=args.complexity,
            contrast=args.contrast,
            frames=args.frames,
            seed=args.seed,
            precision=None if args.full_precision else args.precision,
        )
        result = generate(req, settings)
    except (ValidationError, BlobError) as e:
        logger.error("Invalid parameters: %s", e)
        return 2

    text = render(result, args.format)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info("Saved %s (%d frames) → %s", args.format, len(result.paths), args.output)
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
