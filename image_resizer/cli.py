"""Консольный ресайз одного изображения без GUI."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from image_resizer.config import ResizerConfig, configure_logging
from image_resizer.models.errors import ResizerError
from image_resizer.models.resize_model import Dimensions, ResizeMode
from image_resizer.services.export_service import format_file_size, save_bytes
from image_resizer.services.image_service import ImageService
from image_resizer.services.resize_service import ResizeService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-resizer-cli",
        description="Resize an image to JPEG using exact, fit or fill geometry.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input", type=Path, help="Input image path")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output path (default: <name>_<w>x<h>.jpg next to the input)",
    )
    parser.add_argument("-W", "--width", type=int, required=True, help="Target width in pixels")
    parser.add_argument("-H", "--height", type=int, required=True, help="Target height in pixels")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ResizeMode],
        default=ResizerConfig.default_mode.value,
        help="Resize mode",
    )
    parser.add_argument(
        "--quality",
        type=float,
        default=ResizerConfig.default_quality,
        help="JPEG quality in [0, 1]",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=ResizerConfig.log_level,
        help="Logging verbosity",
    )
    return parser


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = ResizerConfig(
            default_quality=args.quality,
            default_mode=ResizeMode.parse(args.mode),
            log_level=args.log_level,
        )
        service = ResizeService(config)
        image_data = ImageService().load_image(args.input)
        request = service.build_request(image_data, Dimensions(args.width, args.height), config.default_mode)
        resized = service.resize(image_data, request)
        output = args.output or image_data.path.with_name(resized.default_filename)
        saved = save_bytes(resized.encoded, output)
    except (ResizerError, OSError) as exc:
        logger.debug("resize failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{resized.width}x{resized.height} {format_file_size(resized.size_bytes)} -> {saved}")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
