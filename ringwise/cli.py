"""ringwise command line — rewind the polygons of a GeoJSON file."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from shapely.errors import ShapelyError

from ringwise.config import settings
from ringwise.features.normalizing import NormalizingFeatureCollection
from ringwise.io.geojson import read_geojson, write_geojson

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.ringwise_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ringwise",
        description="Rewrite polygon rings so exteriors are clockwise and holes follow them",
    )
    parser.add_argument("input", help="GeoJSON Feature or FeatureCollection file")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument(
        "--indent",
        type=int,
        default=settings.geojson_indent,
        help="Indent each output feature by N spaces",
    )
    return parser


def _write_file(features: Iterable[Any], path: str, indent: int | None, members: dict[str, Any]) -> None:
    """Write beside path under a temporary name and move it into place once complete."""
    target = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            write_geojson(features, f, indent=indent, members=members)
        os.replace(tmp, target)
    except BaseException:
        os.unlink(tmp)
        raise


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    _configure_logging()
    args = build_parser().parse_args(argv)

    try:
        source = read_geojson(args.input)
    except (OSError, ValueError) as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    collection = NormalizingFeatureCollection(source)
    try:
        with collection.features() as features:
            if args.output:
                _write_file(features, args.output, args.indent, collection.members())
            else:
                write_geojson(features, sys.stdout, indent=args.indent, members=collection.members())
    except (OSError, ValueError, ShapelyError) as e:
        logger.error("Cannot rewind %s after %d features: %s", args.input, features.features_read, e)
        return 1

    logger.info(
        "Done: %d features read, %d rewound",
        features.features_read,
        features.features_changed,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
