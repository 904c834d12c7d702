from __future__ import annotations

from pathlib import Path
import argparse
import logging
import sys

from pydantic import ValidationError

from advantage_layout.model.commands import Platform
from advantage_layout.shortcut.frontend import ShortcutFrontend

from .backend import KinesisBackend

logger = logging.getLogger(__name__)


def compile_toml_config(
    in_path: str | Path, out_path: str | Path, *, platform: Platform | None = None
) -> str:
    """End-to-end compilation: TOML file -> keyboard layout text file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = ShortcutFrontend()
    config = frontend.load_toml(in_path)
    builder = frontend.parse_config(config)
    description = str(config.get("description") or in_path.stem)
    if platform is not None:
        builder.set_platform(platform)

    text = KinesisBackend().render(builder.make())
    out_path.write_text(text, encoding="utf-8")
    lines = text.count("\n") + 1 if text else 0
    logger.info("wrote %s: %s (%d lines)", out_path, description, lines)
    return text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="advantage-layout",
        description="Generate a Kinesis Advantage layout file from a layout config toml.",
    )
    parser.add_argument("config", help="Layout config toml path (e.g. layout.toml)")
    parser.add_argument("out", help="Output layout file path (e.g. layout1.txt)")
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=None,
        help="Override the platform used to resolve editing commands",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    platform = Platform(args.platform) if args.platform else None
    try:
        compile_toml_config(args.config, args.out, platform=platform)
    except (OSError, ValueError, ValidationError) as exc:
        print(f"advantage-layout: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
