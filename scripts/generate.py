#!/usr/bin/env python3
"""
CLI: Generate color files from one palette definition.
Usage:
  python scripts/generate.py                      # reads colors.yaml (or config "definition")
  python scripts/generate.py design/colors.yaml
  python scripts/generate.py colors.yaml --dry-run
  python scripts/generate.py colors.yaml --config config/ci.yaml
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from spectra.color import InvalidComponentFormat
from spectra.config import get_default_formats, get_definition_path, get_home_dir, get_log_level, load_config
from spectra.formatters import UnknownFormatKind
from spectra.loader import DefinitionError, load_palette
from spectra.pipeline import generate, render_outputs

logger = logging.getLogger("spectra.generate")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate palette and UIColor category files from a YAML palette definition."
    )
    parser.add_argument(
        "definition",
        type=Path,
        nargs="?",
        default=None,
        help="Palette definition YAML (default: config 'definition', colors.yaml).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print each output path and its content instead of writing files.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging.",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    level = "DEBUG" if args.verbose else get_log_level(config)
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(levelname)s: %(message)s")

    definition = args.definition or get_definition_path(config)
    try:
        if args.dry_run:
            palette = load_palette(definition, config=config)
            outputs = render_outputs(
                palette,
                get_home_dir(config),
                default_formats=get_default_formats(config),
            )
            for path, content in outputs:
                print(f"==> {path}")
                print(content)
            return 0
        paths = generate(definition, config=config)
    except (DefinitionError, InvalidComponentFormat, UnknownFormatKind) as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Writing output failed: %s", e)
        return 1
    print(f"Done. {len(paths)} file(s):")
    for path in paths:
        print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
