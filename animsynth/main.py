"""AnimSynth - Command-line entry point.

Merges the blendshape channels of one base clip into each target clip
and writes one synthesized clip per target.

Usage:
    animsynth --base Base.json --target Smile.json Wink.json \\
        --output-dir Assets/Synth --suffix _synth

Defaults for the output directory, naming and zero threshold come from
``ANIMSYNTH_*`` environment variables (see ``animsynth.config.settings``).
"""

import argparse
import sys
from typing import Sequence

import structlog
from pydantic import ValidationError

from animsynth import __version__
from animsynth.config.settings import Settings, get_settings
from animsynth.exceptions import AnimSynthError, InvalidConfigError
from animsynth.observability.logging import init_logging
from animsynth.observability.metrics import record_error, set_build_info, write_metrics
from animsynth.storage.clips import JsonClipWriter, load_clip
from animsynth.synthesis.batch import synthesize_batch

logger = structlog.get_logger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the argument parser with settings-backed defaults."""
    parser = argparse.ArgumentParser(
        prog="animsynth",
        description="Synthesize blendshape animation clips from a base and target clips",
    )
    parser.add_argument("--base", required=True, help="Base clip JSON file")
    parser.add_argument(
        "--target",
        nargs="+",
        required=True,
        help="Target clip JSON files; one output clip is written per target",
    )
    parser.add_argument(
        "--output-dir", default=settings.output_dir, help="Directory for output clips"
    )
    parser.add_argument("--prefix", default=settings.prefix, help="Output name prefix")
    parser.add_argument("--suffix", default=settings.suffix, help="Output name suffix")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.log_json,
        help="Emit JSON log lines",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def load_settings() -> Settings:
    """Load settings, converting validation failures to config errors."""
    try:
        return get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"]) or "settings"
        raise InvalidConfigError(key, error.get("input"), error["msg"]) from e


def export_metrics(path: str) -> None:
    """Write the metrics textfile. A failed export never changes the exit code."""
    try:
        write_metrics(path)
    except OSError as e:
        logger.error("metrics_write_failed", path=path, reason=e.strerror or str(e))
        record_error("cli", "metrics")


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute one batch and return the process exit code."""
    try:
        base = load_clip(args.base)
        targets = [load_clip(path) for path in args.target]
        results = synthesize_batch(
            base,
            targets,
            args.output_dir,
            args.prefix,
            args.suffix,
            writer=JsonClipWriter(),
            zero_epsilon=settings.zero_epsilon,
        )
    except AnimSynthError as e:
        logger.error("animsynth_failed", **e.to_dict())
        record_error("cli", type(e).__name__)
        return 1
    finally:
        if settings.metrics_textfile:
            export_metrics(settings.metrics_textfile)

    for result in results:
        print(result.output_path)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = load_settings()
    except InvalidConfigError as e:
        print(f"animsynth: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    init_logging(json_format=args.json_logs, level=args.log_level)
    set_build_info(__version__)

    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
