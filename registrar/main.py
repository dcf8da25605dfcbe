"""
Main entry point for the Registrar package.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cli import RegistrarShell
from .config import AppConfig, load_config
from .core.enums import ReportFormat
from .core.exceptions import ConfigurationError
from .sample_data import create_sample_data
from .services import reports
from .services.registry import Registry


logger = logging.getLogger(__name__)


def setup_logging(config: AppConfig) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def build_registry(config: AppConfig) -> Registry:
    """Create the session registry, seeded with sample data if configured."""
    registry = Registry()
    if config.seed_sample_data:
        create_sample_data(registry)
    return registry


def run_demo(registry: Registry, config: AppConfig) -> None:
    """Print every report once."""
    for report in (
        reports.grade_report(registry),
        reports.enrollment_report(registry),
        reports.teacher_load_report(registry),
    ):
        print(reports.render_report(report, config.report_format, config.report_width))
        print()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Registrar academic records manager")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--demo", action="store_true", help="Print all reports and exit")
    parser.add_argument("--empty", action="store_true", help="Start without sample data")
    parser.add_argument("--log-level", type=str, help="Logging level, e.g. INFO")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ReportFormat],
        help="Report output format"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config, {
            'seed_sample_data': False if args.empty else None,
            'log_level': args.log_level,
            'report_format': args.format,
        })
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 2

    try:
        setup_logging(config)
    except OSError as e:
        print(f"Cannot open log file {config.log_file}: {e}", file=sys.stderr)
        return 2

    registry = build_registry(config)
    logger.info("Registry ready: %s", registry.statistics())

    if args.demo:
        run_demo(registry, config)
        return 0

    try:
        RegistrarShell(registry, config).run()
    except (KeyboardInterrupt, EOFError):
        print("\nShutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
