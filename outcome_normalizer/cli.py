"""CLI entry point for normalizing test outcome events."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from outcome_normalizer.config import NormalizerConfig
from outcome_normalizer.events import OutcomeEvent, load_events
from outcome_normalizer.models.outcome import OutcomeKind
from outcome_normalizer.models.result import NormalizedResult
from outcome_normalizer.naming.loading import (
    NameProviderRegistry,
    load_name_provider_registry,
)
from outcome_normalizer.normalizer import normalize


def log_results_summary(
    log: logging.Logger, results: Sequence[NormalizedResult]
) -> None:
    """Log one line per normalized result, with warnings underneath."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in results:
        log.info("%s %s > %s", result.icon, result.case_name, result.description)
        if result.warning:
            log.info("  Warning: %s", result.warning)


def normalize_events(
    events: Sequence[OutcomeEvent], registry: NameProviderRegistry
) -> Sequence[NormalizedResult]:
    """Normalize events, resolving custom display names through the registry."""
    return [
        normalize(
            event.test,
            event.kind,
            event.detail,
            name_provider=registry.resolve(event.test),
        )
        for event in events
    ]


def format_output(results: Sequence[NormalizedResult]) -> dict[str, Any]:
    """Format normalized results for JSON output."""
    output: dict[str, Any] = {"total": len(results)}
    for kind in OutcomeKind:
        output[kind.value] = sum(1 for r in results if r.kind == kind)

    output["results"] = [
        {
            "id": result.id,
            "case_name": result.case_name,
            "description": result.description,
            "kind": result.kind.value,
            "icon": result.icon,
            "color": result.color,
            "warning": result.warning,
            "message": result.detail.message if result.detail else None,
        }
        for result in results
    ]
    return output


def run(stream: TextIO, config_json: str = "{}") -> int:
    """Normalize all events in the stream and return exit code."""
    log = logging.getLogger("outcome_normalizer")

    config = NormalizerConfig.model_validate_json(config_json)

    events = load_events(stream)
    log.info("Normalizing %d event(s)", len(events))

    if config.name_providers:
        registry = load_name_provider_registry()
    else:
        log.info("Printable-name providers disabled")
        registry = NameProviderRegistry()

    results = normalize_events(events, registry)

    log_results_summary(log, results)
    output = format_output(results)
    print(json.dumps(output, indent=config.indent, ensure_ascii=False))

    has_failures = any(result.kind == OutcomeKind.FAILED for result in results)
    return 1 if has_failures else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Normalize test outcome events into display-ready results"
    )
    parser.add_argument(
        "--events",
        type=Path,
        default=None,
        help="JSON lines file of outcome events (default: stdin)",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the normalizer",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.events is None or str(args.events) == "-":
        exit_code = run(sys.stdin, args.config)
    else:
        with args.events.open(encoding="utf-8") as stream:
            exit_code = run(stream, args.config)
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
