# SPDX-License-Identifier: MIT
"""
pwfilter - Command Line Interface

This CLI provides:
- pwfilter version
- pwfilter check <fragment> --line <line> --format {text,json}
- pwfilter filter <findings.json> --out <path> --include-ignored
- pwfilter init-config --path <path>

Note:
- Matched values are always redacted in output.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .config import load_config, create_default_config_template
from .core.exceptions import PWFilterConfigError, PWFilterInputError
from .core.findings import Candidate
from .core.models import FindingRecord
from .core.redaction import redact_secret, redact_records
from .postprocess.pipeline import evaluate, filter_findings


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(
        prog="pwfilter", description="Password finding false-positive filter"
    )
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")
    p.add_argument("--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    cp = sub.add_parser("check", help="post-process a single matched fragment")
    cp.add_argument("fragment", help="matched key/value text")
    cp.add_argument("--line", help="full source line (defaults to the fragment)")
    cp.add_argument("--config", help="path to config YAML file")
    cp.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format (default: text)"
    )

    fp = sub.add_parser("filter", help="post-process a JSON findings file")
    fp.add_argument("input", help="findings JSON file ('-' for stdin)")
    fp.add_argument("--config", help="path to config YAML file")
    fp.add_argument("--out", help="write JSON results to file")
    fp.add_argument(
        "--include-ignored",
        action="store_true",
        help="keep ignored findings in the output, flagged"
    )

    ip = sub.add_parser("init-config", help="write a default config file")
    ip.add_argument("--path", default=".pwfilter.yml", help="where to write the config")
    ip.add_argument("--force", action="store_true", help="overwrite an existing file")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[pwfilter] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    try:
        if args.cmd == "check":
            return handle_check_command(args)
        if args.cmd == "filter":
            return handle_filter_command(args)
        if args.cmd == "init-config":
            return handle_init_config_command(args)
    except (PWFilterConfigError, PWFilterInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    p.print_help()
    return 0


def handle_check_command(args):
    """Handle the check subcommand."""
    config = load_config(args.config)
    candidate = Candidate(fragment=args.fragment, line=args.line)
    verdict = evaluate(candidate, config)

    if args.format == "json":
        result = verdict.to_dict()
        result["match"] = redact_secret(args.fragment)
        print(json.dumps(result, indent=2))
        return 0

    status = "IGNORE" if verdict.ignore else "KEEP"
    print(f"{status} {redact_secret(args.fragment)}")
    print(f"  confidence: {verdict.confidence}")
    for reason in verdict.reasons:
        print(f"  - {reason}")
    return 0


def handle_filter_command(args):
    """Handle the filter subcommand."""
    config = load_config(args.config)
    records = load_findings(args.input)
    results = filter_findings(records, config, include_ignored=args.include_ignored)

    output = {
        "total": len(records),
        "kept": sum(1 for r in results if not r["postprocess"]["ignore"]),
        "findings": redact_records(results),
    }
    json_output = json.dumps(output, indent=2, default=str)

    if args.out:
        try:
            Path(args.out).write_text(json_output, encoding="utf-8")
        except OSError as e:
            raise PWFilterInputError(f"Cannot write results: {e}", source=args.out) from e
        print(f"JSON output written to {args.out}", file=sys.stderr)
    else:
        print(json_output)
    return 0


def handle_init_config_command(args):
    """Handle the init-config subcommand."""
    path = Path(args.path)
    if path.exists() and not args.force:
        raise PWFilterConfigError(
            "Config file already exists, use --force to overwrite",
            config_path=str(path)
        )
    try:
        path.write_text(create_default_config_template(), encoding="utf-8")
    except OSError as e:
        raise PWFilterConfigError(
            f"Cannot write config file: {e}", config_path=str(path)
        ) from e
    print(f"Config written to {path}")
    return 0


def load_findings(source):
    """
    Read and validate scanner findings.

    Accepts a JSON list of findings or an object with a "findings" list.

    Raises:
        PWFilterInputError: If the input is missing, not JSON or has the wrong shape
    """
    try:
        if source == "-":
            data = json.load(sys.stdin)
        else:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
    except OSError as e:
        raise PWFilterInputError(f"Cannot read findings: {e}", source=source) from e
    except UnicodeDecodeError as e:
        raise PWFilterInputError(f"Findings are not valid UTF-8: {e}", source=source) from e
    except json.JSONDecodeError as e:
        raise PWFilterInputError(f"Invalid JSON: {e}", source=source) from e

    if isinstance(data, dict):
        data = data.get("findings")
    if not isinstance(data, list):
        raise PWFilterInputError("Expected a list of findings", source=source)

    records = []
    for index, item in enumerate(data):
        try:
            records.append(FindingRecord.model_validate(item).model_dump())
        except ValidationError as e:
            raise PWFilterInputError(
                f"Finding {index} is invalid: {e.errors()[0]['msg']}", source=source
            ) from e
    return records
