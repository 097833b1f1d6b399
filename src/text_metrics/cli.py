"""CLI entrypoint.

Commands:
- `text-metrics compare A B --metric cosine_similarity --simplify lower_case --tokenize whitespace`
- `text-metrics compare A B --config metrics.yaml --name names`
- `text-metrics batch --config metrics.yaml --name names --input pairs.jsonl [--output scored.jsonl]`
- `text-metrics list`

Batch input is JSON lines with "a" and "b" fields; every other field is
copied to the output next to the score.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from tqdm import tqdm

from .config import load_metrics, metric_from_config
from .errors import MetricError
from .logging_ import setup_logging
from .pipeline import AssembledDistance, AssembledMetric
from .registry import list_components

log = logging.getLogger("text_metrics.cli")


def _resolve_metric(args: argparse.Namespace) -> AssembledMetric:
    if args.config:
        metrics = load_metrics(args.config)
        if args.name is None:
            if len(metrics) != 1:
                raise MetricError(f"--name is required, config defines {sorted(metrics)}")
            return next(iter(metrics.values()))
        if args.name not in metrics:
            raise MetricError(f"Unknown metric {args.name!r} in {args.config}. Available: {sorted(metrics)}")
        return metrics[args.name]

    steps: List[Dict[str, Any]] = [{"simplify": s} for s in args.simplify or []]
    steps += [{"tokenize": t} for t in args.tokenize or []]
    return metric_from_config({"metric": args.metric, "steps": steps}, name=args.metric)


def _add_metric_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--config", help="YAML file with metric definitions")
    src.add_argument("--metric", help="Registered metric name")
    p.add_argument("--name", help="Metric definition to use from --config")
    p.add_argument("--simplify", action="append", metavar="NAME", help="Simplifier (repeatable, with --metric)")
    p.add_argument("--tokenize", action="append", metavar="NAME", help="Tokenizer (repeatable, with --metric)")


def _cmd_compare(args: argparse.Namespace, console: Console) -> None:
    metric = _resolve_metric(args)
    table = Table(title=escape(repr(metric)))
    table.add_column("a")
    table.add_column("b")
    table.add_column("similarity", justify="right")
    row = [escape(args.a), escape(args.b), f"{metric.compare(args.a, args.b):.4f}"]
    if isinstance(metric, AssembledDistance):
        table.add_column("distance", justify="right")
        row.append(f"{metric.distance(args.a, args.b):.4f}")
    table.add_row(*row)
    console.print(table)


def _cmd_batch(args: argparse.Namespace, console: Console) -> None:
    metric = _resolve_metric(args)
    out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    scored = 0
    total = 0.0
    try:
        with open(args.input, "r", encoding="utf-8") as f:
            lines = [(lineno, line) for lineno, line in enumerate(f, 1) if line.strip()]
        for lineno, line in tqdm(lines, desc="Scoring", unit="pair", disable=args.quiet):
            try:
                rec = json.loads(line)
            except json.JSONDecodeError as e:
                raise MetricError(f"{args.input}:{lineno}: invalid JSON: {e.msg}") from e
            if not isinstance(rec, dict):
                raise MetricError(f"{args.input}:{lineno}: record must be a JSON object, got {type(rec).__name__}")
            if "a" not in rec or "b" not in rec:
                raise MetricError(f"{args.input}:{lineno}: record needs 'a' and 'b' fields")
            rec["similarity"] = metric.compare(rec["a"], rec["b"])
            if isinstance(metric, AssembledDistance):
                rec["distance"] = metric.distance(rec["a"], rec["b"])
            out.write(json.dumps(rec, ensure_ascii=False) + "\n")
            scored += 1
            total += rec["similarity"]
    finally:
        if out is not sys.stdout:
            out.close()

    log.info("Scored %d pairs from %s", scored, args.input)
    if not args.quiet:
        mean = total / scored if scored else 0.0
        console.print(f"[bold]{scored}[/bold] pairs scored, mean similarity {mean:.4f}")


def _cmd_list(console: Console) -> None:
    table = Table(title="Registered components")
    table.add_column("kind")
    table.add_column("names")
    for kind, names in list_components().items():
        table.add_row(kind, ", ".join(names))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="text-metrics")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    p.add_argument("--log-dir", default=None, help="Also write logs to <dir>/text_metrics.log")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("compare", help="Score one pair of strings")
    pc.add_argument("a")
    pc.add_argument("b")
    _add_metric_args(pc)

    pb = sub.add_parser("batch", help="Score JSON-lines pairs")
    _add_metric_args(pb)
    pb.add_argument("--input", required=True, help="JSON lines with 'a' and 'b' fields")
    pb.add_argument("--output", default=None, help="Output JSON lines (default: stdout)")
    pb.add_argument("--quiet", "-q", action="store_true", help="No progress bar or summary")

    sub.add_parser("list", help="Show registered metrics and stages")

    args = p.parse_args(argv)
    if args.cmd in ("compare", "batch"):
        if args.metric and args.name is not None:
            p.error("--name selects a definition from --config and cannot be used with --metric")
        if args.config and (args.simplify or args.tokenize):
            p.error("--simplify and --tokenize apply to --metric and cannot be used with --config")
    setup_logging(args.log_level, log_dir=args.log_dir)
    console = Console(stderr=True) if args.cmd == "batch" else Console()

    try:
        if args.cmd == "list":
            _cmd_list(console)
        elif args.cmd == "compare":
            _cmd_compare(args, console)
        else:
            _cmd_batch(args, console)
    except MetricError as e:
        log.error("%s", e)
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
