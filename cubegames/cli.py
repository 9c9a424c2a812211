import argparse
import json
import logging
import os
import sys
from pathlib import Path

from cubegames.aggregate import (
    GamesPaths,
    bounding_product_sum,
    ceiling_from_args,
    feasibility_sum,
    summarize,
    write_game_summary,
)
from cubegames.clean.qa_summary import create_qa_summary
from cubegames.parser.errors import GameParseError
from cubegames.parser.ingest import parse_document
from cubegames.parser.render import render_games

logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _read_input(args: argparse.Namespace) -> str:
    if args.input and args.input != "-":
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def _ceiling(args: argparse.Namespace):
    return ceiling_from_args(args.red, args.green, args.blue)


def cmd_parse(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    for game in doc.games:
        out = {
            "id": game.id,
            "rounds": [r.as_dict() for r in game.rounds],
        }
        sys.stdout.write(json.dumps(out) + "\n")
    return 0


def cmd_feasibility(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    ceiling = _ceiling(args)
    logger.info("feasibility: %s games against ceiling %s", doc.game_count, ceiling.as_dict())
    print(feasibility_sum(doc.games, ceiling))
    return 0


def cmd_power(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    print(bounding_product_sum(doc.games))
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    ceiling = _ceiling(args)
    out_csv = Path(args.out_csv) if args.out_csv else GamesPaths().summary_csv
    write_game_summary(doc.games, out_csv, ceiling)
    logger.info("Wrote game summary to %s", out_csv)
    print(json.dumps(summarize(doc.games, ceiling)))
    return 0


def cmd_qa_summary(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    out_csv = Path(args.out_csv) if args.out_csv else GamesPaths().qa_summary_csv
    create_qa_summary(doc, out_csv, top_k=args.top_k)
    logger.info("Wrote QA summary to %s (%s ignored pairs)", out_csv, len(doc.ignored))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    doc = parse_document(_read_input(args))
    text = render_games(doc.games)
    if text:
        sys.stdout.write(text + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cube-games", description="Cube game record utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    def add_input(s: argparse.ArgumentParser) -> None:
        s.add_argument("--input", help="Path to the game records; '-' or omitted reads STDIN")

    def add_ceiling(s: argparse.ArgumentParser) -> None:
        s.add_argument("--red", type=int, help="Red cube limit (default 12)")
        s.add_argument("--green", type=int, help="Green cube limit (default 13)")
        s.add_argument("--blue", type=int, help="Blue cube limit (default 14)")

    s1 = sub.add_parser("parse", help="Parse game records and emit JSONL")
    add_input(s1)
    s1.set_defaults(func=cmd_parse)

    s2 = sub.add_parser("feasibility", help="Sum the ids of games that fit the cube limits")
    add_input(s2)
    add_ceiling(s2)
    s2.set_defaults(func=cmd_feasibility)

    s3 = sub.add_parser("power", help="Sum the power of each game's minimum cube set")
    add_input(s3)
    s3.set_defaults(func=cmd_power)

    s4 = sub.add_parser("summary", help="Write a per-game CSV and print both totals as JSON")
    add_input(s4)
    add_ceiling(s4)
    s4.add_argument("--out-csv")
    s4.set_defaults(func=cmd_summary)

    s5 = sub.add_parser("qa-summary", help="Write a CSV of color words ignored while parsing")
    add_input(s5)
    s5.add_argument("--out-csv")
    s5.add_argument("--top-k", type=int, default=5)
    s5.set_defaults(func=cmd_qa_summary)

    s6 = sub.add_parser("render", help="Print the records in canonical form")
    add_input(s6)
    s6.set_defaults(func=cmd_render)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return args.func(args)
    except GameParseError as exc:
        logger.error("parse failed: %s", exc)
        return EXIT_PARSE_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
