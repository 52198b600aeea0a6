"""CLI entrypoint for the word-search puzzle engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from wordsearch.core.constants import DEFAULT_GRID_SIZE, MAX_PLACEMENT_ATTEMPTS
from wordsearch.core.exceptions import CellOutOfBoundsError, WordSearchError
from wordsearch.engine.puzzle import WordSearchPuzzle
from wordsearch.io.template_client import TemplateAPIError, TemplateClient
from wordsearch.io.templates import PuzzleTemplate, load_template_file
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import pretty_print_grid, print_puzzle_stats


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play word-search puzzles",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide in the grid",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--template",
        type=Path,
        metavar="FILE",
        help="JSON word_search template document",
    )
    parser.add_argument(
        "--template-id",
        type=str,
        help="Fetch the template from the endpoint in WORDSEARCH_TEMPLATE_URL",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Grid size in cells (default: template gridSize or {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_PLACEMENT_ATTEMPTS,
        help="Random placement attempts per word",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play in the terminal: enter 'r0 c0 r1 c1' per selection, 'reset' or 'quit'",
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="Print the grid with every placed word highlighted",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_template(args: argparse.Namespace, parser: argparse.ArgumentParser) -> PuzzleTemplate:
    sources = [bool(args.words or args.words_file), bool(args.template), bool(args.template_id)]
    if sum(sources) != 1:
        parser.error("provide exactly one of --words/--words-file, --template or --template-id")

    try:
        if args.template:
            template = load_template_file(args.template)
        elif args.template_id:
            template = TemplateClient().fetch(args.template_id)
        else:
            words: List[str] = []
            if args.words:
                words.extend(args.words)
            if args.words_file:
                words.extend(parse_words_file(args.words_file))
            template = PuzzleTemplate(words=words)
    except (WordSearchError, TemplateAPIError, RuntimeError, OSError) as exc:
        parser.error(str(exc))

    if args.size is not None:
        template.grid_size = args.size
    return template


def play(puzzle: WordSearchPuzzle, stdin: TextIO, stdout: TextIO) -> WordSearchPuzzle:
    """Drive the selection engine from text commands until quit or EOF."""

    pretty_print_grid(puzzle.grid, stream=stdout)
    for raw in stdin:
        line = raw.strip().lower()
        if not line:
            continue
        if line in {"quit", "exit", "q"}:
            break
        if line == "reset":
            puzzle = puzzle.reset()
            pretty_print_grid(puzzle.grid, label="New puzzle", stream=stdout)
            continue
        if line == "show":
            pretty_print_grid(puzzle.grid, highlighted=puzzle.found.cells, stream=stdout)
            continue

        parts = line.split()
        if len(parts) != 4 or not all(part.lstrip("-").isdigit() for part in parts):
            print("Expected: r0 c0 r1 c1 | show | reset | quit", file=stdout)
            continue
        r0, c0, r1, c1 = (int(part) for part in parts)
        engine = puzzle.engine
        try:
            engine.begin_selection((r0, c0))
            engine.update_selection((r1, c1))
            result = engine.end_selection()
        except CellOutOfBoundsError as exc:
            engine.cancel_selection()
            print(str(exc), file=stdout)
            continue
        if result is None:
            continue
        if result.matched:
            print(f"Found {result.matched_word} ({puzzle.found.count}/{engine.total_words})", file=stdout)
        else:
            print(f"No match: {result.text}", file=stdout)
    return puzzle


def main(argv: list[str] | None = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    template = resolve_template(args, parser)
    oversized = template.oversized_words()
    if oversized:
        logging.getLogger(__name__).warning(
            "Words longer than the %sx%s grid will be skipped: %s",
            template.grid_size,
            template.grid_size,
            ", ".join(oversized),
        )

    def announce(found: int, total: int) -> None:
        print(f"All words found ({found}/{total})", file=stdout)

    try:
        puzzle = WordSearchPuzzle.create(
            template.words,
            template.grid_size,
            seed=args.seed,
            max_attempts=args.max_attempts,
            on_complete=announce,
        )
    except WordSearchError as exc:
        parser.error(str(exc))

    if args.play:
        puzzle = play(puzzle, stdin, stdout)
    elif not args.output:
        print_puzzle_stats(puzzle, solution=args.solution, stream=stdout)

    if args.output:
        payload = puzzle.to_jsonable()
        if template.title:
            payload["title"] = template.title
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
        args.output.write_text(output_text, encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
