"""
cli.py - command line front end for the character-level text generator
Usage:
    markov-textgen WINDOW_LENGTH INITIAL_TEXT TEXT_LENGTH {random,fixed} CORPUS
Features:
- "fixed" mode seeds the model (config seed, default 20) so runs are repeatable
- "random" mode draws from a fresh, unseeded random source
- optional JSON config, log file and a Rich table dump of the trained model
Generated text is the only thing written to stdout.
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from markov_textgen.core.errors import LanguageModelError
from markov_textgen.core.language_model import LanguageModel
from markov_textgen.utils.config_manager import Config
from markov_textgen.utils.logger_utils import Log

# diagnostics and dumps go to stderr
console = Console(stderr=True)

MODES = ("random", "fixed")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Train a character-level Markov model on a corpus and extend some seed text.",
    )
    p.add_argument("window_length", type=int, help="context size in characters")
    p.add_argument("initial_text", help="seed text to extend")
    p.add_argument("text_length", type=int, help="number of characters to add")
    p.add_argument("mode", choices=MODES, help="'fixed' for a seeded run, 'random' otherwise")
    p.add_argument("corpus", help="path of the training text")
    p.add_argument("--seed", type=int, default=None, help="seed for fixed mode (overrides config)")
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--strict", action="store_true", help="fail if the corpus is shorter than one window")
    p.add_argument("--dump", action="store_true", help="print the trained model as a table")
    p.add_argument("--log-file", default=None, help="append log lines to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def render_model(model: LanguageModel) -> Table:
    """Rich table with one row per (context, next char) record."""
    table = Table(title=f"Model (window={model.window_length})", box=box.SIMPLE, show_edge=False)
    table.add_column("Context", style="bold")
    table.add_column("Char", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("P", justify="right", style="magenta")
    table.add_column("CP", justify="right", style="dim")
    for row in model.rows():
        table.add_row(
            Text(repr(row["context"])),
            Text(repr(row["chr"])),
            str(row["count"]),
            "-" if row["p"] is None else f"{row['p']:.4f}",
            "-" if row["cp"] is None else f"{row['cp']:.4f}",
        )
    return table


def run(args: argparse.Namespace) -> str:
    """Build, train and sample a model from parsed arguments; returns the text."""
    cfg = Config(args.config)
    if args.seed is not None:
        cfg.data["seed"] = args.seed
    if args.strict:
        cfg.data["strict_training"] = True
    cfg.validate()

    log = Log(
        path=args.log_file or cfg.get("log_path"),
        level="DEBUG" if args.verbose else cfg.get("log_level"),
    )
    seed = cfg.get("seed") if args.mode == "fixed" else None
    model = LanguageModel(
        args.window_length,
        seed,
        strict=cfg.get("strict_training"),
        log=log,
    )
    model.train_file(args.corpus, encoding=cfg.get("encoding"))
    if args.dump:
        console.print(render_model(model))
    return model.generate(args.initial_text, args.text_length)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        text = run(args)
    except (LanguageModelError, OSError) as e:
        console.print(Text(f"error: {e}", style="bold red"), soft_wrap=True)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
