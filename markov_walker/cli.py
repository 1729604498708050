"""
cli.py - command line interface for training and walking a Markov chain
Features:
- Plain input lines train the chain, one sequence per line
- Random walks, replayed walks and walk-choice reconstruction
- Distribution inspection and full chain dumps
- JSON persistence of the trained chain and a JSON config
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
from itertools import islice
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text
from rich.markup import escape
from rich import box

from markov_walker.core.errors import MarkovChainError
from markov_walker.core.markov_chain import END_TOKEN, MarkovChain
from markov_walker.core.number_generator import ListNumberGenerator, RandomNumberGenerator
from markov_walker.corpus import join_tokens, read_corpus, simple_tokenize
from markov_walker.utils.config_manager import Config
from markov_walker.utils.logger_utils import Log
from markov_walker.utils.model_store import load_chain, save_chain

HELP = [
    ("<text>", "train on a sentence"),
    ("/train <file>", "train on every line of a file"),
    ("/walk [n]", "print n random walks"),
    ("/replay <i> <j> ...", "walk using the given choices"),
    ("/choices <sentence>", "choices that reproduce a sentence"),
    ("/dist <token>", "successor distribution of a token"),
    ("/show", "dump the whole chain"),
    ("/stats", "chain size"),
    ("/save [path]", "save the chain as JSON"),
    ("/load [path]", "load a chain from JSON"),
    ("/config [key val]", "show or change settings"),
    ("/quit", "leave"),
]


class CLI:
    """Interactive shell around one MarkovChain."""

    def __init__(self, chain: Optional[MarkovChain] = None, config: Optional[Config] = None,
                 console: Optional[Console] = None):
        self.chain = chain if chain is not None else MarkovChain()
        self.cfg = config if config is not None else Config()
        self.console = console or Console()
        self.rng = RandomNumberGenerator(self.cfg.get("seed"))
        self.running = True

    def run(self):
        """Prompt until /quit or EOF. Slash commands are dispatched, other lines train the chain."""
        self.console.rule("[bold magenta]Markov Walker[/bold magenta]")
        self.console.print("[cyan]Type sentences to train, /help for commands.[/cyan]\n")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle_line(line)

    def handle_line(self, line: str):
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self.handle_command(line)
            return
        self.learn(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {e}")
            return
        if not parts:
            return
        cmd, args = parts[0].lower(), parts[1:]

        try:
            if cmd in ("/q", "/quit", "/exit"):
                self.running = False
                self.console.print("bye.")
            elif cmd == "/help":
                self._show_help()
            elif cmd == "/train" and args:
                self.train_file(args[0])
            elif cmd == "/walk":
                n = int(args[0]) if args else int(self.cfg.get("walks"))
                self.print_walks(n)
            elif cmd == "/replay":
                self.replay([int(a) for a in args])
            elif cmd == "/choices" and args:
                self.choices(" ".join(args))
            elif cmd == "/dist" and args:
                self._show_dist(args[0])
            elif cmd == "/show":
                self.console.print(Panel(Text(str(self.chain).rstrip("\n")), title="Chain", border_style="cyan"))
            elif cmd == "/stats":
                self._show_stats()
            elif cmd == "/save":
                path = save_chain(self.chain, args[0] if args else self.cfg.get("model_path"))
                self.console.print(f"[green]Saved ->[/green] {path}")
            elif cmd == "/load":
                self.chain = load_chain(args[0] if args else self.cfg.get("model_path"))
                self.console.print(f"[green]Loaded[/green] {len(self.chain)} tokens")
            elif cmd == "/config":
                self._config(args)
            else:
                self.console.print(f"[red]Unknown command:[/red] {escape(line)}")
        except (MarkovChainError, ValueError, OSError) as e:
            Log.error(f"[CLI] {line!r}: {e}")
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    # TRAINING -------------------------------------------------------------------
    def learn(self, text: str):
        tokens = simple_tokenize(text, self.cfg.get("lowercase"))
        self.chain.add_sequence(tokens)
        self.console.print(f"[dim]learnt {len(tokens)} tokens[/dim]")

    def train_file(self, path: str):
        corpus = read_corpus(path, self.cfg.get("lowercase"))
        n = self.chain.train(corpus)
        self.console.print(f"trained on {n} lines from {path}")

    # WALKS ----------------------------------------------------------------------
    def random_walk(self) -> List[str]:
        """One random walk, cut off at max_tokens."""
        limit = int(self.cfg.get("max_tokens"))
        return list(islice(self.chain.get_walk(self.rng), limit))

    def print_walks(self, n: int):
        if self.chain.start_tokens.total == 0:
            self.console.print("[dim](chain is empty, train it first)[/dim]")
            return
        for _ in range(n):
            self.console.print(join_tokens(self.random_walk()), markup=False, soft_wrap=True)

    def replay(self, values: List[int]):
        tokens = list(self.chain.get_walk(ListNumberGenerator(values)))
        if not tokens:
            self.console.print("[dim](empty walk)[/dim]")
            return
        self.console.print(join_tokens(tokens), markup=False, soft_wrap=True)

    def choices(self, sentence: str):
        tokens = simple_tokenize(sentence, self.cfg.get("lowercase"))
        picks = self.chain.find_walk_choices(tokens)
        self.console.print(" ".join(str(p) for p in picks), markup=False)

    # DISPLAY -------------------------------------------------------------------
    def _show_help(self):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Does")
        for c, d in HELP:
            table.add_row(Text(c), Text(d))
        self.console.print(table)

    def _show_dist(self, token: str):
        dist = self.chain.get(token)
        if dist is None:
            self.console.print(f"[yellow]no successors for[/yellow] {escape(repr(token))}")
            return
        table = Table(title=f"After {token!r}", box=box.SIMPLE)
        table.add_column("Token")
        table.add_column("Count", justify="right", style="magenta")
        table.add_column("Range", justify="right", style="dim")
        lo = 0
        for tok, count in dist.get_records():
            style = "dim italic" if tok == END_TOKEN else ""
            table.add_row(Text(tok, style=style), str(count), f"{lo}-{lo + count - 1}")
            lo += count
        self.console.print(table)

    def _show_stats(self):
        t = Table(title="Chain", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Sequences", str(self.chain.start_tokens.total))
        t.add_row("Start tokens", str(len(self.chain.start_tokens)))
        t.add_row("Tokens with successors", str(len(self.chain)))
        t.add_row("Bigrams", str(sum(d.total for d in self.chain.bigram_frequencies.values())))
        self.console.print(t)

    def _config(self, args: List[str]):
        if not args:
            self.cfg.show(self.console)
        elif len(args) == 2:
            if self.cfg.set(args[0], args[1]):
                if args[0] == "seed":
                    self.rng = RandomNumberGenerator(self.cfg.get("seed"))
                self.console.print(f"{args[0]} = {self.cfg.get(args[0])!r}")
            else:
                self.console.print(f"[red]rejected:[/red] {escape(args[0])} {escape(args[1])}")
        else:
            self.console.print("usage: /config [key val]", markup=False)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="markov-walker", description="Train a bigram Markov chain and walk it.")
    p.add_argument("--config", default="config.json", help="path of the JSON config")
    p.add_argument("--corpus", action="append", default=[], help="text file to train on (repeatable)")
    p.add_argument("--model", help="load a chain saved with /save before training")
    p.add_argument("--walks", type=int, help="print this many random walks and exit")
    return p


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)
    try:
        chain = load_chain(args.model) if args.model else MarkovChain()
        for path in args.corpus:
            chain.train(read_corpus(path, cfg.get("lowercase")))
    except (MarkovChainError, ValueError, OSError) as e:
        Log.error(f"[CLI] startup failed: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    cli = CLI(chain, cfg, console)
    if args.walks is not None:
        try:
            cli.print_walks(args.walks)
        except (MarkovChainError, ValueError, OSError) as e:
            Log.error(f"[CLI] walks failed: {e}")
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            return 1
        return 0
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
