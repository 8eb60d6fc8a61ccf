from __future__ import annotations
import json
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box
from . import logconf
from .config import SummaryConfig, write_default_config
from .fetcher import SourceUnavailable, load_document
from .summarizer import SummaryResult, analyze, compute_idf, summarize as run_summary

app = typer.Typer(help="Extractive TF-IDF text summarizer")
console = Console()

FORMATS = ("rich", "text", "json")

def _error(message: str) -> None:
    console.print(Text.assemble(("[Error]", "bold red"), " ", message))

def _load_config(config_path: Path) -> SummaryConfig:
    if not config_path.exists():
        return SummaryConfig()
    try:
        return SummaryConfig.load(config_path)
    except (OSError, ValueError, TypeError) as ex:
        _error(f"bad config {config_path}: {ex}")
        raise typer.Exit(code=1)

def _load_source(source: str, cfg: SummaryConfig) -> str:
    try:
        return load_document(source, cfg)
    except SourceUnavailable as ex:
        _error(str(ex))
        raise typer.Exit(code=1)

def _print_summary(res: SummaryResult) -> None:
    for notice in res.notices:
        console.print(Text.assemble(("[Notice]", "bold yellow"), " ", notice.message))
    if res.empty:
        console.print(Text.assemble(("[Summary]", "bold yellow"), " (empty or no sentences)"))
    else:
        console.print(Text(f"=== Extractive Summary (depth={res.depth}) ===", style="bold cyan"))
        console.print()
        for s in res.sentences:
            console.print(Text(s.text, style="green"))
            console.print()
    if res.elapsed_seconds is not None:
        console.print(Text.assemble(
            ("[Timing]", "yellow"), f" summary generated in {res.elapsed_seconds:.4f} seconds"
        ))

@app.callback()
def main_callback(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
):
    logconf.init(log_level)

@app.command()
def init(
    config_path: Path = typer.Option("config.json", exists=False, help="Where to create config"),
):
    """Create a default config file."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        _error(str(ex))
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def summarize(
    source: str = typer.Argument(..., help="File path or http(s) URL"),
    config_path: Path = typer.Option("config.json", help="Config file (defaults if missing)"),
    depth: Optional[int] = typer.Option(None, min=1, help="1→1, 2→3, 3→5, 4+→10 sentences"),
    timing: bool = typer.Option(False, "--time", help="Report elapsed time"),
    fmt: str = typer.Option("rich", "--format", help="rich|text|json"),
):
    """Create an extractive summary."""
    if fmt not in FORMATS:
        typer.echo(f"Unknown format {fmt!r}; use one of {', '.join(FORMATS)}")
        raise typer.Exit(code=2)

    cfg = _load_config(config_path)
    document = _load_source(source, cfg)
    res = run_summary(
        document,
        depth=depth if depth is not None else cfg.default_depth,
        want_timing=timing,
        config=cfg,
    )

    if fmt == "json":
        typer.echo(json.dumps({
            "summary": res.text,
            "sentences": [{"index": s.index, "text": s.text} for s in res.sentences],
            "total_sentences": res.total_sentences,
            "depth": res.depth,
            "elapsed_seconds": res.elapsed_seconds,
            "notices": [n.message for n in res.notices],
        }, indent=2))
    elif fmt == "text":
        typer.echo(res.text, nl=False)
    else:
        _print_summary(res)

@app.command("stats")
def stats_cmd(
    source: str = typer.Argument(..., help="File path or http(s) URL"),
    config_path: Path = typer.Option("config.json", help="Config file (defaults if missing)"),
    top: int = typer.Option(10, min=1, help="How many terms to list"),
):
    """Show vocabulary stats for a document."""
    cfg = _load_config(config_path)
    corpus = analyze(_load_source(source, cfg), cfg)

    table = Table(title="Document Stats", box=box.SIMPLE)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("sentences", str(len(corpus.sentences)))
    table.add_row("terms", str(len(corpus.vocabulary)))
    table.add_row("tokens", str(sum(e.total_occurrences for e in corpus.vocabulary)))
    console.print(table)

    if not corpus.sentences:
        console.print("[yellow]No sentences[/yellow]")
        return

    idf = compute_idf(corpus.vocabulary, len(corpus.sentences))
    terms = Table(title=f"Top {top} Terms", box=box.MINIMAL_HEAVY_HEAD)
    terms.add_column("Term")
    terms.add_column("DF", justify="right")
    terms.add_column("Total", justify="right")
    terms.add_column("IDF", justify="right")
    for e in corpus.most_common(top):
        idx = corpus.vocabulary.lookup(e.term)
        terms.add_row(e.term, str(e.document_frequency), str(e.total_occurrences), f"{idf[idx]:.4f}")
    console.print(terms)
    for notice in corpus.notices:
        console.print(Text.assemble(("[Notice]", "bold yellow"), " ", notice.message))

def main():
    app()

if __name__ == "__main__":
    main()
