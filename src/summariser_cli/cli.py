from __future__ import annotations
import asyncio
import sys
from pathlib import Path
from typing import Optional
import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich import box
from .config import SummariserConfig, write_default_config
from .db import DB
from .errors import SummariserError
from .service import SummariseService
from .translator import HFSpaceTranslator

app = typer.Typer(help="Extractive article summariser")
console = Console()


def _load_config(config_path: Path) -> SummariserConfig:
    if config_path.exists():
        return SummariserConfig.load(config_path)
    logger.debug("No config at {}, using defaults", config_path)
    return SummariserConfig()


def _build_service(cfg: SummariserConfig, db: Optional[DB], translate: bool) -> SummariseService:
    translator = None
    if translate and cfg.translate and cfg.translation_url:
        translator = HFSpaceTranslator(cfg.translation_url, timeout=cfg.translation_timeout)
    return SummariseService(cfg, translator=translator, store=db)


@app.callback()
def _main(log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG|INFO|WARNING|ERROR")):
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())


@app.command()
def init(
    config_path: Path = typer.Option("summariser.json", help="Where to create config"),
    db_path: Path = typer.Option("summariser.db", help="SQLite file"),
):
    """Create default config and SQLite DB."""
    try:
        write_default_config(config_path, db_path)
    except FileExistsError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    DB(db_path).close()
    console.print(f"[green]Created[/green] {config_path} and {db_path}")


@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Article text"),
    file: Optional[Path] = typer.Option(None, "--file", exists=True, dir_okay=False, help="Read article text from a file"),
    url: Optional[str] = typer.Option(None, help="Article URL to scrape"),
    sentences: Optional[int] = typer.Option(None, min=1, help="Number of sentences (overrides config)"),
    translate: bool = typer.Option(True, "--translate/--no-translate", help="Translate the summary"),
    config_path: Path = typer.Option("summariser.json"),
    db_path: Optional[Path] = typer.Option(None, help="SQLite file (defaults to config db_path)"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store input and summary"),
    explain: bool = typer.Option(False, help="Show per-sentence scores"),
):
    """Create an extractive summary of text, a file, or a URL."""
    cfg = _load_config(config_path)
    if sentences is not None:
        cfg.top_n = sentences
    if file is not None:
        text = file.read_text(encoding="utf-8")
    if not text and not url:
        typer.echo("Provide TEXT, --file or --url")
        raise typer.Exit(code=2)

    db = DB(db_path or Path(cfg.db_path)) if save else None
    service = _build_service(cfg, db, translate)
    try:
        result = asyncio.run(service.summarise(text=text, url=url, translate=translate))
    except SummariserError as ex:
        console.print(f"[red]Error:[/red] {ex}")
        raise typer.Exit(code=1)
    finally:
        if db is not None:
            db.close()

    console.print(result.summary)
    if result.translated_summary:
        console.print()
        console.print(result.translated_summary)
    console.print(
        f"[dim]{result.original_length} → {result.summary_length} characters[/dim]"
    )

    if explain and text:
        table = Table(title="Sentence scores", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Score", justify="right")
        table.add_column("Sentence")
        for s in service.summarizer.score_sentences(text.strip()):
            if s.text.strip():
                table.add_row(str(s.index), str(s.score), s.text.strip())
        console.print(table)


@app.command("stats")
def stats_cmd(
    db_path: Path = typer.Option("summariser.db")
):
    """Show DB stats."""
    db = DB(db_path)
    s = db.stats()
    table = Table(title="Summariser Stats", box=box.SIMPLE)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    for k, v in s.items():
        table.add_row(k, str(v))
    console.print(table)
    db.close()


@app.command()
def history(
    db_path: Path = typer.Option("summariser.db"),
    limit: int = typer.Option(10),
):
    """List recent summaries."""
    db = DB(db_path)
    rows = db.recent_summaries(limit)
    db.close()
    if not rows:
        console.print("[yellow]No rows[/yellow]")
        return
    table = Table(box=box.MINIMAL_HEAVY_HEAD)
    for c in ("id", "url", "summary_length", "created_at", "summary"):
        table.add_column(c)
    for r in rows:
        table.add_row(str(r["id"]), r["url"] or "", str(r["summary_length"]), r["created_at"], r["summary"][:80])
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
    config_path: Path = typer.Option("summariser.json"),
):
    """Run the HTTP API."""
    import uvicorn
    from .server.main import create_app

    cfg = _load_config(config_path)
    db = DB(Path(cfg.db_path))
    uvicorn.run(create_app(_build_service(cfg, db, cfg.translate)), host=host, port=port)


def main():
    app()


if __name__ == "__main__":
    main()
