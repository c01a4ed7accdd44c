"""Command line interface for markboost."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from markboost.config import DEFAULT_IGNORE_PATTERNS, LLMConfig, ScanOptions
from markboost.index.indexer import NoteIndexer
from markboost.models import ScanResult
from markboost.utils.slugify import slugify

console = Console()
app = typer.Typer(help="markboost - Markdown note slugs and local-LLM SEO metadata")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _write_json(result: ScanResult, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps(result.to_dict(), ensure_ascii=False, indent=2, default=str),
        encoding="utf-8",
    )


def _print_table(result: ScanResult) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Slug")
    table.add_column("Simple slug")
    table.add_column("SEO title")

    for note in result.all_notes:
        seo_title = note.seo.title if note.seo and note.seo.title else ""
        table.add_row(note.file_path, note.full_path_slug, note.simple_slug, seo_title)

    console.print(table)

    collisions = result.collisions()
    if collisions:
        console.print(f"[yellow]{len(collisions)} simple slug collision(s):[/yellow]")
        for simple_slug, full_slugs in collisions.items():
            console.print(f"  {simple_slug}: {', '.join(full_slugs)}")


@app.command()
def scan(
    content_path: Path = typer.Argument(..., help="Root directory with Markdown notes."),
    ignore: Optional[List[str]] = typer.Option(
        None, "--ignore", help="Glob pattern to ignore (repeatable, replaces the defaults)"
    ),
    content: bool = typer.Option(False, "--content", help="Include note bodies"),
    frontmatter: bool = typer.Option(False, "--frontmatter", help="Include front matter"),
    last_modified: bool = typer.Option(False, "--last-modified", help="Include modification times"),
    seo: bool = typer.Option(False, "--seo", help="Generate SEO metadata with a local model"),
    model: str = typer.Option(LLMConfig().model_name, help="Text-generation model name"),
    min_words: int = typer.Option(
        LLMConfig().min_content_length_for_seo, help="Minimum words for SEO generation"
    ),
    max_words: int = typer.Option(
        LLMConfig().max_content_length_for_prompt, help="Words of content put in the prompt"
    ),
    prompt_template: Optional[Path] = typer.Option(
        None, "--prompt-template", help="File with a custom prompt template"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan a directory of Markdown notes."""
    _setup_logging(verbose)
    if not content_path.is_dir():
        raise typer.BadParameter(f"Content path not found: {content_path}")

    try:
        options = ScanOptions(
            content_path=content_path,
            ignore_patterns=tuple(ignore) if ignore else DEFAULT_IGNORE_PATTERNS,
            include_content=content,
            include_frontmatter=frontmatter,
            include_last_modified=last_modified,
            generate_seo=seo,
            llm_config=LLMConfig(
                model_name=model,
                min_content_length_for_seo=min_words,
                max_content_length_for_prompt=max_words,
                prompt_template_path=prompt_template,
            ),
        )
        indexer = NoteIndexer(options)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(f"Scanning [bold]{content_path}[/bold]...")
    result = indexer.scan()
    if not result.all_notes:
        console.print("[yellow]No Markdown notes found.[/yellow]")
        return

    if output is not None:
        _write_json(result, output)
        console.print(f"Wrote {len(result.all_notes)} notes to {output}")
    else:
        _print_table(result)


@app.command()
def slug(texts: List[str] = typer.Argument(..., help="Filenames or paths to slugify")) -> None:
    """Print the slug of each argument."""
    for text in texts:
        console.print(slugify(text), highlight=False)
