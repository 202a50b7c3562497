"""Report CLI command -- analyze a repository's history and write the JSON payload."""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..classification import detect_language
from ..complexity import ComplexityScorer, LizardComplexityTool
from ..exceptions import ChronicleError, InvalidPathError
from ..history import GitContentProvider, GitFileSetProvider, GitHistoryProvider, is_git_repo
from ..logging_config import setup_logging
from ..report import build_report, load_context
from . import app
from ._common import console, format_count, resolve_config


@app.command()
def report(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the git repository to analyze",
        file_okay=False,
        dir_okay=True,
    ),
    granularity: Optional[str] = typer.Option(
        None,
        "--granularity",
        "-g",
        help="Time series bucket size (auto, hour, day, week, month)",
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "--max-commits",
        "-n",
        help="Maximum number of commits to read (0 = unlimited)",
        min=0,
    ),
    complexity: bool = typer.Option(
        True,
        "--complexity/--no-complexity",
        help="Score complexity of the files at HEAD",
    ),
    lizard: bool = typer.Option(
        False,
        "--lizard/--no-lizard",
        help="Prefer lizard for complexity rankings when it is installed",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON report to this file",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the JSON report to stdout instead of the summary",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Analyze the history of a git repository.

    Reads the full commit log once and produces growth time series, file
    heat, top files, complexity hotspots and commit/contributor awards.

    [bold cyan]Examples:[/bold cyan]

      git-chronicle report .

      git-chronicle report ~/src/project --granularity week -o report.json

      git-chronicle report . --json --no-complexity
    """
    verbosity = "quiet" if quiet else "verbose" if verbose else "normal"
    log_path = str(log_file) if log_file else None
    logger = setup_logging(verbosity, log_file=log_path)
    target = path.resolve()

    try:
        if not target.is_dir():
            raise InvalidPathError(target, "not a directory")
        if not is_git_repo(str(target)):
            raise InvalidPathError(target, "not a git repository")

        settings = resolve_config(
            config=config,
            granularity=granularity,
            max_commits=max_commits,
            verbose=verbose,
            quiet=quiet,
        )
        if settings.verbosity != verbosity:
            logger = setup_logging(settings.verbosity, log_file=log_path)

        context = load_context(
            GitHistoryProvider(str(target), bytes_per_line_estimate=settings.bytes_per_line_estimate),
            GitFileSetProvider(str(target)),
            config=settings,
        )
        if not context.commits:
            console.print("[yellow]No commits found.[/yellow]")
            raise typer.Exit(0)

        results = None
        if complexity:
            paths = sorted(p for p in context.current_files if detect_language(p).supports_complexity)
            scorer = ComplexityScorer(GitContentProvider(str(target)), batch_size=settings.batch_size)
            results = scorer.batch_analyze("HEAD", paths)

        external = LizardComplexityTool(str(target)) if lizard else None
        payload = build_report(context, complexity_results=results, external_complexity=external)

        if output is not None:
            output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            logger.info(f"Report written to {output}")

        if json_output:
            print(json.dumps(payload, indent=2))
            return

        _print_summary(payload)
        if output is not None:
            console.print(f"\nReport saved to: [bold green]{output}[/bold green]")

    except typer.Exit:
        raise

    except ChronicleError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


def _print_summary(payload: dict[str, Any]) -> None:
    summary = payload["summary"]

    table = Table(title="Repository summary", show_header=False, pad_edge=True)
    table.add_column("Metric", style="bold", min_width=20)
    table.add_column("Value", justify="right")
    table.add_row("Commits", format_count(summary["total_commits"]))
    table.add_row("Contributors", format_count(summary["total_contributors"]))
    table.add_row("Current files", format_count(summary["current_files"]))
    table.add_row("Lines added", format_count(summary["lines_added"]))
    table.add_row("Lines deleted", format_count(summary["lines_deleted"]))
    table.add_row("Net lines", format_count(summary["cumulative_lines"]))
    if payload["complexity"]["max_complexity"]:
        table.add_row("Avg complexity", f"{payload['complexity']['average_complexity']:.2f}")
    console.print(table)

    heat = payload["file_heat"][:10]
    if heat:
        heat_table = Table(title="Hottest files", show_lines=False)
        heat_table.add_column("File", style="bold", no_wrap=False, ratio=3)
        heat_table.add_column("Heat", justify="right")
        heat_table.add_column("Commits", justify="right")
        heat_table.add_column("Category")
        for entry in heat:
            heat_table.add_row(
                escape(entry["path"]),
                f"{entry['heat_score']:.2f}",
                str(entry["commit_count"]),
                entry["category"],
            )
        console.print(heat_table)

    contributors = payload["contributors"][:10]
    if contributors:
        people = Table(title="Top contributors")
        people.add_column("Author", style="bold")
        people.add_column("Commits", justify="right")
        people.add_column("+Lines", justify="right", style="green")
        people.add_column("-Lines", justify="right", style="red")
        for stats in contributors:
            people.add_row(
                escape(stats["name"]),
                str(stats["commits"]),
                format_count(stats["lines_added"]),
                format_count(stats["lines_deleted"]),
            )
        console.print(people)
