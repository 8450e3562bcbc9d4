"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from resume_builder.clients.llm_client import get_llm_client
from resume_builder.config import load_config
from resume_builder.errors import InputValidationError, UpstreamError
from resume_builder.logging.usage_store import UsageStore
from resume_builder.models.improvement import ImprovementRequest, Tone
from resume_builder.pipeline.resume_assistant import ResumeAssistant
from resume_builder.pipeline.text_improver import TextImprover
from resume_builder.prompts.actions import TONE_DESCRIPTIONS, supported_actions

app = typer.Typer(
    name="resume-builder",
    help="AI text improvement for resume content",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from resume_builder.api.app import create_app

    _setup_logging(verbose)
    config = load_config()
    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
        log_config=None,
    )


@app.command()
def improve(
    text: str = typer.Argument(help="Text to improve"),
    action: str = typer.Option("improve", "--action", "-a", help="Improvement action"),
    content_type: str = typer.Option(None, "--type", help="Content label, e.g. summary, bullet"),
    tone: str = typer.Option(None, "--tone", help="Target tone for the 'tone' action"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Improve a piece of resume text once and print the result."""
    _setup_logging(verbose)
    config = load_config()
    usage_store = None
    if config.usage.enabled:
        usage_store = UsageStore(db_path=config.usage.resolved_db_path)
    improver = TextImprover(
        get_llm_client(config.llm),
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        usage_store=usage_store,
        session_id="cli",
    )
    request = ImprovementRequest(text=text, action=action, type=content_type, tone=tone)

    try:
        with console.status("Improving text..."):
            result = asyncio.run(improver.improve(request))
    except InputValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)
    except UpstreamError as e:
        console.print(f"[red]{e}: {e.details}[/red]")
        raise typer.Exit(1)

    console.print(Panel(result.improved, title=f"{result.action}"))


def _build_assistant(session_id: str = "cli") -> ResumeAssistant:
    config = load_config()
    usage_store = None
    if config.usage.enabled:
        usage_store = UsageStore(db_path=config.usage.resolved_db_path)
    return ResumeAssistant(
        get_llm_client(config.llm),
        model=config.llm.model,
        temperature=config.llm.temperature,
        usage_store=usage_store,
        session_id=session_id,
    )


def _read_file(path: Path, label: str) -> str:
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _emit(content: str, title: str, output: Path | None) -> None:
    if not content:
        console.print("[yellow]No content generated.[/yellow]")
        raise typer.Exit(1)
    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]Saved: {output}[/green]")
    else:
        console.print(Panel(content, title=title))


def _run_assistant(coro):
    try:
        with console.status("Asking the model..."):
            return asyncio.run(coro)
    except InputValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)


@app.command()
def generate(
    profile: str = typer.Argument(help="Free-form notes about your background"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the result to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Draft resume content from profile notes."""
    _setup_logging(verbose)
    assistant = _build_assistant()
    content = _run_assistant(assistant.generate_content(profile))
    _emit(content, "Resume draft", output)


@app.command()
def polish(
    resume: Path = typer.Option(..., "--resume", help="Resume text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the result to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Improve a whole resume."""
    _setup_logging(verbose)
    resume_text = _read_file(resume, "Resume")
    assistant = _build_assistant()
    content = _run_assistant(assistant.polish_content(resume_text))
    _emit(content, "Polished resume", output)


@app.command()
def tailor(
    resume: Path = typer.Option(..., "--resume", help="Resume text file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the result to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Tailor a resume to a job description."""
    _setup_logging(verbose)
    resume_text = _read_file(resume, "Resume")
    jd_text = _read_file(jd, "Job description")
    assistant = _build_assistant()
    content = _run_assistant(assistant.tailor_to_job(resume_text, jd_text))
    _emit(content, "Tailored resume", output)


@app.command(name="cover-letter")
def cover_letter(
    resume: Path = typer.Option(..., "--resume", help="Resume text file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the result to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Write a cover letter for a job description."""
    _setup_logging(verbose)
    resume_text = _read_file(resume, "Resume")
    jd_text = _read_file(jd, "Job description")
    assistant = _build_assistant()
    content = _run_assistant(assistant.cover_letter(resume_text, jd_text))
    _emit(content, "Cover letter", output)


@app.command(name="ats-score")
def ats_score(
    resume: Path = typer.Option(..., "--resume", help="Resume text file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score a resume against a job description."""
    _setup_logging(verbose)
    resume_text = _read_file(resume, "Resume")
    jd_text = _read_file(jd, "Job description")
    assistant = _build_assistant()
    result = _run_assistant(assistant.ats_score(resume_text, jd_text))

    color = "green" if result.score >= 70 else "yellow" if result.score >= 40 else "red"
    console.print(f"ATS score: [bold {color}]{result.score}/100[/bold {color}]")
    for suggestion in result.suggestions:
        console.print(f"  - {suggestion}")


@app.command()
def actions() -> None:
    """List supported actions and tones."""
    table = Table(title="Actions")
    table.add_column("Action")
    for name in supported_actions():
        table.add_row(name)
    console.print(table)

    tones = Table(title="Tones (--tone)")
    tones.add_column("Tone")
    tones.add_column("Description")
    for tone in Tone:
        tones.add_row(tone.value, TONE_DESCRIPTIONS[tone.value])
    console.print(tones)


@app.command()
def usage() -> None:
    """Show this month's usage statistics."""
    config = load_config()
    store = UsageStore(db_path=config.usage.resolved_db_path)
    stats = store.get_monthly_stats()
    console.print(
        Panel(
            f"Calls: {stats['total_calls']} | Input tokens: {stats['total_input_tokens']} | "
            f"Output tokens: {stats['total_output_tokens']}\n"
            f"Cost: ${stats['total_cost_usd']:.4f} | Success rate: {stats['success_rate']:.1f}% | "
            f"Fallbacks: {stats['fallback_count']}",
            title=f"Usage {stats['month']}",
        )
    )
    counts = store.get_action_counts()
    if counts:
        table = Table(title="Calls per action")
        table.add_column("Action")
        table.add_column("Calls", justify="right")
        for name, count in counts.items():
            table.add_row(name, str(count))
        console.print(table)


if __name__ == "__main__":
    app()
