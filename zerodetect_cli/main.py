import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import questionary
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from zerodetect_cli.config import Settings, load_settings
from zerodetect_cli.engine import MIN_TEXT_LENGTH, TextValidationError, detect_ai_text
from zerodetect_cli.ui import (
    build_batch_table,
    clear_screen,
    format_score,
    print_welcome,
    render_batch_verdict,
    render_report,
)

console = Console()
app = typer.Typer(help="ZeroDetect AI Text Detection CLI", add_completion=False)

LOGGER = logging.getLogger(__name__)


def _configure_logging(level_name: str):
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def startup(ctx: typer.Context):
    settings = load_settings()
    _configure_logging(settings.log_level)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else load_settings()


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is not None:
        return text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def _report_error(err: str, export_json: bool):
    if export_json:
        print(json.dumps({"error": err}))
    else:
        console.print(f"[bold red]Error[/bold red]: {err}")


def _run_analysis(text: str, export_json: bool = False, show_chart: bool = True) -> bool:
    """Analyze and render one text. Returns False when the input was rejected."""
    try:
        if export_json:
            report = detect_ai_text(text)
        else:
            with console.status("[cyan]Analyzing...[/cyan]"):
                report = detect_ai_text(text)
    except TextValidationError as e:
        _report_error(str(e), export_json)
        return False

    if export_json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        render_report(report, show_chart=show_chart)
    return True


@app.command(name="analyze")
def analyze_cmd(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to analyze (reads stdin when omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a file"),
    export_json: bool = typer.Option(False, "--json", help="Export the report as JSON"),
    no_chart: bool = typer.Option(False, "--no-chart", help="Skip the sentence rhythm chart"),
):
    """Estimate how likely a piece of text is to be machine-generated."""
    try:
        raw = _read_input(text, file)
    except (OSError, UnicodeDecodeError) as e:
        _report_error(f"Could not read '{file}': {e}", export_json)
        raise typer.Exit(code=1)

    show_chart = _settings(ctx).show_chart and not no_chart
    if not _run_analysis(raw, export_json=export_json, show_chart=show_chart):
        raise typer.Exit(code=1)


@app.command(name="batch")
def batch_cmd(
    paths: List[Path] = typer.Argument(..., help="Text files to analyze"),
    export_json: bool = typer.Option(False, "--json", help="Export results as JSON"),
):
    """Analyze several files and summarize their AI-likelihood scores."""
    documents = []
    for path in paths:
        try:
            report = detect_ai_text(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, TextValidationError) as e:
            LOGGER.warning("Skipping %s: %s", path, e)
            documents.append({"file": str(path), "error": str(e)})
            continue
        documents.append({"file": str(path), "report": report})

    if export_json:
        payload = []
        for doc in documents:
            if "report" in doc:
                payload.append({"file": doc["file"], **doc["report"].to_dict()})
            else:
                payload.append(doc)
        print(json.dumps({"documents": payload}, indent=2))
        return

    table = build_batch_table(len(documents))
    for doc in documents:
        if "report" in doc:
            report = doc["report"]
            table.add_row(doc["file"], format_score(report.percentage), report.confidence)
        else:
            table.add_row(doc["file"], f"[dim]{doc['error']}[/dim]", "[dim]-[/dim]")
    console.print(table)

    render_batch_verdict([doc["report"].percentage for doc in documents if "report" in doc])


def _help_panel() -> Panel:
    return Panel(
        "[bold cyan]Available Commands:[/bold cyan]\n"
        "  [bold]analyze[/bold]       - Paste text to analyze (Esc then Enter to submit)\n"
        "  [bold]load <path>[/bold]   - Analyze the contents of a text file\n"
        "  [bold]chart[/bold]         - Toggle the sentence rhythm chart\n"
        "  [bold]clear[/bold]         - Clear the terminal screen\n"
        "  [bold]exit[/bold]          - Quit the session\n\n"
        f"[dim]Texts need at least {MIN_TEXT_LENGTH} characters.[/dim]",
        title="ZeroDetect REPL Help",
        border_style="cyan",
        expand=False
    )


@app.command(name="interactive")
def interactive_cmd(ctx: typer.Context):
    """Start an interactive analysis session."""
    settings = _settings(ctx)
    show_chart = settings.show_chart
    print_welcome(settings.show_banner)

    while True:
        try:
            try:
                raw_input = input("zerodetect> ")
            except EOFError:
                raw_input = None

            if raw_input is None:
                console.print("\n[dim]Session terminated.[/dim]")
                break

            command = raw_input.strip()
            lowered = command.lower()

            if not command:
                continue

            if lowered in ["exit", "quit", "q"]:
                console.print("[dim]Goodbye![/dim]")
                break

            elif lowered == "clear":
                clear_screen()
                print_welcome(settings.show_banner)

            elif lowered in ["help", "?"]:
                console.print(_help_panel())

            elif lowered == "chart":
                show_chart = not show_chart
                console.print(f"[green]Sentence rhythm chart {'enabled' if show_chart else 'disabled'}.[/green]")

            elif lowered == "analyze":
                text = questionary.text(
                    "Paste your text:",
                    multiline=True,
                    qmark=">"
                ).ask()
                if text is None:
                    continue
                _run_analysis(text, show_chart=show_chart)

            elif lowered.startswith("load "):
                path = Path(command[5:].strip()).expanduser()
                try:
                    text = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    console.print(f"[bold red]Error[/bold red]: Could not read '{path}': {e}")
                    continue
                _run_analysis(text, show_chart=show_chart)

            else:
                console.print(f"[yellow]Unknown command:[/yellow] '{command}'. Type 'help' to see available commands.")

        except KeyboardInterrupt:
            console.print("\n[dim]Session terminated.[/dim]")
            break


def main():
    if len(sys.argv) == 1:
        app(args=["interactive"])
    else:
        app()


if __name__ == "__main__":
    main()
