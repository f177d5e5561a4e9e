import os

import plotille
import pyfiglet
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

# (upper bound, label, color); percentages at or above the last bound are "Definitely AI"
_TIERS = (
    (20, "Definitely Human", "bold green"),
    (40, "Likely Human", "green"),
    (60, "Mixed/Uncertain", "yellow"),
    (80, "Likely AI", "red"),
)
_TOP_TIER = ("Definitely AI", "bold red")


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def classify_percentage(percentage: int) -> str:
    return _tier(percentage)[0]


def _tier(percentage: int):
    for bound, label, color in _TIERS:
        if percentage < bound:
            return label, color
    return _TOP_TIER


def _score_color(value: float) -> str:
    if value >= 0.7:
        return "red bold"
    elif value >= 0.4:
        return "yellow"
    return "green"


def print_welcome(show_banner: bool = True):
    if show_banner:
        ascii_banner = pyfiglet.figlet_format("ZERO DETECT", font="slant")
        console.print(f"[bold cyan]{ascii_banner}[/bold cyan]")
    console.print("[dim]" + "─" * 80 + "[/dim]")
    console.print("[bold white]Heuristic AI-text detection: eight linguistic signals, one score.[/bold white]")
    console.print("[dim]Type 'analyze' to paste text, 'load <path>' to read a file, or 'help' for commands.[/dim]\n")


def render_verdict(report):
    pct = report.percentage
    label, color = _tier(pct)
    summary_text = (
        f"[{color}]{label.upper()}[/{color}]\n\n"
        f"  AI-Likelihood Score : [{color}]{pct}%[/{color}]\n"
        f"  Confidence          : [bold cyan]{report.confidence}[/bold cyan]\n\n"
        f"  [dim]{pct}% AI-generated • {100 - pct}% Human-written[/dim]"
    )
    console.print()
    console.print(Panel(
        summary_text,
        title="[bold]Analysis Complete[/bold]",
        border_style=color.replace("bold ", ""),
        expand=False,
        padding=(1, 4)
    ))


def build_signals_table(report) -> Table:
    table = Table(title="Signal Breakdown", show_header=True, header_style="bold magenta")
    table.add_column("Signal", width=12)
    table.add_column("Weight", justify="right", width=7)
    table.add_column("Raw", justify="right", width=9)
    table.add_column("AI Score", justify="center", width=9)
    table.add_column("Reasoning")
    for s in report.signals:
        color = _score_color(s.score)
        table.add_row(
            f"[bold]{s.name}[/bold]",
            f"{s.weight:.0%}",
            f"{s.value:.3f}",
            f"[{color}]{s.score:.2f}[/{color}]",
            f"{s.reason}\n[dim]{s.description}[/dim]",
        )
    return table


def build_details_table(report) -> Table:
    d = report.details
    table = Table(title="Text Details", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("Characters", f"{d.chars:,}")
    table.add_row("Words", f"{d.words:,}")
    table.add_row("Unique words", f"{d.unique_words:,}")
    table.add_row("Avg word length", f"{d.avg_word_length:.2f}")
    table.add_row("Avg sentence length", f"{d.avg_sentence_length:.2f}")
    table.add_row("Punctuation diversity", f"{d.punctuation_diversity:.3f}")
    table.add_row("Avg perplexity proxy", f"{report.average_perplexity:.3f}")
    return table


def render_perplexity_chart(report):
    values = list(report.sentence_perplexities)
    if len(values) < 3:
        console.print("[dim]Not enough sentences to chart sentence rhythm (need at least 3).[/dim]")
        return

    console.print("\n[bold cyan]Sentence Rhythm (perplexity proxy per sentence)[/bold cyan]")

    fig = plotille.Figure()
    fig.width = 60
    fig.height = 12
    fig.set_x_limits(min_=1, max_=len(values))
    fig.set_y_limits(min_=min(2.0, min(values)), max_=6.0)
    fig.y_label = "Perplexity"
    fig.x_label = "Sentence"

    # Flat line = AI-like rhythm
    burst = report.signal("burstiness")
    plot_color = 'red' if burst.score >= 0.75 else 'yellow' if burst.score >= 0.35 else 'green'
    fig.plot(list(range(1, len(values) + 1)), values, lc=plot_color)

    print(fig.show())


def render_report(report, show_chart: bool = True):
    render_verdict(report)
    console.print(build_signals_table(report))
    console.print(build_details_table(report))
    if show_chart:
        render_perplexity_chart(report)
    console.print()


def build_batch_table(count: int) -> Table:
    table = Table(title=f"{count} Documents Analyzed", show_header=True, header_style="bold cyan")
    table.add_column("File", width=30)
    table.add_column("AI Score", justify="center", width=22)
    table.add_column("Confidence", justify="center", width=12)
    return table


def format_score(percentage: int) -> str:
    label, color = _tier(percentage)
    return f"[{color}]{percentage}% ({label})[/{color}]"


def render_batch_verdict(percentages: list):
    if not percentages:
        return

    avg = sum(percentages) / len(percentages)
    high_ai = sum(1 for p in percentages if p >= 60)
    label, color = _tier(round(avg))

    summary_text = (
        f"[{color}]OVERALL: {label.upper()}[/{color}]\n\n"
        f"  Average AI-Likelihood : [{color}]{avg:.0f}%[/{color}]\n"
        f"  Documents Analyzed    : {len(percentages)}\n"
        f"  Likely AI (≥60%)      : [bold red]{high_ai}[/bold red]"
    )
    console.print()
    console.print(Panel(
        summary_text,
        title="[bold]Batch Complete[/bold]",
        border_style=color.replace("bold ", ""),
        expand=False,
        padding=(1, 4)
    ))
    console.print()
