"""Render search output as rich console markup or JSON."""

from datetime import datetime, timezone

from rich.markup import escape

from ..models.news import NewsResult
from ..models.post import PostResult
from ..models.search_output import SearchOutput

WRAP_WIDTH = 86
INDENT = "    "
DIVIDER = "[dim]" + "─" * 72 + "[/dim]"


def time_ago(iso_date: str, now: datetime | None = None) -> str:
    """Describe an ISO-8601 timestamp relative to ``now``.

    Uses floor division throughout: 90 minutes is ``1h ago``, 50 hours
    is ``2d ago``.

    Args:
        iso_date: Timestamp such as ``2025-01-01T10:00:00.000Z``
        now: Reference time, defaults to the current UTC time

    Returns:
        ``Nm ago``, ``Nh ago`` or ``Nd ago``; empty for missing input
    """
    if not iso_date:
        return ""
    try:
        then = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
    except ValueError:
        return ""
    if then.tzinfo is None:
        then = then.replace(tzinfo=timezone.utc)

    now = now or datetime.now(timezone.utc)
    mins = max(0, int((now - then).total_seconds() // 60))
    if mins < 60:
        return f"{mins}m ago"
    hours = mins // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def word_wrap(text: str, width: int) -> list[str]:
    """Greedily pack words into lines of at most ``width`` characters.

    A word longer than ``width`` gets a line of its own, unbroken.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines


def _format_news_item(item: NewsResult, index: int) -> str:
    lines = []
    num = f"[dim]\\[{index + 1}][/dim]"
    headline = f"[bold white]{escape(item.headline or '(no headline)')}[/bold white]"
    cat = f"[cyan]\\[{escape(item.category)}][/cyan]" if item.category else ""
    when = f"[dim]{time_ago(item.updated_at)}[/dim]" if item.updated_at else ""

    lines.append(f"{num} {cat} {headline} {when}")

    if item.hook:
        lines.append(f"{INDENT}[yellow]{escape(item.hook)}[/yellow]")

    if item.summary:
        for line in word_wrap(item.summary, WRAP_WIDTH):
            lines.append(f"{INDENT}[dim]{escape(line)}[/dim]")

    if item.keywords:
        tags = escape(", ".join(item.keywords))
        lines.append(f"{INDENT}[dim]tags:[/dim] [blue]{tags}[/blue]")

    return "\n".join(lines)


def _format_post_item(item: PostResult, index: int) -> str:
    lines = []
    num = f"[dim]\\[{index + 1}][/dim]"
    handle = f"[cyan]@{escape(item.author_username)}[/cyan]"
    name = f"[white]{escape(item.author_name)}[/white]"
    verified = "[blue] ✓[/blue]" if item.verified else ""
    when = f"[dim]{time_ago(item.created_at)}[/dim]" if item.created_at else ""

    lines.append(f"{num} {handle} {name}{verified} {when}")

    for line in word_wrap(item.text, WRAP_WIDTH):
        lines.append(f"{INDENT}{escape(line)}")

    metrics = "[dim]  ·  [/dim]".join(
        [
            f"[red]♥[/red] {item.likes}",
            f"[green]↻[/green] {item.reposts}",
            f"[blue]↩[/blue] {item.replies}",
        ]
    )
    lines.append(f"{INDENT}{metrics}")
    lines.append(f"{INDENT}[dim]{escape(item.url)}[/dim]")

    return "\n".join(lines)


def format_output(output: SearchOutput, as_json: bool = False) -> str:
    """Render search output.

    Args:
        output: Result of a search run
        as_json: Return a JSON document instead of console markup

    Returns:
        JSON text, or rich markup for ``Console.print``
    """
    if as_json:
        return output.model_dump_json(indent=2, by_alias=True)

    sections = [
        "",
        f"[bold white]  News search: [/bold white][yellow]{escape(output.query)}[/yellow]",
        DIVIDER,
    ]

    if output.news:
        sections += ["", f"[bold underline]  News Stories ({len(output.news)})[/bold underline]", ""]
        for i, story in enumerate(output.news):
            sections.append(_format_news_item(story, i))
            if i < len(output.news) - 1:
                sections.append("")

    if output.posts:
        sections += ["", f"[bold underline]  Posts ({len(output.posts)})[/bold underline]", ""]
        for i, post in enumerate(output.posts):
            sections.append(_format_post_item(post, i))
            if i < len(output.posts) - 1:
                sections.append("")

    if not output.has_results:
        sections += ["", "[yellow]  No results found.[/yellow]"]

    if output.errors:
        sections += ["", "[bold red]  Errors:[/bold red]"]
        for err in output.errors:
            sections.append(f"[red]    - {escape(err)}[/red]")

    sections += ["", DIVIDER, ""]
    return "\n".join(sections)
