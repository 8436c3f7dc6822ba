# Output formatters for various formats

import csv
import io
import json

from leaderboard.constants import REACTION_EMOJI
from leaderboard.services import LeaderboardResult


def _reaction_symbol(labels: list[str]) -> str:
    """Emoji for a single counted label, otherwise the labels themselves."""
    if len(labels) == 1:
        return REACTION_EMOJI.get(labels[0], labels[0])
    return "/".join(REACTION_EMOJI.get(label, label) for label in labels)


def format_header(result: LeaderboardResult) -> str:
    stamp = result.generated_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    return f"{result.slug} leaderboard - {stamp}"


def format_text(result: LeaderboardResult, verbose: bool = False) -> str:
    """
    Format the leaderboard as plain text.

    Returns - Header line followed by one "1. #42 (7 👍)" line per entry
    """
    symbol = _reaction_symbol(result.labels)
    output = [format_header(result)]
    for entry in result.entries:
        line = f"{entry.position}. #{entry.id} ({entry.count} {symbol})"
        if verbose and entry.title:
            line += f" {entry.title}"
        output.append(line)

    if verbose:
        output.append("")
        output.append(f"Open issues: {result.issue_count}")

    return "\n".join(output) + "\n"


def format_json(result: LeaderboardResult) -> str:
    """
    Format the leaderboard as JSON.

    Returns - JSON string
    """
    payload = {
        "repository": result.slug,
        "generated_at": result.generated_at.isoformat(),
        "labels": result.labels,
        "issue_count": result.issue_count,
        "entries": [entry.model_dump() for entry in result.entries],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_csv(result: LeaderboardResult) -> str:
    """
    Format the leaderboard as CSV.

    Returns - CSV string
    """
    fieldnames = ["position", "id", "count", "title"]
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=fieldnames, extrasaction="ignore")
    writer.writeheader()
    for entry in result.entries:
        writer.writerow(entry.model_dump())
    return output.getvalue()


def format_markdown(result: LeaderboardResult) -> str:
    """
    Format the leaderboard as a Markdown table.

    Returns - Markdown string
    """
    symbol = _reaction_symbol(result.labels)
    output = [f"## {format_header(result)}", ""]
    if not result.entries:
        output.append("No reactions found.")
        return "\n".join(output) + "\n"

    output.append(f"| # | Issue | {symbol} | Title |")
    output.append("|" + "|".join(["---"] * 4) + "|")
    for entry in result.entries:
        title = (entry.title or "").replace("|", "\\|")
        output.append(f"| {entry.position} | #{entry.id} | {entry.count} | {title} |")

    return "\n".join(output) + "\n"


def format_output(result: LeaderboardResult, format_type: str, verbose: bool = False) -> str:
    """
    Format the leaderboard in the requested format.

    Args:
        result: Leaderboard to render
        format_type: One of 'text', 'json', 'csv', 'markdown'
        verbose: Include issue titles (text only)

    Returns:
        Formatted string
    """
    format_type = format_type.lower()

    if format_type == "text":
        return format_text(result, verbose)
    elif format_type == "json":
        return format_json(result)
    elif format_type == "csv":
        return format_csv(result)
    elif format_type == "markdown":
        return format_markdown(result)
    else:
        raise ValueError(f"Unsupported format: {format_type}. Supported: text, json, csv, markdown")
