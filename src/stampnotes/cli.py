"""CLI entry point: notes editor, export and config subcommands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from stampnotes import __version__
from stampnotes.config import CONFIG_PATH, init_config_if_missing, load_config
from stampnotes.logging_setup import setup_logging

console = Console(highlight=False)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _meeting_options(func):
    """Decorator adding meeting metadata flags to a Click command."""
    options = [
        click.option("--title", type=str, default="", help="Meeting title for the export."),
        click.option("--location", type=str, default="", help="Meeting location."),
        click.option("--host", "host_name", type=str, default="", help="Person chairing the meeting."),
        click.option("--attendees", type=str, default="", help="Comma separated attendees."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _meeting_info(title: str, location: str, host_name: str, attendees: str):
    from stampnotes.output import MeetingInfo

    meeting = MeetingInfo.now(title)
    meeting.location = location
    meeting.host = host_name
    meeting.attendees = attendees
    return meeting


def _resolve_folder(folder: str | None, here: bool) -> str:
    """Determine save folder from flags and config.

    Priority: -f > --here > config save_folder > ~/notes
    """
    if folder:
        return folder
    if here:
        return str(Path.cwd() / "docs" / "notes")
    cfg = load_config()
    return cfg.get("save_folder", "~/notes")


def _get_command_name(ctx: click.Context | None = None) -> str:
    """Command name for hints: config command_alias > ctx.info_name > "stampnotes"."""
    cfg = load_config()
    alias = cfg.get("command_alias")
    if alias:
        return alias
    if ctx and ctx.info_name:
        return ctx.info_name
    return "stampnotes"


def _export(notes_text: str, output_dir: str | Path, stem: str | None, meeting) -> Path:
    """Write the export and report it; copies to clipboard when configured."""
    from stampnotes.output import build_markdown, copy_to_clipboard, save_notes

    md_path = save_notes(notes_text, output_dir, stem=stem, meeting=meeting)
    console.print(f"  [green]Saved[/green]         [dim]{md_path.name}[/dim]")
    console.print(f"  [dim]Notes: {md_path.resolve()}[/dim]")

    if load_config().get("auto_clipboard", False):
        if copy_to_clipboard(build_markdown(notes_text, meeting)):
            console.print("  [green]Clipboard[/green]     copied")
    return md_path


# ---------------------------------------------------------------------------
# Main command group
# ---------------------------------------------------------------------------

@click.group(invoke_without_command=True)
@click.option(
    "-f", "--folder",
    type=click.Path(),
    help="Folder to save exported notes.",
)
@click.option(
    "-h", "--here",
    "here",
    is_flag=True,
    default=False,
    help="Save to ./docs/notes in current directory.",
)
@click.option(
    "-r", "--record",
    is_flag=True,
    default=False,
    help="Start the recording clock as soon as the editor opens.",
)
@_meeting_options
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(__version__, prog_name="stampnotes")
@click.pass_context
def main(
    ctx: click.Context,
    folder: str | None,
    here: bool,
    record: bool,
    title: str,
    location: str,
    host_name: str,
    attendees: str,
    debug: bool,
) -> None:
    """stampnotes: notes that remember when each line was written."""
    setup_logging(debug=debug)
    ctx.ensure_object(dict)
    ctx.obj["folder"] = folder
    ctx.obj["here"] = here

    if ctx.invoked_subcommand is not None:
        return

    folder = _resolve_folder(folder, here)
    resolved = Path(folder).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    console.print(f"  [dim]Saving to {resolved}[/dim]")

    from stampnotes.app import NotesApp

    app = NotesApp(record=record)
    session = app.run()

    if session is None:
        console.print("  Notes discarded.")
        return

    anchors = len(session.line_timestamps())
    console.print(f"  [green]Notes[/green]         {len(session.lines)} lines, {anchors} timestamped")
    _export(
        session.render_with_markers(),
        resolved,
        stem=None,
        meeting=_meeting_info(title, location, host_name, attendees),
    )


# ---------------------------------------------------------------------------
# export subcommand
# ---------------------------------------------------------------------------

@main.command(name="export")
@click.argument("notes_files", nargs=-1, type=click.Path(exists=True, dir_okay=False), required=True)
@click.option("-o", "--output", "output_dir", type=click.Path(file_okay=False), default=None,
              help="Folder for the Markdown files (default: next to each input).")
@_meeting_options
@click.pass_context
def export_cmd(
    ctx: click.Context,
    notes_files: tuple[str, ...],
    output_dir: str | None,
    title: str,
    location: str,
    host_name: str,
    attendees: str,
) -> None:
    """Export notes text files (timestamp markers removed) to Markdown."""
    folder = ctx.obj.get("folder")
    here = ctx.obj.get("here", False)
    if output_dir is None and (folder or here):
        output_dir = str(Path(_resolve_folder(folder, here)).expanduser().resolve())

    for notes_file in notes_files:
        path = Path(notes_file).resolve()
        console.print(f"\n  [bold]{path.name}[/bold]")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            console.print(f"  [red]\\[fail][/red] could not read: {exc}")
            continue
        meeting = _meeting_info(title or path.stem, location, host_name, attendees)
        _export(text, output_dir or path.parent, stem=path.stem, meeting=meeting)


# ---------------------------------------------------------------------------
# config subcommand
# ---------------------------------------------------------------------------

@main.command()
@click.option("--show", is_flag=True, help="Show current config values.")
@click.pass_context
def config(ctx: click.Context, show: bool) -> None:
    """Show or edit configuration."""
    created = init_config_if_missing()
    if created:
        console.print(f"  Created default config at [dim]{CONFIG_PATH}[/dim]")
    if show:
        cfg = load_config()
        for key, val in cfg.items():
            console.print(f"  [bold]{key}:[/bold] {val}")
    else:
        console.print(f"  Config file: [dim]{CONFIG_PATH}[/dim]")
        cmd_name = _get_command_name(ctx)
        console.print(
            f"  Edit it directly, or use [bold]'{cmd_name} config --show'[/bold] to view current values."
        )
