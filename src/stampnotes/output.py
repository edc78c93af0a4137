"""Export pipeline: strip inline timestamp markers and write Markdown.

The anchor index is not needed here; only the text is. Exported files are
written owner read/write only.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

TIMESTAMP_MARKER = re.compile(r"\[?\d{2}:\d{2}:\d{2}\]?\s*")


@dataclass
class MeetingInfo:
    title: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    host: str = ""
    attendees: str = ""

    @classmethod
    def now(cls, title: str = "") -> MeetingInfo:
        stamp = datetime.now()
        return cls(
            title=title or f"Notes {stamp.strftime('%Y-%m-%d %H:%M')}",
            date=stamp.strftime("%Y-%m-%d"),
            time=stamp.strftime("%H:%M"),
        )


def strip_timestamps(text: str) -> str:
    """Remove ``[HH:MM:SS]`` markers (brackets optional) and trailing spaces."""
    return TIMESTAMP_MARKER.sub("", text)


def _paragraphs(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def build_markdown(notes_text: str, meeting: MeetingInfo | None = None) -> str:
    """Build a Markdown document with YAML front matter from notes text."""
    meeting = meeting or MeetingInfo.now()
    front_matter = {
        "title": meeting.title,
        "date": meeting.date,
        "time": meeting.time,
        "location": meeting.location or "N/A",
        "host": meeting.host or "N/A",
        "attendees": meeting.attendees or "N/A",
    }

    lines = ["---"]
    lines.append(yaml.dump(front_matter, default_flow_style=False, sort_keys=False, allow_unicode=True).strip())
    lines.append("---")
    lines.append("")
    lines.append(f"# {meeting.title}")
    lines.append("")
    lines.append("## Meeting information")
    lines.append("")
    for label, value in (
        ("Date", front_matter["date"]),
        ("Time", front_matter["time"]),
        ("Location", front_matter["location"]),
        ("Host", front_matter["host"]),
        ("Attendees", front_matter["attendees"]),
    ):
        lines.append(f"- **{label}:** {value}")
    lines.append("")
    lines.append("## Notes")
    lines.append("")
    for paragraph in _paragraphs(strip_timestamps(notes_text)):
        lines.append(paragraph)
        lines.append("")

    return "\n".join(lines)


def save_notes(
    notes_text: str,
    output_dir: str | Path,
    stem: str | None = None,
    meeting: MeetingInfo | None = None,
) -> Path:
    """Write the Markdown export to ``<output_dir>/<stem>.md`` and return its path."""
    output_dir = Path(output_dir).expanduser()
    output_dir.mkdir(parents=True, exist_ok=True)
    if not stem:
        stem = datetime.now().strftime("notes_%Y%m%d_%H%M%S")
    md_path = output_dir / f"{stem}.md"

    md_path.write_text(build_markdown(notes_text, meeting), encoding="utf-8")
    md_path.chmod(0o600)
    logger.info("Notes saved: %s", md_path)
    return md_path


def copy_to_clipboard(text: str) -> bool:
    """Copy text to system clipboard. Returns True on success."""
    try:
        import pyperclip
        pyperclip.copy(text)
        logger.info("Notes copied to clipboard.")
        return True
    except Exception as exc:
        logger.warning("Could not copy to clipboard: %s", exc)
        return False
