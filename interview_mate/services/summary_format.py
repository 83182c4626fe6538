"""Structural parsing of the light-markdown AI summary."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field

BlockKind = Literal["heading", "bullet", "rule", "spacer", "paragraph"]

_BOLD_SPLIT = re.compile(r"(\*\*.*?\*\*)")
_HEADING_PREFIX = re.compile(r"^###\s*")
_BULLET_PREFIX = re.compile(r"^[*\-]\s*")


class TextSpan(BaseModel):
    text: str
    bold: bool = False


class SummaryBlock(BaseModel):
    kind: BlockKind
    spans: list[TextSpan] = Field(default_factory=list)


def parse_bold(text: str) -> list[TextSpan]:
    """Split text on **bold** markers."""
    spans = []
    for part in _BOLD_SPLIT.split(text):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            spans.append(TextSpan(text=part[2:-2], bold=True))
        else:
            spans.append(TextSpan(text=part))
    return spans


def parse_summary(text: str) -> list[SummaryBlock]:
    """
    Parse summary text line by line.

    `###` lines become headings, `* ` / `- ` lines bullets, `---` a rule,
    blank lines spacers, and everything else paragraphs.
    """
    if not text:
        return []

    blocks = []
    for line in text.split("\n"):
        stripped = line.strip()

        if line.startswith("###"):
            blocks.append(
                SummaryBlock(kind="heading", spans=parse_bold(_HEADING_PREFIX.sub("", line)))
            )
        elif stripped.startswith("* ") or stripped.startswith("- "):
            blocks.append(
                SummaryBlock(kind="bullet", spans=parse_bold(_BULLET_PREFIX.sub("", stripped)))
            )
        elif stripped == "---":
            blocks.append(SummaryBlock(kind="rule"))
        elif not stripped:
            blocks.append(SummaryBlock(kind="spacer"))
        else:
            blocks.append(SummaryBlock(kind="paragraph", spans=parse_bold(line)))

    return blocks
