"""
Hierarchical heading numbering for markdown.

``number_headings`` rewrites ATX headings as ``# 1. Title``,
``## 1.1 Title``, ``### 1.1.1 Title`` and so on.  Headings whose title
already starts with a number are left as they are and do not advance
the counters.

``pre_render`` applies the numbering only to documents whose YAML front
matter sets ``auto_number_headers: true``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$", re.MULTILINE)
ALREADY_NUMBERED_RE = re.compile(r"^\d+(\.\d+)*\.?\s")
# Fences are whole lines; the closing fence keeps its newline in the body
FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\n(.*?\n)?---[ \t]*(?=\n|\Z)", re.DOTALL)

MAX_LEVEL = 6


def number_headings(content: str) -> str:
    counters = [0] * MAX_LEVEL

    def _number(match: re.Match) -> str:
        level = len(match.group(1))
        title = match.group(2).strip()
        if ALREADY_NUMBERED_RE.match(title):
            return match.group(0)

        counters[level - 1] += 1
        for deeper in range(level, MAX_LEVEL):
            counters[deeper] = 0

        number = ".".join(str(c) for c in counters[:level])
        if level == 1:
            number += "."
        return f"{match.group(1)} {number} {title}"

    return HEADING_RE.sub(_number, content)


@dataclass
class RenderedDocument:
    content: str
    front_matter: dict[str, Any] = field(default_factory=dict)
    numbered: bool = False


def split_front_matter(document: str) -> tuple[str, dict[str, Any], str]:
    """
    Return ``(header, front_matter, body)``.

    *header* is the raw front matter block including its ``---`` fences,
    or an empty string when the document has none.
    """
    match = FRONT_MATTER_RE.match(document)
    if match is None:
        return "", {}, document

    try:
        front_matter = yaml.safe_load(match.group(1) or "") or {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML front matter: %s", e)
        front_matter = {}
    if not isinstance(front_matter, dict):
        front_matter = {}

    return match.group(0), front_matter, document[match.end():]


def pre_render(document: str) -> RenderedDocument:
    header, front_matter, body = split_front_matter(document)
    if front_matter.get("auto_number_headers") is not True:
        return RenderedDocument(content=document, front_matter=front_matter)

    return RenderedDocument(
        content=header + number_headings(body),
        front_matter=front_matter,
        numbered=True,
    )
