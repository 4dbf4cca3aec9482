"""Lesson document parsing: reference sentences and audio per section."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from .config import HTTP_TIMEOUT_SEC

logger = logging.getLogger(__name__)


class LessonDataError(Exception):
    """Lesson document could not be fetched or has an unexpected shape."""


@dataclass(frozen=True)
class Lesson:
    """Reference material for one lesson section.

    Attributes:
        sentences: Ordered reference sentences
        audio_url: Recording of the section, if any
    """
    sentences: List[str]
    audio_url: Optional[str] = None


def extract_sentences_from_section(section: Dict[str, Any]) -> List[str]:
    """Non-blank, trimmed lines of a section's content, in order."""
    content = section.get("content") or ""
    return [line.strip() for line in content.split("\n") if line.strip()]


def extract_sentences(data: Dict[str, Any], lesson_id: str) -> Optional[Lesson]:
    """Find the section with ``lesson_id`` and return its sentences.

    Args:
        data: Lesson document ({"sections": [{"id", "content", "audio"?}, ...]})
        lesson_id: Section id to look up

    Returns:
        Lesson for the first matching section, or None if no section matches
    """
    for section in data.get("sections", []):
        if section.get("id") == lesson_id:
            return Lesson(
                sentences=extract_sentences_from_section(section),
                audio_url=section.get("audio") or None,
            )
    return None


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_lesson_document(source: str, timeout: float = HTTP_TIMEOUT_SEC) -> Dict[str, Any]:
    """Load a lesson document from a URL or a local JSON file.

    Raises:
        LessonDataError: on network/file errors, invalid JSON, or a document
            without a "sections" list of objects with string "content"
    """
    try:
        if _is_url(source):
            logger.info("Fetching lesson document from %s", source)
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            data = response.json()
        else:
            logger.info("Reading lesson document %s", source)
            data = json.loads(Path(source).read_text(encoding="utf-8"))
    except requests.RequestException as e:
        raise LessonDataError(f"Could not fetch {source}: {e}") from e
    except OSError as e:
        raise LessonDataError(f"Could not read {source}: {e}") from e
    except ValueError as e:
        raise LessonDataError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
        raise LessonDataError(f"{source} has no 'sections' list")
    for index, section in enumerate(data["sections"]):
        if not isinstance(section, dict) or not isinstance(section.get("content"), str):
            raise LessonDataError(f"{source}: section {index} needs a string 'content'")
    return data
