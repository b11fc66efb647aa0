import re
from typing import List, Optional

from course import Course

COURSE_NAME_PATTERN = re.compile(r"[A-Za-z]{4}[0-9]{3}")
CONTROL_CHARS = ("\n", "\r", "\t")
QUOTE_CHARS = ('"', "'")


def is_valid_course_name(text) -> bool:
    """Check that text follows the identifier schema: 4 letters then 3 digits (ABCD123)."""
    if not text:
        return False
    return COURSE_NAME_PATTERN.fullmatch(text) is not None


def is_valid_course_data(text) -> bool:
    """Check that text is non-empty and free of newline, carriage return and tab."""
    if not text:
        return False
    return not any(ch in text for ch in CONTROL_CHARS)


def strip_quotes(text: str) -> str:
    if not text:
        return ""
    return "".join(ch for ch in text if ch not in QUOTE_CHARS)


def trim(text: str) -> str:
    if not text:
        return ""
    return text.strip()


def clean_field(text: str) -> str:
    return trim(strip_quotes(text))


def build_course(fields: List[str]) -> Optional[Course]:
    """Build a Course from raw text fields.

    Field 0 is the identifier, field 1 the title and every later field a
    prerequisite identifier. Prerequisites that do not match the identifier
    schema are dropped.

    Returns:
        the Course, or None if there are fewer than two fields, the identifier
        is malformed, or the title is empty or contains a newline, carriage
        return or tab
    """
    if not fields:
        return None

    cleaned = [clean_field(field) for field in fields]
    if len(cleaned) < 2:
        return None

    name, title = cleaned[0], cleaned[1]
    if not is_valid_course_name(name):
        return None
    if not is_valid_course_data(title):
        return None

    prerequisites = tuple(p for p in cleaned[2:] if is_valid_course_name(p))
    return Course(name=name, title=title, prerequisites=prerequisites)
