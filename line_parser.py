from typing import List, Optional

from course import Course
from course_builder import QUOTE_CHARS, build_course
from logger import logger


def split(line: str, delimiter: str = ",") -> List[str]:
    """Split a line on a single-character delimiter.

    A delimiter between a pair of matching single or double quotes does not
    split; the quotes themselves are kept for the builder to strip. Runs of
    consecutive delimiters count as one, and a trailing delimiter does not
    produce an empty last field.
    """
    if not line:
        return []
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got: {delimiter!r}")

    fields = []
    start = 0
    length = len(line)

    while start < length:
        end = start
        quote_char = None
        while end < length:
            ch = line[end]
            if ch in QUOTE_CHARS:
                if quote_char is None:
                    quote_char = ch
                elif ch == quote_char:
                    quote_char = None
            elif ch == delimiter and quote_char is None:
                break
            end += 1
        fields.append(line[start:end])

        start = end + 1
        while start < length and line[start] == delimiter:
            start += 1

    return fields


def parse_line(line: str, delimiter: str = ",", line_number: int = 0) -> Optional[Course]:
    fields = split(line, delimiter)

    if len(fields) < 2:
        logger.warn(f"Invalid line format at line: {line_number}")
        return None

    course = build_course(fields)
    if course is None:
        logger.warn(f"Failed to build course at line: {line_number}")
        return None

    return course
