import os
from typing import List

from course import Course
from course_table import CourseTable, TableStatus
from line_parser import parse_line
from logger import logger


def load_courses(file_path, delimiter=","):
    """Read a course file into a list of Courses.

    Blank lines are skipped; lines that cannot be parsed are logged and
    dropped.

    Args:
        file_path: path to the comma-delimited course file
        delimiter: field delimiter

    Returns:
        the parsed courses in file order

    Raises:
        ValueError: if file_path is empty or is not a file
        FileNotFoundError: if file_path does not exist
    """
    if not file_path:
        raise ValueError("Invalid file name")
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Course file not found: {file_path}")
    if not os.path.isfile(file_path):
        raise ValueError(f"{file_path} must be a file")

    courses: List[Course] = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            course = parse_line(line, delimiter, line_number)
            if course is not None:
                courses.append(course)

    logger.info(f"Parsed {len(courses)} courses from {file_path}")
    return courses


def read_file(table: CourseTable, file_path, delimiter=",") -> bool:
    """Load a course file and replace the table's contents with it.

    Returns:
        True if the file was read and held at least one valid course, False if
        it could not be opened or decoded or no line parsed (the table is then
        left as it was)
    """
    try:
        courses = load_courses(file_path, delimiter)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to open file: {e}")
        return False

    if table.inject(courses) is TableStatus.EMPTY_BATCH:
        logger.warn(f"No valid courses found in {file_path}")
        return False

    logger.info(f"Successfully read file: {file_path}")
    return True
