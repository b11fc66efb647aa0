from enum import Enum
from typing import Iterable, List

from course import Course
from course_table import CourseTable


class SearchCategory(str, Enum):
    NAME = "name"
    TITLE = "title"
    PREREQUISITE = "prereq"


def matches(course: Course, criteria: str, category: SearchCategory) -> bool:
    if category == SearchCategory.NAME:
        return course.name == criteria
    if category == SearchCategory.TITLE:
        return criteria in course.title
    if category == SearchCategory.PREREQUISITE:
        return criteria in course.prerequisites
    raise ValueError(f"Unknown search category: {category}")


def search(table: CourseTable, criteria: str, category: SearchCategory) -> List[Course]:
    """Return every course matching criteria in the given category, sorted by name.

    NAME matches the identifier exactly, TITLE matches a substring of the
    title and PREREQUISITE matches any prerequisite exactly.
    """
    category = SearchCategory(category)
    return [c for c in table.get_sorted() if matches(c, criteria, category)]


def filter_by_prefix(table: CourseTable, prefixes: Iterable[str]) -> List[Course]:
    """Sorted courses whose name starts with any of the given prefixes."""
    prefixes = tuple(prefixes)
    if not prefixes:
        return []
    return [c for c in table.get_sorted() if c.name.startswith(prefixes)]


def all_courses(table: CourseTable) -> List[Course]:
    return list(table.get_sorted())
