import os
import sys

from course_table import CourseTable
from file_reader import read_file
from logger import logger
from menu import Menu
from settings import get_settings


def parse_args(argv):
    """Parse and validate command-line arguments.

    Args:
        argv: list of command-line arguments (excluding script name)

    Returns:
        path of a course file to load before the menu starts, or None

    Raises:
        ValueError: if arguments are invalid
    """
    if len(argv) > 1:
        raise ValueError("Usage: course_catalog.py [courses.csv]")
    if not argv:
        return None

    courses_path = argv[0]
    if not os.path.exists(courses_path):
        raise ValueError(f"{courses_path} does not exist")
    if not os.path.isfile(courses_path):
        raise ValueError(f"{courses_path} must be a file")

    return courses_path


def main(courses_path=None, settings=None, input_fn=input, output_fn=print):
    """Build the course table, optionally preload a file and run the menu.

    Returns:
        the process exit status
    """
    if settings is None:
        settings = get_settings()

    table = CourseTable(settings.initial_capacity)
    menu = Menu(table, settings, input_fn=input_fn, output_fn=output_fn)

    if courses_path:
        logger.info(f"Preloading courses from {courses_path}")
        menu.data_loaded = read_file(table, courses_path)

    return menu.run()


def run():
    try:
        courses_path = parse_args(sys.argv[1:])
        sys.exit(main(courses_path))
    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
