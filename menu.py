import os

from course_search import SearchCategory, all_courses, filter_by_prefix, search
from file_reader import read_file
from logger import logger

QUIT_OPTION = 9

SEARCH_OPTIONS = [
    {"id": 1, "text": "Course Name", "category": SearchCategory.NAME},
    {"id": 2, "text": "Course Title", "category": SearchCategory.TITLE},
    {"id": 3, "text": "Prerequisite", "category": SearchCategory.PREREQUISITE},
]


def clear_screen():
    os.system("cls" if os.name == "nt" else "clear")


class Menu:
    """Numbered text menu driving a CourseTable.

    All console input and output go through input_fn/output_fn so the menu
    can be driven from tests.
    """

    def __init__(self, table, settings, input_fn=input, output_fn=print):
        self.table = table
        self.settings = settings
        self.input = input_fn
        self.output = output_fn
        self.data_loaded = False

        if settings.display_prefixes:
            listing = " and ".join(settings.display_prefixes) + " courses"
        else:
            listing = "all courses"
        self.options = [
            {"id": 1, "text": "Load data to application", "function": self.load},
            {
                "id": 2,
                "text": f"Display {listing} (alphanumeric)",
                "function": self.display_courses,
                "needs_data": "displaying",
            },
            {
                "id": 3,
                "text": "Search for individual course",
                "function": self.search_courses,
                "needs_data": "searching",
            },
            {"id": QUIT_OPTION, "text": "Quit application"},
        ]

    def print_menu(self):
        self.output("\n==================================")
        self.output("     Welcome to ABC University    ")
        self.output("==================================")
        self.output("Please select a menu option:")
        for opt in self.options:
            self.output(f"{opt['id']}) {opt['text']}")
        self.output("----------------------------------")

    def read_choice(self, prompt):
        raw = self.input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def pause(self):
        if self.settings.clear_screen:
            self.input("Press Enter to continue...")
            clear_screen()

    def print_courses(self, courses):
        self.output("-------- Course List --------")
        for course in courses:
            self.output(course.describe())

    def load(self):
        self.output("Loading data...")
        prompt = "Enter the name of the course data file"
        default_path = self.settings.catalog_path
        if default_path:
            prompt += f" (default {default_path})"
        file_path = self.input(f"{prompt}: ").strip() or default_path

        if read_file(self.table, file_path):
            self.data_loaded = True
            self.output(f"Loaded {len(self.table)} courses from {file_path}")
        else:
            self.output(f"Failed to load courses from: {file_path or '<none>'}")

    def display_courses(self):
        if self.settings.display_prefixes:
            courses = filter_by_prefix(self.table, self.settings.display_prefixes)
        else:
            courses = all_courses(self.table)
        self.print_courses(courses)

    def search_courses(self):
        self.output("Search Categories:")
        for opt in SEARCH_OPTIONS:
            self.output(f"{opt['id']}) {opt['text']}")

        choice = self.read_choice("Enter selection: ")
        selected = next((o for o in SEARCH_OPTIONS if o["id"] == choice), None)
        if selected is None:
            self.output("Invalid selection")
            return

        criteria = self.input("Enter search text: ").strip()
        if not criteria:
            self.output("Search criteria cannot be empty.")
            return

        results = search(self.table, criteria, selected["category"])
        if not results:
            self.output("No matching courses found.")
            return
        self.print_courses(results)

    def run(self):
        """Show the menu until the user quits. Returns the process exit status."""
        while True:
            self.print_menu()
            try:
                choice = self.read_choice("Enter your choice: ")
            except EOFError:
                logger.debug("Input closed, leaving menu")
                choice = QUIT_OPTION

            if choice == QUIT_OPTION:
                self.output("Exiting application...")
                return 0

            selected = next((o for o in self.options if o["id"] == choice), None)
            if selected is None:
                self.output("Invalid menu option. Please try again.")
                continue

            try:
                if selected.get("needs_data") and not self.data_loaded:
                    self.output(
                        f"Please load data first before {selected['needs_data']} courses."
                    )
                else:
                    selected["function"]()
                self.pause()
            except EOFError:
                self.output("Exiting application...")
                return 0
