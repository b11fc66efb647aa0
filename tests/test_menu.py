from course_table import CourseTable
from menu import Menu


def run_menu(settings, scripted_input, *answers, table=None):
    output = []
    menu = Menu(
        table or CourseTable(),
        settings,
        input_fn=scripted_input(*answers),
        output_fn=output.append,
    )
    status = menu.run()
    return status, output, menu


def test_quit(settings, scripted_input):
    status, output, _ = run_menu(settings, scripted_input, "9")
    assert status == 0
    assert output[-1] == "Exiting application..."


def test_end_of_input_quits(settings, scripted_input):
    status, output, _ = run_menu(settings, scripted_input)
    assert status == 0
    assert output[-1] == "Exiting application..."


def test_menu_lists_options(settings, scripted_input):
    _, output, _ = run_menu(settings, scripted_input, "9")
    assert "1) Load data to application" in output
    assert "2) Display CS and MATH courses (alphanumeric)" in output
    assert "3) Search for individual course" in output
    assert "9) Quit application" in output


def test_invalid_choices_reprompt(settings, scripted_input):
    status, output, _ = run_menu(settings, scripted_input, "7", "abc", "9")
    assert status == 0
    assert output.count("Invalid menu option. Please try again.") == 2


def test_display_requires_data(settings, scripted_input):
    _, output, _ = run_menu(settings, scripted_input, "2", "3", "9")
    assert "Please load data first before displaying courses." in output
    assert "Please load data first before searching courses." in output


def test_load_and_display(settings, scripted_input, course_file):
    _, output, menu = run_menu(
        settings, scripted_input, "1", str(course_file), "2", "9"
    )

    assert menu.data_loaded
    assert f"Loaded 5 courses from {course_file}" in output
    listing = output[output.index("-------- Course List --------") + 1 :]
    assert listing[:4] == [
        "CSCI101: Introduction to Programming in C; Prerequisites: None",
        "CSCI200: Data Structures; Prerequisites: CSCI101",
        "CSCI300: Introduction to Algorithms; Prerequisites: CSCI200, MATH201",
        "MATH201: Discrete Mathematics; Prerequisites: None",
    ]
    assert not any(line.startswith("ENGL101") for line in output)


def test_load_uses_default_path(scripted_input, course_file, settings):
    settings.catalog_path = str(course_file)
    _, output, menu = run_menu(settings, scripted_input, "1", "", "9")
    assert menu.data_loaded
    assert menu.table.size == 5


def test_load_missing_file(settings, scripted_input):
    _, output, menu = run_menu(settings, scripted_input, "1", "/nonexistent.csv", "2", "9")
    assert not menu.data_loaded
    assert "Failed to load courses from: /nonexistent.csv" in output
    assert "Please load data first before displaying courses." in output


def test_search_by_prerequisite(settings, scripted_input, course_file):
    _, output, _ = run_menu(
        settings, scripted_input, "1", str(course_file), "3", "3", "CSCI101", "9"
    )
    listing = output[output.index("-------- Course List --------") + 1 :]
    assert listing[0] == "CSCI200: Data Structures; Prerequisites: CSCI101"


def test_search_no_results(settings, scripted_input, course_file):
    _, output, _ = run_menu(
        settings, scripted_input, "1", str(course_file), "3", "1", "ZZZZ999", "9"
    )
    assert "No matching courses found." in output


def test_search_invalid_selection(settings, scripted_input, course_file):
    _, output, _ = run_menu(
        settings, scripted_input, "1", str(course_file), "3", "5", "9"
    )
    assert "Invalid selection" in output


def test_search_empty_criteria(settings, scripted_input, course_file):
    _, output, _ = run_menu(
        settings, scripted_input, "1", str(course_file), "3", "2", "  ", "9"
    )
    assert "Search criteria cannot be empty." in output


def test_pause_between_screens(settings, scripted_input, monkeypatch):
    cleared = []
    monkeypatch.setattr("menu.clear_screen", lambda: cleared.append(True))
    settings.clear_screen = True

    fake_input = scripted_input("2", "", "9")
    menu = Menu(CourseTable(), settings, input_fn=fake_input, output_fn=lambda _: None)

    assert menu.run() == 0
    assert "Press Enter to continue..." in fake_input.prompts
    assert cleared == [True]


def test_display_all_courses(settings, scripted_input, course_file):
    settings.display_prefixes = []
    _, output, _ = run_menu(settings, scripted_input, "1", str(course_file), "2", "9")

    assert "2) Display all courses (alphanumeric)" in output
    listing = output[output.index("-------- Course List --------") + 1 :]
    assert [line.split(":")[0] for line in listing[:5]] == [
        "CSCI101",
        "CSCI200",
        "CSCI300",
        "ENGL101",
        "MATH201",
    ]


def test_load_file_without_valid_courses(settings, scripted_input, tmp_path):
    bad_file = tmp_path / "bad.csv"
    bad_file.write_text("BAD,Line\n", encoding="utf-8")

    _, output, menu = run_menu(settings, scripted_input, "1", str(bad_file), "9")

    assert not menu.data_loaded
    assert f"Failed to load courses from: {bad_file}" in output
