# cli/main.py

"""
Command shell for the student roster.

Run a single command:

    roster add Alice 20 3.8
    roster calc required 3.0 60 3.5 30

or start interactive mode by running `roster` with no command.

Commands:
    add <name> <age> <gpa>                                  Add a student
    addgrad <name> <age> <gpa> <thesis> <advisor> <isPhD>   Add a graduate student
    list                                                    List all students
    find <name>                                             Find a student by name
    honors                                                  List honor roll students
    average                                                 Show the average GPA
    sort                                                    List students sorted by GPA
    remove <name>                                           Remove every student with that name
    count                                                   Show the student count
    grade <name>                                            Show grade details for a student
    stats                                                   Show GPA statistics
    calc letter|gpa|required [args...]                      Grade calculator
    save [filename]                                         Save students to file
    load [filename]                                         Load students from file

This module only parses arguments and formats output; every rule lives in `core` and `models`.
"""

import argparse
import logging
import shlex
from typing import Callable

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.commands as commands
import core.formatters as formatters
from cli.path_utils import resolve_data_file
from core.errors import PersistenceError, RecordNotFoundError
from core.persistence import load_from_file
from core.response import ErrorCode, Response
from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord

logger = logging.getLogger(__name__)

HELP_TEXT = """\
=== Available Commands ===
add <name> <age> <gpa>                 - Add a student
addgrad <name> <age> <gpa> <thesis> <advisor> <isPhD>
                                       - Add a graduate student
list                                   - List all students
find <name>                            - Find student by name
honors                                 - List honor roll students
average                                - Show average GPA
sort                                   - Show students sorted by GPA
remove <name>                          - Remove a student
count                                  - Show student count
grade <name>                           - Show grade details for student
stats                                  - Show GPA statistics
calc <subcommand> [args...]            - Grade calculator operations
save [filename]                        - Save students to file
load [filename]                        - Load students from file
help                                   - Show this help
exit                                   - Exit program"""

CALC_HELP_TEXT = """\
Usage: calc <subcommand> [args...]
Subcommands:
  letter <percentage>              - Convert percentage to letter grade
  gpa <letterGrade>                - Convert letter grade to GPA
  required <currentGPA> <currentCredits> <targetGPA> <remainingCredits>"""


class Shell:
    """
    Dispatches text commands against a roster and prints the results.

    `data_file` is the default target for `save` and `load` when no filename is given.
    """

    def __init__(self, roster: Roster, data_file: str):
        self.roster = roster
        self.data_file = data_file
        self._handlers: dict[str, Callable[[list[str]], Response | None]] = {
            "add": self.add,
            "addgrad": self.add_graduate,
            "add-graduate": self.add_graduate,
            "list": self.list_students,
            "find": self.find,
            "honors": self.honor_roll,
            "honor-roll": self.honor_roll,
            "average": self.average,
            "sort": self.sort,
            "remove": self.remove,
            "count": self.count,
            "grade": self.grade_detail,
            "stats": self.stats,
            "calc": self.calc,
            "save": self.save,
            "load": self.load,
        }

    # === dispatch ===

    def process_command(self, args: list[str]) -> Response | None:
        """
        Runs one command and prints its output.

        Args:
            args (list[str]): The command name followed by its arguments.

        Returns:
            The `Response` produced by the command, or None for `help` and unknown commands.

        Notes:
            - Number parsing errors are reported to the user and never raised.
        """
        if not args:
            return None

        handler = self._handlers.get(args[0].lower())

        if handler is None:
            print(HELP_TEXT)
            return None

        try:
            response = handler(args)

        except ValueError:
            response = Response.fail(
                detail="Invalid number format.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if response is not None and not response.success:
            helpers.display_response_failure(response)

        return response

    def interactive(self) -> None:
        helpers.display_banner("STUDENT MANAGEMENT SYSTEM")
        print("Type 'help' for commands, 'exit' to quit\n")

        while True:
            try:
                line = helpers.prompt_user_input("> ")

            except EOFError:
                line = "exit"

            if not line:
                continue

            if line.lower() == "exit":
                if self.roster.has_unsaved_changes and helpers.confirm_unsaved_changes():
                    self.save(["save"])

                print("Goodbye!")
                return

            if line.lower() == "help":
                print(HELP_TEXT)
                continue

            try:
                args = shlex.split(line)

            except ValueError as e:
                print(f"Error: {e}")
                continue

            self.process_command(args)

    # === command handlers ===

    def add(self, args: list[str]) -> Response:
        if len(args) != 4:
            return _usage("add <name> <age> <gpa>")

        response = commands.add_student(
            self.roster, args[1], int(args[2]), float(args[3])
        )

        if response.success:
            print(response.detail)

        return response

    def add_graduate(self, args: list[str]) -> Response:
        if len(args) != 7:
            return _usage("addgrad <name> <age> <gpa> <thesis> <advisor> <isPhD>")

        response = commands.add_graduate(
            self.roster,
            args[1],
            int(args[2]),
            float(args[3]),
            args[4],
            args[5],
            args[6].lower() == "true",
        )

        if response.success:
            print(response.detail)

        return response

    def list_students(self, args: list[str]) -> Response:
        response = commands.list_students(self.roster)
        helpers.display_titled_results(
            "All Students",
            response.data["records"],
            model_formatters.format_record_oneline,
        )
        return response

    def find(self, args: list[str]) -> Response:
        if len(args) != 2:
            return _usage("find <name>")

        response = commands.find_student(self.roster, args[1])

        if response.success:
            print("Found:")
            print(model_formatters.format_record_multiline(response.data["record"]))

        return response

    def honor_roll(self, args: list[str]) -> Response:
        response = commands.list_honor_roll(self.roster)
        helpers.display_titled_results(
            "Honor Roll Students",
            response.data["records"],
            model_formatters.format_record_oneline,
        )
        return response

    def average(self, args: list[str]) -> Response:
        response = commands.average_gpa(self.roster)
        print(f"Average GPA: {formatters.format_gpa(response.data['average'])}")
        return response

    def sort(self, args: list[str]) -> Response:
        response = commands.sort_by_gpa(self.roster)
        helpers.display_titled_results(
            "Students Sorted by GPA",
            response.data["records"],
            model_formatters.format_record_oneline,
        )
        return response

    def remove(self, args: list[str]) -> Response:
        if len(args) != 2:
            return _usage("remove <name>")

        response = commands.remove_student(self.roster, args[1])

        if response.success:
            print(response.detail)

        return response

    def count(self, args: list[str]) -> Response:
        response = commands.count_students(self.roster)
        print(f"Total students: {response.data['count']}")
        return response

    def grade_detail(self, args: list[str]) -> Response:
        if len(args) != 2:
            return _usage("grade <name>")

        response = commands.grade_detail(self.roster, args[1])

        if response.success:
            print(model_formatters.format_grade_detail(response.data))

        return response

    def stats(self, args: list[str]) -> Response:
        response = commands.gpa_statistics(self.roster)
        print(model_formatters.format_statistics(response.data["statistics"]))
        return response

    def calc(self, args: list[str]) -> Response | None:
        if len(args) < 2:
            print(CALC_HELP_TEXT)
            return None

        subcommand = args[1].lower()

        if subcommand == "letter":
            if len(args) != 3:
                return _usage("calc letter <percentage>")

            response = commands.calc_letter(float(args[2]))

            if response.success:
                percentage = formatters.format_percentage(response.data["percentage"])
                print(f"{percentage} = {response.data['letter']}")

            return response

        elif subcommand == "gpa":
            if len(args) != 3:
                return _usage("calc gpa <letterGrade>")

            response = commands.calc_gpa(args[2])

            if response.success:
                print(f"{args[2]} = {response.data['points']} GPA")

            return response

        elif subcommand == "required":
            if len(args) != 6:
                return _usage(
                    "calc required <currentGPA> <currentCredits> <targetGPA> <remainingCredits>"
                )

            response = commands.calc_required(
                float(args[2]), int(args[3]), float(args[4]), int(args[5])
            )

            if response.success:
                print(model_formatters.format_required_gpa(response.data))

            return response

        else:
            return Response.fail(
                detail=f"Unknown calculator subcommand: {subcommand}",
                error=ErrorCode.INVALID_INPUT,
            )

    def save(self, args: list[str]) -> Response:
        path = resolve_data_file(args[1] if len(args) > 1 else self.data_file)
        response = commands.save_roster(self.roster, path)

        if response.success:
            print(response.detail)

        return response

    def load(self, args: list[str]) -> Response:
        path = resolve_data_file(args[1] if len(args) > 1 else self.data_file)
        response = commands.load_roster(self.roster, path)

        if response.success:
            print(response.detail)

        return response


# === start-up ===


def seed_sample_roster() -> Roster:
    roster = Roster()
    roster.insert(StudentRecord("Alice", 20, 3.8))
    roster.insert(StudentRecord("Bob", 21, 3.2))
    roster.insert(StudentRecord("Charlie", 19, 3.9))
    roster.insert(
        GraduateRecord(
            "Diana",
            26,
            3.85,
            "Machine Learning in Healthcare",
            "Dr. Johnson",
            True,
        )
    )
    roster.mark_clean()
    return roster


def load_or_seed(data_file: str) -> Roster:
    """
    Loads the roster saved at `data_file`, or returns the sample roster if no file exists yet.

    Raises:
        PersistenceError: If the file exists but cannot be read or decoded.
    """
    try:
        roster = load_from_file(data_file)

    except RecordNotFoundError as e:
        logger.info("Starting with sample data: %s", e)
        return seed_sample_roster()

    print("Loaded existing student data.")
    return roster


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Track a roster of students and their GPAs.",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Roster save file (default: $ROSTER_DATA_FILE or ./students.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command and arguments; omit to start interactive mode",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    data_file = resolve_data_file(args.data_file)
    autosave = True

    try:
        roster = load_or_seed(data_file)

    except PersistenceError as e:
        print(f"Could not load {data_file}: {e}")
        print("Starting with sample data. Changes will not be saved automatically.")
        roster = seed_sample_roster()
        autosave = False

    shell = Shell(roster, data_file)

    if not args.command:
        print("No command provided. Starting interactive mode...")
        shell.interactive()
        return 0

    response = shell.process_command(args.command)

    if autosave and shell.roster.has_unsaved_changes:
        shell.save(["save"])

    return 0 if response is None or response.success else 1


# === helper methods ===


def _usage(usage: str) -> Response:
    return Response.fail(
        detail=f"Usage: {usage}",
        error=ErrorCode.MISSING_REQUIRED_FIELD,
    )


if __name__ == "__main__":
    raise SystemExit(main())
