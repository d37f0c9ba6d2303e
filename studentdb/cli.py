"""Command line front end for the student database."""

from __future__ import annotations

import argparse
import sys

from .models import COLUMNS, Gender, Student
from .store import DEFAULT_PATH, EmptyCriteriaError, StoreError, StudentStore


def format_table(students) -> str:
    """Render students as an aligned text table."""
    rows = [COLUMNS, *(student.as_row() for student in students)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(COLUMNS))]

    def line(values):
        return "  ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    header, *body = rows
    separator = "  ".join("-" * w for w in widths)
    return "\n".join([line(header), separator, *(line(r) for r in body)])


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studentdb", description="Student records.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="register a student")
    add.add_argument("--name", default="")
    add.add_argument("--email", default="")
    add.add_argument("--phone", default="")
    add.add_argument("--address", default="")
    add.add_argument("--course", required=True)
    add.add_argument("--college", required=True)
    add.add_argument(
        "--gender",
        choices=[g.value.lower() for g in Gender],
        default=Gender.OTHER.value.lower(),
    )

    commands.add_parser("view", help="list all students")

    for name, text in (("search", "find students"), ("delete", "remove students")):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("--name", default="")
        sub.add_argument("--phone", default="")
        if name == "delete":
            sub.add_argument("--yes", action="store_true", help="do not ask")
    return parser


def _confirm(question: str) -> bool:
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _run(args, store: StudentStore) -> int:
    if args.command == "add":
        store.add(
            Student(
                name=args.name,
                email=args.email,
                phone=args.phone,
                gender=Gender(args.gender.capitalize()),
                course=args.course,
                college=args.college,
                address=args.address,
            )
        )
        print("Data inserted successfully!")
    elif args.command == "view":
        print(format_table(store.all()))
    elif args.command == "search":
        try:
            found = store.search(args.name, args.phone)
        except EmptyCriteriaError:
            print("Please enter a Name or Phone Number to search.", file=sys.stderr)
            return 2
        if found:
            print(format_table(found))
        else:
            print("No records found.")
    else:
        if not args.name and not args.phone:
            print("Please enter a Name or Phone Number to delete.", file=sys.stderr)
            return 2
        if not args.yes and not _confirm(
            "Are you sure you want to delete the matching record(s)?"
        ):
            return 1
        store.delete(args.name, args.phone)
        print("Record deleted successfully.")
    return 0


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    try:
        with StudentStore(args.db) as store:
            return _run(args, store)
    except StoreError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())