# studentdb

`studentdb` keeps a register of students in a single SQLite file. Each record
holds a name, e-mail address, phone number, gender, course, college and
address. You can add records, list all of them, and search for or delete
records by part of a name, part of a phone number, or both.

It has no dependencies outside the Python standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `studentdb` command. Its options are
listed with:

```
studentdb --help
```

Every command takes the global option `--db PATH` before the command name to
choose the database file; it defaults to `student_database.db` in the current
directory. The file and the `Students` table are created when needed.

### Adding a student

```
studentdb add --name "Ada Example" --email ada@example.com --phone 0100 \
    --gender female --course Mathematics --college "North College" \
    --address "1 Example Road"
```

`--course` and `--college` are required. `--gender` takes `male`, `female` or
`other` and defaults to `other`. The other fields default to empty text. On
success the command prints `Data inserted successfully!`.

### Listing all students

```
studentdb view
```

Prints every record as a plain text table with the columns Name, Email,
Phone, Gender, Course, College and Address.

### Searching

```
studentdb search --name Ada
studentdb search --phone 01
studentdb search --name Ada --phone 01
```

Matches are by substring. When both options are given, a record must match
both. Matching records are printed as a table; if there are none, the command
prints `No records found.` With neither option it prints an error and exits
with status 2.

### Deleting

```
studentdb delete --name Ada
studentdb delete --phone 01 --yes
```

Removes every record that matches, in the same way as `search`. Without
`--yes` the command asks for confirmation and only goes ahead on `y` or
`yes`; any other answer, or end of input, leaves the records alone and exits
with status 1. With neither `--name` nor `--phone` it prints an error and
exits with status 2.

Database failures are printed to standard error and the command exits with
status 1.

## Using it from Python

The `studentdb.store.StudentStore` class opens or creates the database file.
It works as a context manager, so the connection is closed when the block
ends.

```python
from studentdb.models import Gender, Student
from studentdb.store import EmptyCriteriaError, StudentStore

with StudentStore("student_database.db") as store:
    store.add(
        Student(
            name="Ada Example",
            email="ada@example.com",
            phone="0100",
            gender=Gender.FEMALE,
            course="Mathematics",
            college="North College",
            address="1 Example Road",
        )
    )

    for student in store.all():
        print(student.name, student.course)

    # Every record whose name contains "Ada".
    found = store.search("Ada", "")

    # Removes every record whose name contains "Ada" and whose phone
    # contains "01"; returns how many were removed.
    removed = store.delete("Ada", "01")

    try:
        store.search("", "")
    except EmptyCriteriaError:
        print("give a name or a phone number to search for")
```

- `add(student)` creates the `Students` table if it does not exist and
  inserts the record.
- `all()` returns every record as a list of `Student`, in table order.
- `search(name, phone)` and `delete(name, phone)` need at least one of the
  two criteria; with both empty they raise `EmptyCriteriaError`.
- Failures to open or use the database are raised as `StoreError`, of which
  `EmptyCriteriaError` is a subclass (it is also a `ValueError`).

`studentdb.models.Student` is a frozen dataclass. Its `gender` is a `Gender`
(`MALE`, `FEMALE` or `OTHER`, with the values `"Male"`, `"Female"` and
`"Other"`); a plain string with one of those values is converted. Its other
fields are strings that default to empty, and `gender` defaults to
`Gender.OTHER`. `Student.as_row()` gives the fields in table column order, and
`Student.from_row()` builds a record back from such a row, reading missing
values as empty text and raising `ValueError` for a row of the wrong length
or an unknown gender.

`studentdb.cli.format_table(students)` turns a sequence of students into the
same text table that the command prints.

## What it does not do

There is no way to edit a stored record in place; delete it and add it again.
Records have no unique key, so the same student can be added more than once.
There is no graphical interface and no login; the package is a command line
tool and a Python library.