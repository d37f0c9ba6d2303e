"""SQLite storage for student records."""

from __future__ import annotations

import sqlite3

from .models import Student

DEFAULT_PATH = "student_database.db"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS Students ("
    "Name TEXT, Email TEXT, Phone TEXT, Gender TEXT, "
    "Course TEXT, College TEXT, Address TEXT)"
)
_INSERT = (
    "INSERT INTO Students (Name, Email, Phone, Gender, Course, College, Address) "
    "VALUES (?, ?, ?, ?, ?, ?, ?)"
)
_SELECT = "SELECT Name, Email, Phone, Gender, Course, College, Address FROM Students"


class StoreError(Exception):
    """A database operation failed."""


class EmptyCriteriaError(StoreError, ValueError):
    """Neither a name nor a phone number was given."""


def _criteria(name: str, phone: str) -> tuple[str, list[str]]:
    conditions = []
    params = []
    if name:
        conditions.append("Name LIKE '%' || ? || '%'")
        params.append(name)
    if phone:
        conditions.append("Phone LIKE '%' || ? || '%'")
        params.append(phone)
    if not conditions:
        raise EmptyCriteriaError("a name or phone number is required")
    return " AND ".join(conditions), params


class StudentStore:
    """Student table in an SQLite database file."""

    def __init__(self, path=DEFAULT_PATH):
        try:
            self._conn = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise StoreError(f"Database connection failed: {exc}") from exc

    def add(self, student: Student) -> None:
        """Insert a student, creating the table if it does not exist."""
        try:
            with self._conn:
                self._conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to create table: {exc}") from exc
        try:
            with self._conn:
                self._conn.execute(_INSERT, student.as_row())
        except sqlite3.Error as exc:
            raise StoreError(f"Insert failed: {exc}") from exc

    def _fetch(self, sql: str, params, failure: str) -> list[Student]:
        try:
            rows = self._conn.execute(sql, params).fetchall()
            return [Student.from_row(row) for row in rows]
        except (sqlite3.Error, ValueError) as exc:
            raise StoreError(f"{failure}: {exc}") from exc

    def all(self) -> list[Student]:
        """Return every stored student in table order."""
        return self._fetch(_SELECT, (), "Failed to fetch data")

    def search(self, name: str = "", phone: str = "") -> list[Student]:
        """Return students whose name and/or phone contain the given text."""
        where, params = _criteria(name, phone)
        return self._fetch(
            f"{_SELECT} WHERE {where}", params, "Failed to execute search query"
        )

    def delete(self, name: str = "", phone: str = "") -> int:
        """Delete matching students and return how many were removed."""
        where, params = _criteria(name, phone)
        try:
            with self._conn:
                cursor = self._conn.execute(
                    f"DELETE FROM Students WHERE {where}", params
                )
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to delete record(s): {exc}") from exc
        return cursor.rowcount

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "StudentStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()