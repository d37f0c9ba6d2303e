"""Student records and the column layout they are stored in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

COLUMNS = ("Name", "Email", "Phone", "Gender", "Course", "College", "Address")


class Gender(str, Enum):
    """Gender as recorded on the registration form."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


@dataclass(frozen=True)
class Student:
    """One registered student."""

    name: str = ""
    email: str = ""
    phone: str = ""
    gender: Gender = Gender.OTHER
    course: str = ""
    college: str = ""
    address: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.gender, Gender):
            object.__setattr__(self, "gender", Gender(self.gender))

    def as_row(self) -> tuple[str, ...]:
        """Return the values in table column order."""
        return (
            self.name,
            self.email,
            self.phone,
            self.gender.value,
            self.course,
            self.college,
            self.address,
        )

    @classmethod
    def from_row(cls, row) -> "Student":
        """Build a student from a row in table column order."""
        values = tuple("" if value is None else str(value) for value in row)
        if len(values) != len(COLUMNS):
            raise ValueError(
                f"expected {len(COLUMNS)} columns, got {len(values)}"
            )
        name, email, phone, gender, course, college, address = values
        return cls(
            name=name,
            email=email,
            phone=phone,
            gender=Gender(gender),
            course=course,
            college=college,
            address=address,
        )