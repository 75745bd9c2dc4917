"""Student record entity and its categorical predicates."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

GRADES = ("A", "B", "C", "D", "F")
PASSING_GRADES = frozenset({"A", "B"})

# Subject keywords that mark a record as a science subject
SCIENCE_KEYWORDS = ("physics", "chemistry", "biology", "science")

RECORD_FIELDS = ("id", "name", "address", "school", "subject", "grade")


@dataclass(frozen=True)
class StudentRecord:
    """A single student record.

    Attributes:
        id: Unique, stable identifier assigned by the collection provider
        name: Student name
        address: Free-text postal address
        school: School name
        subject: Subject (free text)
        grade: One of A, B, C, D, F
    """

    id: int
    name: str
    address: str
    school: str
    subject: str
    grade: str

    def __post_init__(self) -> None:
        grade = str(self.grade).strip().upper()
        if grade not in GRADES:
            raise ValueError(
                f"Invalid grade {self.grade!r} for record {self.id}; expected one of {', '.join(GRADES)}"
            )
        object.__setattr__(self, "grade", grade)

    def is_passed(self) -> bool:
        """Passed means grade A or B."""
        return self.grade in PASSING_GRADES

    def has_science(self) -> bool:
        """True if the subject mentions any science keyword (case-insensitive)."""
        subject = self.subject.lower()
        return any(keyword in subject for keyword in SCIENCE_KEYWORDS)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StudentRecord:
        """Build a record from a mapping with the RECORD_FIELDS keys.

        Raises:
            KeyError: If a field is missing
            ValueError: If id is not an integer or grade is invalid
        """
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            address=str(data["address"]),
            school=str(data["school"]),
            subject=str(data["subject"]),
            grade=str(data["grade"]),
        )

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Address: {self.address}, "
            f"School: {self.school}, Subject: {self.subject}, Grade: {self.grade}"
        )
