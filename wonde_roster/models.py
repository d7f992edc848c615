"""
Typed records for the data fetched from the Wonde API.

The API returns deeply nested JSON; these records hold only the fields the
roster needs. StudentsByDay is the grouping built from them and consumed by
the renderer.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class Period:
    day: str
    name: str


@dataclass(frozen=True)
class Lesson:
    period: Period


@dataclass(frozen=True)
class Student:
    forename: str
    surname: str

    @property
    def full_name(self) -> str:
        return f"{self.forename} {self.surname}"


@dataclass(frozen=True)
class SchoolClass:
    id: str
    name: str
    lessons: Tuple[Lesson, ...] = ()
    students: Tuple[Student, ...] = ()


@dataclass(frozen=True)
class Employee:
    id: str
    classes: Tuple[SchoolClass, ...] = ()


# day -> class name -> period name -> student names
StudentsByDayDict = Dict[str, Dict[str, Dict[str, List[str]]]]


@dataclass
class StudentsByDay:
    """
    Students grouped by day, class name and period name.

    Every level keeps the order in which entries were first added.
    """

    days: StudentsByDayDict = field(default_factory=dict)

    def add(self, day: str, class_name: str, period: str, students=()):
        """Append student names under day/class/period, creating the slot if needed."""
        self.days.setdefault(day, {}).setdefault(class_name, {}).setdefault(period, []).extend(students)

    def __iter__(self) -> Iterator[Tuple[str, Dict[str, Dict[str, List[str]]]]]:
        return iter(self.days.items())

    def __bool__(self):
        return bool(self.days)

    def as_dict(self) -> StudentsByDayDict:
        """Return a deep copy as plain nested dicts and lists."""
        return {
            day: {
                class_name: {period: list(names) for period, names in periods.items()}
                for class_name, periods in classes.items()
            }
            for day, classes in self.days.items()
        }
