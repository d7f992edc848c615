"""
Builds the day -> class -> period -> students grouping for one employee.

Malformed classes and lessons are skipped with a warning; anything that
makes the employee itself unusable is raised as EmployeeDataError. Errors
from the API client are not caught here.
"""

from dataclasses import replace
from typing import Iterable, Optional, Tuple

from .core.config import logger
from .exceptions import EmployeeDataError
from .models import Employee, Lesson, Period, SchoolClass, Student, StudentsByDay


def _nested_data(container, key):
    """Return container[key]['data'] or None when any level is missing."""
    if not isinstance(container, dict):
        return None
    wrapper = container.get(key)
    if not isinstance(wrapper, dict):
        return None
    return wrapper.get('data')


def parse_lesson(raw) -> Optional[Lesson]:
    """Return a Lesson, or None if the lesson has no period with a day and name."""
    period = _nested_data(raw, 'period')
    if not isinstance(period, dict):
        return None
    day = period.get('day')
    name = period.get('name')
    if not day or name is None:
        return None
    return Lesson(period=Period(day=str(day), name=str(name)))


def parse_class(raw) -> Optional[SchoolClass]:
    """
    Convert a raw class record into a SchoolClass without students.

    Returns None when the id, the name or the lesson list is missing.
    Individual lessons without a usable period are dropped with a warning.
    """
    if not isinstance(raw, dict):
        return None
    class_id = raw.get('id')
    name = raw.get('name')
    raw_lessons = _nested_data(raw, 'lessons')
    if class_id is None or name is None or not isinstance(raw_lessons, list):
        return None

    lessons = []
    for raw_lesson in raw_lessons:
        lesson = parse_lesson(raw_lesson)
        if lesson is None:
            logger.warning(f"Invalid lesson data in class '{name}'. Skipping...")
            continue
        lessons.append(lesson)
    return SchoolClass(id=str(class_id), name=str(name), lessons=tuple(lessons))


def parse_students(payload) -> Optional[Tuple[Student, ...]]:
    """Return the students of a class payload, or None if it has no student list."""
    raw_students = _nested_data(payload.get('data') if isinstance(payload, dict) else None,
                                'students')
    if not isinstance(raw_students, list):
        return None

    students = []
    for raw in raw_students:
        if not isinstance(raw, dict):
            logger.warning(f"Invalid student data: {raw!r}. Skipping...")
            continue
        students.append(Student(forename=str(raw.get('forename') or ''),
                                surname=str(raw.get('surname') or '')))
    return tuple(students)


def parse_employee(payload) -> Employee:
    """
    Convert the employee payload into an Employee holding its valid classes.

    Raises:
        EmployeeDataError: If the payload has no class list, or the list is empty
    """
    data = payload.get('data') if isinstance(payload, dict) else None
    raw_classes = _nested_data(data, 'classes')
    if not isinstance(raw_classes, list):
        raise EmployeeDataError('Failed to retrieve teacher data.')
    if not raw_classes:
        raise EmployeeDataError('This teacher has no classes.')

    classes = []
    for raw in raw_classes:
        school_class = parse_class(raw)
        if school_class is None:
            logger.warning(f"Invalid class data. Skipping... Class data: {raw!r}")
            continue
        classes.append(school_class)
    return Employee(id=str(data.get('id', '')), classes=tuple(classes))


def group_students(classes: Iterable[SchoolClass]) -> StudentsByDay:
    """Group the students of each class under every day and period it is taught."""
    students_by_day = StudentsByDay()
    for school_class in classes:
        names = [student.full_name for student in school_class.students]
        for lesson in school_class.lessons:
            students_by_day.add(lesson.period.day, school_class.name, lesson.period.name, names)
    return students_by_day


def fetch_students_by_day(client, employee_id) -> StudentsByDay:
    """
    Fetch an employee's classes and their students, then group them.

    Args:
        client: WondeClient (or anything with get_employee/get_class_students)
        employee_id: Wonde ID of the employee

    Returns:
        StudentsByDay: The grouped roster
    """
    logger.info(f"Fetching classes for employee {employee_id}")
    employee = parse_employee(client.get_employee(employee_id))

    classes = []
    for school_class in employee.classes:
        students = parse_students(client.get_class_students(school_class.id))
        if students is None:
            logger.warning(f"Failed to retrieve class data for class '{school_class.name}'. Skipping...")
            continue
        classes.append(replace(school_class, students=students))

    logger.info(f"Grouped {len(classes)} classes for employee {employee.id or employee_id}")
    return group_students(classes)
