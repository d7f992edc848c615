"""
Console rendering of a StudentsByDay grouping.
"""

import sys

from .core.config import USE_COLOR

BOX_WIDTH = 80
BOLD = '\033[1m'
RESET = '\033[0m'


def _center(text, width=BOX_WIDTH):
    """Pad text to width with the odd extra space on the right."""
    padding = max(width - len(text), 0)
    left = padding // 2
    return ' ' * left + text + ' ' * (padding - left)


def _heading(text, color):
    return f"{BOLD}{text}{RESET}" if color else text


def render_day_header(day):
    """Return the boxed header lines for one day."""
    return [
        '┌' + '─' * BOX_WIDTH + '┐',
        '│' + _center('Day of the Week') + '│',
        '│' + _center(day) + '│',
        '└' + '─' * BOX_WIDTH + '┘',
    ]


def render_students_by_day(students_by_day, color=True):
    """
    Render the grouping as text, one block per day.

    Args:
        students_by_day: StudentsByDay to render
        color: Whether to make class and period headings bold

    Returns:
        str: The rendered report
    """
    lines = []
    for day, classes in students_by_day:
        lines.append('')
        lines.extend(render_day_header(day))
        lines.append('')

        for class_name, periods in classes.items():
            lines.append(_heading(f"-- Class Name: {class_name} --", color))

            for period, students in periods.items():
                lines.append(_heading(f"-- Period: {period} --", color))
                lines.append('')
                lines.extend(f"Student: {student}" for student in students)
                lines.append('')

        lines.append('')

    return '\n'.join(lines) + '\n' if lines else ''


def print_students_by_day(students_by_day, stream=None, color=None):
    """Write the rendered report to stream (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    if color is None:
        color = USE_COLOR
    stream.write(render_students_by_day(students_by_day, color=color))
    stream.flush()
