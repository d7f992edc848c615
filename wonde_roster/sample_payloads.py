"""
Sample Wonde API payloads shared by the test modules.
"""


def period(day, name):
    return {'period': {'data': {'day': day, 'name': name}}}


def employee_payload(classes, employee_id='E100'):
    return {'data': {'id': employee_id, 'classes': {'data': classes}}}


def class_payload(students, class_id='C1'):
    return {'data': {'id': class_id, 'students': {'data': students}}}


MATHS = {
    'id': 'C1',
    'name': 'Maths 7A',
    'lessons': {'data': [period('monday', 'P1'), period('wednesday', 'P3')]},
}

SCIENCE = {
    'id': 'C2',
    'name': 'Science 8B',
    'lessons': {'data': [period('monday', 'P2')]},
}

MATHS_STUDENTS = [
    {'forename': 'Ada', 'surname': 'Lovelace'},
    {'forename': 'Alan', 'surname': 'Turing'},
]

SCIENCE_STUDENTS = [
    {'forename': 'Marie', 'surname': 'Curie'},
]
