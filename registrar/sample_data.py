"""
Sample records loaded at startup unless disabled.
"""

import logging

from .core.entities import Student, Teacher
from .services.registry import Registry


logger = logging.getLogger(__name__)


def create_sample_data(registry: Registry) -> Registry:
    """Populate ``registry`` with two teachers, three students and two courses."""
    sabry = registry.add_teacher(Teacher("Dr. Sabry", 45, "Male", "Computer Science", "T001"))
    rania = registry.add_teacher(Teacher("Prof. Rania", 50, "Female", "Mathematics", "T002"))

    students = [
        Student("Muhammad", 20, "Male", "S001", "Computer Science"),
        Student("Nour", 21, "Male", "S002", "Mathematics"),
        Student("Youssef", 22, "Male", "S003", "Computer Science"),
    ]
    for student in students:
        registry.add_student(student)

    registry.create_course("CS101", "Introduction to Programming", sabry)
    registry.create_course("MATH201", "Advanced Calculus", rania)

    for course_code, student_id in [("CS101", "S001"), ("CS101", "S003"),
                                    ("MATH201", "S002"), ("MATH201", "S003")]:
        registry.enroll(course_code, student_id)

    grades = [
        ("S001", "CS101", 90), ("S001", "CS101", 85),
        ("S003", "CS101", 78), ("S003", "CS101", 92),
        ("S002", "MATH201", 88), ("S002", "MATH201", 95),
        ("S003", "MATH201", 82),
    ]
    for student_id, course_code, grade in grades:
        registry.record_grade(student_id, course_code, grade)

    logger.info("Sample data created: %s", registry.statistics())
    return registry
