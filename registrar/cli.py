"""
Interactive menu driver.

Reads menu choices and arguments, calls into the registry and reports, and
prints the results. No record logic lives here.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .config import AppConfig
from .core.enums import EnrollmentStatus
from .core.exceptions import RegistrarError
from .core.interfaces import Reportable
from .core.schemas import GradeEntry, parse_input
from .services import reports
from .services.registry import Registry


logger = logging.getLogger(__name__)

MenuAction = Callable[[], None]


class RegistrarShell:
    """Menu loop over one registry."""

    def __init__(self, registry: Registry, config: Optional[AppConfig] = None,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self._registry = registry
        self._config = config or AppConfig()
        self._input = input_fn
        self._output = output_fn

    # Plumbing

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _show(self, report: Reportable) -> None:
        self._output(reports.render_report(report, self._config.report_format, self._config.report_width))

    def _menu(self, title: str, options: List[Tuple[str, MenuAction]]) -> None:
        """Show a menu until its last option ("Back"/"Exit") is picked."""
        while True:
            self._output(f"\n{title}")
            for position, (label, _) in enumerate(options, start=1):
                self._output(f"{position}. {label}")
            try:
                index = int(self._ask("Select an option: ")) - 1
            except ValueError:
                self._output("Invalid input. Please enter a number.")
                continue
            if index == len(options) - 1:
                return
            if not 0 <= index < len(options):
                self._output("Invalid option. Please try again.")
                continue
            self._run(options[index][1])

    def _run(self, action: MenuAction) -> None:
        try:
            action()
        except RegistrarError as e:
            logger.debug("Operation rejected: %s", e.message)
            self._output(e.message)
            self._output("Operation cancelled.")

    def run(self) -> None:
        self._menu("Student Management System", [
            ("Student Operations", self.student_menu),
            ("Teacher Operations", self.teacher_menu),
            ("Course Operations", self.course_menu),
            ("View Reports", self.report_menu),
            ("Exit", lambda: None),
        ])

    # Menus

    def student_menu(self) -> None:
        self._menu("Student Operations", [
            ("Add New Student", self.add_student),
            ("Add Grade to Student", self.add_grade),
            ("View Student Details", self.view_student),
            ("List All Students", self.list_students),
            ("Back to Main Menu", lambda: None),
        ])

    def teacher_menu(self) -> None:
        self._menu("Teacher Operations", [
            ("Add New Teacher", self.add_teacher),
            ("View Teacher Details", self.view_teacher),
            ("List All Teachers", self.list_teachers),
            ("Back to Main Menu", lambda: None),
        ])

    def course_menu(self) -> None:
        self._menu("Course Operations", [
            ("Create New Course", self.create_course),
            ("Enroll Student in Course", self.enroll_student),
            ("View Course Details", self.view_course),
            ("List All Courses", self.list_courses),
            ("Back to Main Menu", lambda: None),
        ])

    def report_menu(self) -> None:
        self._menu("Reports", [
            ("Student Grade Report", self.grade_report),
            ("Course Enrollment Report", lambda: self._show(reports.enrollment_report(self._registry))),
            ("Teacher Course Report", lambda: self._show(reports.teacher_load_report(self._registry))),
            ("Back to Main Menu", lambda: None),
        ])

    # Student operations

    def _person_fields(self, kind: str) -> Dict[str, str]:
        return {
            'name': self._ask(f"Enter {kind} name: "),
            'age': self._ask("Enter age: "),
            'gender': self._ask("Enter gender: "),
        }

    def add_student(self) -> None:
        data = self._person_fields("student")
        data['student_id'] = self._ask("Enter student ID: ")
        data['major'] = self._ask("Enter major: ")
        student = self._registry.create_student(data)
        self._output(f"Student {student.name} added successfully.")

    def add_grade(self) -> None:
        self._show(reports.student_listing(self._registry))
        student = self._registry.select_student(self._ask("Select student (number): "))
        self._show(reports.course_listing(self._registry))
        course = self._registry.select_course(self._ask("Select course (number): "))
        entry = parse_input(GradeEntry, {
            'student_id': student.student_id,
            'course_code': course.course_code,
            'grade': self._ask("Enter grade (0-100): "),
        })
        if self._registry.record_grade(entry.student_id, entry.course_code, entry.grade):
            self._output(f"Grade {entry.grade} added for {student.name} in course {course.course_code}")
        else:
            self._output("Invalid grade. Please enter a number between 0 and 100.")

    def view_student(self) -> None:
        self._show(reports.student_listing(self._registry))
        choice = self._ask("Select student (number) or 0 to cancel: ")
        if choice == "0":
            return
        self._show(reports.member_details(self._registry.select_student(choice)))

    def list_students(self) -> None:
        self._show(reports.student_listing(self._registry))

    # Teacher operations

    def add_teacher(self) -> None:
        data = self._person_fields("teacher")
        data['subject'] = self._ask("Enter subject: ")
        data['teacher_id'] = self._ask("Enter teacher ID: ")
        teacher = self._registry.create_teacher(data)
        self._output(f"Teacher {teacher.name} added successfully.")

    def view_teacher(self) -> None:
        self._show(reports.teacher_listing(self._registry))
        choice = self._ask("Select teacher (number) or 0 to cancel: ")
        if choice == "0":
            return
        self._show(reports.member_details(self._registry.select_teacher(choice)))

    def list_teachers(self) -> None:
        self._show(reports.teacher_listing(self._registry))

    # Course operations

    def create_course(self) -> None:
        if not self._registry.teachers():
            self._output("No teachers available. Please add teachers first.")
            return
        code = self._ask("Enter course code: ")
        name = self._ask("Enter course name: ")
        self._show(reports.teacher_listing(self._registry))
        teacher = self._registry.select_teacher(self._ask("Select teacher (number): "))
        course = self._registry.create_course(code, name, teacher)
        self._output(
            f"Course {course.course_code} - {course.course_name} created successfully "
            f"with instructor {teacher.name}."
        )

    def enroll_student(self) -> None:
        self._show(reports.course_listing(self._registry))
        course = self._registry.select_course(self._ask("Select course (number): "))
        self._show(reports.student_listing(self._registry))
        student = self._registry.select_student(self._ask("Select student (number): "))
        status = self._registry.enroll(course.course_code, student.student_id)
        if status is EnrollmentStatus.ENROLLED:
            self._output(f"{student.name} enrolled in {course.course_name}")
        else:
            self._output(f"{student.name} is already enrolled in {course.course_name}")

    def view_course(self) -> None:
        self._show(reports.course_listing(self._registry))
        choice = self._ask("Select course (number) or 0 to cancel: ")
        if choice == "0":
            return
        self._show(reports.course_details(self._registry, self._registry.select_course(choice)))

    def list_courses(self) -> None:
        self._show(reports.enrollment_report(self._registry))

    # Reports

    def grade_report(self) -> None:
        self._show(reports.student_listing(self._registry))
        choice = self._ask("Select student (number) or 0 for all students: ")
        student = None if choice == "0" else self._registry.select_student(choice)
        self._show(reports.grade_report(self._registry, student))
