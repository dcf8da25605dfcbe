"""
Read-only report generation over a registry.

Each ``*_report`` function only selects data into a report dataclass;
rendering is a separate step so the selection can be checked on its own.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..core.entities import Course, Member, Student, Teacher
from ..core.enums import PersonType, ReportFormat
from ..core.interfaces import Reportable
from .registry import Registry


DEFAULT_WIDTH = 70
LABEL_WIDTH = 15


def _field(label: str, value: Any) -> str:
    return f"{label + ':':<{LABEL_WIDTH}} {value}"


@dataclass
class CourseGrades:
    """Grades of one student in one course."""
    course_code: str
    grades: List[int]
    average: float
    highest: int
    status: str


@dataclass
class StudentGrades:
    student_id: str
    name: str
    major: str
    courses: List[CourseGrades] = field(default_factory=list)
    gpa: float = 0.0

    def render_lines(self) -> List[str]:
        lines = [f"Student: {self.name} (ID: {self.student_id})"]
        if not self.courses:
            lines.append("No grades recorded yet.")
            return lines
        for course in self.courses:
            lines.append("")
            lines.append(f"{course.course_code}:")
            lines.append(f"Grades: {', '.join(str(grade) for grade in course.grades)}")
            lines.append(f"Average: {course.average:.1f}")
            lines.append(f"Status: {course.status}")
        lines.append("")
        lines.append(f"Overall GPA: {self.gpa:.2f}")
        return lines


@dataclass
class GradeReport(Reportable):
    students: List[StudentGrades] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'report': 'grades', 'students': [asdict(student) for student in self.students]}

    def render_text(self, width: int = DEFAULT_WIDTH) -> str:
        lines = ["GRADE REPORT", "=" * width]
        if not self.students:
            lines.append("No students available.")
        for index, student in enumerate(self.students):
            if index:
                lines.append("-" * width)
            lines.append("")
            lines.extend(student.render_lines())
        return "\n".join(lines)


@dataclass
class EnrolledStudent:
    student_id: str
    name: str


@dataclass
class CourseEnrollment:
    course_code: str
    course_name: str
    instructor_name: str
    students: List[EnrolledStudent] = field(default_factory=list)

    @property
    def enrolled_count(self) -> int:
        return len(self.students)


@dataclass
class EnrollmentReport(Reportable):
    courses: List[CourseEnrollment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'report': 'enrollment',
            'courses': [
                dict(asdict(course), enrolled_count=course.enrolled_count)
                for course in self.courses
            ],
        }

    def render_text(self, width: int = DEFAULT_WIDTH) -> str:
        lines = ["COURSE ENROLLMENT REPORT", "=" * width]
        if not self.courses:
            lines.append("No courses available.")
        for course in self.courses:
            lines.append("")
            lines.append(f"Course: {course.course_code} - {course.course_name}")
            lines.append(f"Instructor: {course.instructor_name}")
            lines.append(f"Enrolled Students: {course.enrolled_count}")
            if course.students:
                lines.append("")
                lines.append("Enrolled Students:")
                lines.extend(f"- {student.name} (ID: {student.student_id})" for student in course.students)
            else:
                lines.append("No students enrolled.")
            lines.append("-" * width)
        return "\n".join(lines)


@dataclass
class TaughtCourse:
    course_code: str
    course_name: str
    enrolled_count: int


@dataclass
class TeacherLoad:
    teacher_id: str
    name: str
    subject: str
    courses: List[TaughtCourse] = field(default_factory=list)


@dataclass
class TeacherLoadReport(Reportable):
    teachers: List[TeacherLoad] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'report': 'teacher_load', 'teachers': [asdict(teacher) for teacher in self.teachers]}

    def render_text(self, width: int = DEFAULT_WIDTH) -> str:
        lines = ["TEACHER COURSE REPORT", "=" * width]
        if not self.teachers:
            lines.append("No teachers available.")
        for teacher in self.teachers:
            lines.append("")
            lines.append(f"Teacher: {teacher.name} (ID: {teacher.teacher_id})")
            lines.append(f"Subject: {teacher.subject}")
            lines.append(f"Courses Teaching: {len(teacher.courses)}")
            if teacher.courses:
                lines.append("")
                lines.append("Courses:")
                for course in teacher.courses:
                    lines.append(f"- {course.course_code} - {course.course_name}")
                    lines.append(f"  Enrolled Students: {course.enrolled_count}")
            else:
                lines.append("No courses assigned.")
            lines.append("-" * width)
        return "\n".join(lines)


@dataclass
class Listing(Reportable):
    """Numbered list of records, as offered for selection."""
    title: str
    empty_message: str
    rows: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'report': 'listing', 'title': self.title, 'rows': list(self.rows)}

    def render_text(self, width: int = DEFAULT_WIDTH) -> str:
        if not self.rows:
            return self.empty_message
        lines = [f"{self.title}:"]
        lines.extend(f"{position}. {row}" for position, row in enumerate(self.rows, start=1))
        return "\n".join(lines)


@dataclass
class Details(Reportable):
    """Label/value view of one record."""
    title: str
    fields: List[List[str]] = field(default_factory=list)
    sections: Dict[str, List[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'report': 'details',
            'title': self.title,
            'fields': {label: value for label, value in self.fields},
            'sections': {name: list(lines) for name, lines in self.sections.items()},
        }

    def render_text(self, width: int = DEFAULT_WIDTH) -> str:
        lines = [self.title, "=" * width]
        lines.extend(_field(label, value) for label, value in self.fields)
        for name, section_lines in self.sections.items():
            lines.append("")
            lines.append(f"{name}:")
            lines.extend(section_lines)
        return "\n".join(lines)


def student_grades(student: Student) -> StudentGrades:
    """Select one student's grades, course by course."""
    courses = [
        CourseGrades(
            course_code=code,
            grades=student.grades(code),
            average=student.average_grade(code),
            highest=student.highest_grade(code),
            status=student.status(code).value,
        )
        for code in student.graded_courses()
    ]
    return StudentGrades(
        student_id=student.student_id,
        name=student.name,
        major=student.major,
        courses=courses,
        gpa=student.gpa(),
    )


def grade_report(registry: Registry, student: Optional[Student] = None) -> GradeReport:
    """Grades of one student, or of every student when none is given."""
    selected = [student] if student is not None else registry.students()
    return GradeReport(students=[student_grades(s) for s in selected])


def enrollment_report(registry: Registry) -> EnrollmentReport:
    """Instructor and roster of every course."""
    return EnrollmentReport(courses=[
        CourseEnrollment(
            course_code=course.course_code,
            course_name=course.course_name,
            instructor_name=registry.instructor_of(course).name,
            students=[
                EnrolledStudent(student_id=s.student_id, name=s.name)
                for s in registry.enrolled_students(course)
            ],
        )
        for course in registry.courses()
    ])


def teacher_load_report(registry: Registry) -> TeacherLoadReport:
    """Courses taught by every teacher."""
    return TeacherLoadReport(teachers=[
        TeacherLoad(
            teacher_id=teacher.teacher_id,
            name=teacher.name,
            subject=teacher.subject,
            courses=[
                TaughtCourse(course.course_code, course.course_name, course.enrolled_count)
                for course in registry.courses_taught_by(teacher)
            ],
        )
        for teacher in registry.teachers()
    ])


def student_listing(registry: Registry) -> Listing:
    return Listing(
        title="Available Students",
        empty_message="No students available.",
        rows=[f"{s.name} (ID: {s.student_id})" for s in registry.students()],
    )


def teacher_listing(registry: Registry) -> Listing:
    return Listing(
        title="Available Teachers",
        empty_message="No teachers available.",
        rows=[f"{t.name} ({t.subject})" for t in registry.teachers()],
    )


def course_listing(registry: Registry) -> Listing:
    return Listing(
        title="Available Courses",
        empty_message="No courses available.",
        rows=[f"{c.course_code} - {c.course_name}" for c in registry.courses()],
    )


def member_details(member: Member) -> Details:
    """Details view for a student or a teacher."""
    values = [
        ["Name", member.name],
        ["Age", str(member.age)],
        ["Gender", member.gender],
    ]
    sections: Dict[str, List[str]] = {}
    if member.person_type is PersonType.STUDENT:
        values.append(["Student ID", member.student_id])
        values.append(["Major", member.major])
        sections["Grades"] = student_grades(member).render_lines()[1:]
        title = "STUDENT DETAILS"
    else:
        values.append(["Subject", member.subject])
        values.append(["Teacher ID", member.teacher_id])
        title = "TEACHER DETAILS"
    return Details(title=title, fields=values, sections=sections)


def course_details(registry: Registry, course: Course) -> Details:
    instructor: Teacher = registry.instructor_of(course)
    students = registry.enrolled_students(course)
    roster = [f"{s.name} (ID: {s.student_id}, {s.major})" for s in students]
    return Details(
        title="COURSE DETAILS",
        fields=[
            ["Course Code", course.course_code],
            ["Course Name", course.course_name],
            ["Instructor", f"{instructor.name} ({instructor.subject})"],
            ["Enrolled", str(course.enrolled_count)],
        ],
        sections={"Enrolled Students": roster or ["No students enrolled yet."]},
    )


def render_report(report: Reportable, report_format: ReportFormat = ReportFormat.TEXT,
                  width: int = DEFAULT_WIDTH) -> str:
    """Render a report in the requested format."""
    if report_format is ReportFormat.JSON:
        return json.dumps(report.to_dict(), indent=2)
    return report.render_text(width)
