"""
Registry service: the students, teachers and courses of one session.
"""

import logging
from typing import Any, Dict, List

from ..core.entities import Course, Student, Teacher
from ..core.enums import EnrollmentStatus
from ..core.exceptions import ResourceNotFoundError
from ..core.repositories import CourseRepository, StudentRepository, TeacherRepository
from ..core.schemas import CourseCreate, StudentCreate, TeacherCreate, parse_input


logger = logging.getLogger(__name__)


class Registry:
    """In-memory registry of students, teachers and courses.

    Every operation either completes or raises before touching any
    collection, so a rejected call leaves the registry as it was.
    """

    def __init__(self):
        self._students = StudentRepository()
        self._teachers = TeacherRepository()
        self._courses = CourseRepository()

    # Collections

    def students(self) -> List[Student]:
        return self._students.find_all()

    def teachers(self) -> List[Teacher]:
        return self._teachers.find_all()

    def courses(self) -> List[Course]:
        return self._courses.find_all()

    # Record creation

    def add_student(self, student: Student) -> Student:
        """Add a student to the registry."""
        self._students.add(student)
        logger.info("Student %s added", student.name)
        return student

    def add_teacher(self, teacher: Teacher) -> Teacher:
        """Add a teacher to the registry."""
        self._teachers.add(teacher)
        logger.info("Teacher %s added", teacher.name)
        return teacher

    def add_course(self, course: Course) -> Course:
        """Add a course whose instructor is already registered."""
        self._require_teacher(course.instructor_id)
        self._courses.add(course)
        logger.info("Course %s - %s added", course.course_code, course.course_name)
        return course

    def create_student(self, data: Dict[str, Any]) -> Student:
        """Validate raw input and add the resulting student."""
        payload = parse_input(StudentCreate, data)
        return self.add_student(Student(**payload.model_dump()))

    def create_teacher(self, data: Dict[str, Any]) -> Teacher:
        """Validate raw input and add the resulting teacher."""
        payload = parse_input(TeacherCreate, data)
        return self.add_teacher(Teacher(**payload.model_dump()))

    def create_course(self, course_code: str, course_name: str, teacher: Teacher) -> Course:
        """Create a course taught by an existing teacher."""
        if self._teachers.is_empty():
            raise ResourceNotFoundError(
                "No teachers available. Please add teachers first.",
                error_code="no_teachers"
            )
        if not self._teachers.contains(teacher):
            raise ResourceNotFoundError(
                f"Teacher {teacher.teacher_id} is not registered",
                error_code="unknown_teacher",
                details={'teacher_id': teacher.teacher_id}
            )
        payload = parse_input(CourseCreate, {
            'course_code': course_code,
            'course_name': course_name,
            'teacher_id': teacher.teacher_id,
        })
        course = Course(payload.course_code, payload.course_name, teacher)
        self.add_course(course)
        logger.info("Course %s created with instructor %s", course.course_code, teacher.name)
        return course

    # Lookups

    def get_student(self, student_id: str) -> Student:
        student = self._students.find_by_key(student_id)
        if student is None:
            raise ResourceNotFoundError(
                f"Student {student_id} not found",
                error_code="unknown_student",
                details={'student_id': student_id}
            )
        return student

    def get_teacher(self, teacher_id: str) -> Teacher:
        return self._require_teacher(teacher_id)

    def get_course(self, course_code: str) -> Course:
        course = self._courses.find_by_key(course_code)
        if course is None:
            raise ResourceNotFoundError(
                f"Course {course_code} not found",
                error_code="unknown_course",
                details={'course_code': course_code}
            )
        return course

    def select_student(self, choice: Any) -> Student:
        """Get the student at a 1-based list position."""
        return self._students.select(choice)

    def select_teacher(self, choice: Any) -> Teacher:
        """Get the teacher at a 1-based list position."""
        return self._teachers.select(choice)

    def select_course(self, choice: Any) -> Course:
        """Get the course at a 1-based list position."""
        return self._courses.select(choice)

    def instructor_of(self, course: Course) -> Teacher:
        return self._require_teacher(course.instructor_id)

    def enrolled_students(self, course: Course) -> List[Student]:
        """Resolve a course's enrollment list in enrollment order."""
        return [self.get_student(student_id) for student_id in course.enrolled_student_ids]

    def courses_taught_by(self, teacher: Teacher) -> List[Course]:
        return [course for course in self._courses.find_all() if course.is_taught_by(teacher)]

    # Mutations

    def enroll(self, course_code: str, student_id: str) -> EnrollmentStatus:
        """Enroll a registered student in a registered course."""
        course = self.get_course(course_code)
        student = self.get_student(student_id)
        return course.enroll(student)

    def record_grade(self, student_id: str, course_code: str, grade: int) -> bool:
        """Record a grade for a registered student in a registered course.

        Returns False when the grade value itself is rejected.
        """
        student = self.get_student(student_id)
        course = self.get_course(course_code)
        return student.add_grade(course.course_code, grade)

    def statistics(self) -> Dict[str, int]:
        """Get registry counts."""
        return {
            'students': self._students.count(),
            'teachers': self._teachers.count(),
            'courses': self._courses.count(),
            'enrollments': sum(course.enrolled_count for course in self._courses.find_all()),
        }

    def _require_teacher(self, teacher_id: str) -> Teacher:
        teacher = self._teachers.find_by_key(teacher_id)
        if teacher is None:
            raise ResourceNotFoundError(
                f"Teacher {teacher_id} not found",
                error_code="unknown_teacher",
                details={'teacher_id': teacher_id}
            )
        return teacher
