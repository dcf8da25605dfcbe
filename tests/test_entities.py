import pytest

from registrar.core.entities import Course, Person, Student, Teacher
from registrar.core.enums import EnrollmentStatus, PersonType
from registrar.core.exceptions import ValidationError


@pytest.mark.parametrize("field,value", [
    ("name", ""), ("name", "   "), ("name", None),
    ("gender", ""), ("student_id", ""), ("major", None),
])
def test_student_requires_identity_fields(field, value) -> None:
    fields = dict(name="Ada", age=20, gender="Female", student_id="S1", major="CS")
    fields[field] = value
    with pytest.raises(ValidationError) as excinfo:
        Student(**fields)
    assert excinfo.value.details['field'] == field


@pytest.mark.parametrize("field", ["subject", "teacher_id", "name"])
def test_teacher_requires_identity_fields(field) -> None:
    fields = dict(name="Grace", age=40, gender="Female", subject="CS", teacher_id="T1")
    fields[field] = ""
    with pytest.raises(ValidationError):
        Teacher(**fields)


@pytest.mark.parametrize("age", [-1, 151, "20", 20.5, True])
def test_person_rejects_bad_age(age) -> None:
    with pytest.raises(ValidationError):
        Person("Ada", age, "Female")


def test_members_share_person_shape(student: Student, teacher: Teacher) -> None:
    assert student.person == Person("Ada", 20, "Female")
    assert student.person_type is PersonType.STUDENT
    assert teacher.person_type is PersonType.TEACHER
    assert teacher.to_dict()['person_type'] == "teacher"


def test_course_requires_code_name_and_instructor(teacher: Teacher) -> None:
    with pytest.raises(ValidationError):
        Course("", "Intro", teacher)
    with pytest.raises(ValidationError):
        Course("CS101", "", teacher)
    with pytest.raises(ValidationError):
        Course("CS101", "Intro", None)


def test_enroll_twice_keeps_one_entry(teacher: Teacher, student: Student) -> None:
    course = Course("CS101", "Intro", teacher)
    assert course.enroll(student) is EnrollmentStatus.ENROLLED
    assert course.enroll(student) is EnrollmentStatus.ALREADY_ENROLLED
    assert course.enrolled_student_ids == ["S100"]
    assert course.enrolled_count == 1


def test_enrollment_preserves_insertion_order(teacher: Teacher) -> None:
    course = Course("CS101", "Intro", teacher)
    students = [Student(f"S{i}", 20, "F", f"S{i}", "CS") for i in (3, 1, 2)]
    for s in students:
        course.enroll(s)
    course.enroll(students[0])
    assert course.enrolled_student_ids == ["S3", "S1", "S2"]


def test_mutations_bump_version(teacher: Teacher, student: Student) -> None:
    course = Course("CS101", "Intro", teacher)
    course.enroll(student)
    course.enroll(student)
    assert course.version == 2
    student.add_grade("CS101", 80)
    assert student.version == 2
    assert student.updated_at >= student.created_at


def test_course_holds_instructor_by_id(teacher: Teacher) -> None:
    course = Course("CS101", "Intro", teacher)
    assert course.instructor_id == "T100"
    assert course.is_taught_by(teacher)
    other = Teacher("Other", 50, "Male", "Math", "T200")
    assert not course.is_taught_by(other)
