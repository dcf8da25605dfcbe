import json

from registrar.core.entities import Student, Teacher
from registrar.core.enums import ReportFormat
from registrar.services import reports
from registrar.services.registry import Registry


def test_grade_report_for_one_student(seeded: Registry) -> None:
    report = reports.grade_report(seeded, seeded.get_student("S003"))
    assert len(report.students) == 1
    entry = report.students[0]
    assert [c.course_code for c in entry.courses] == ["CS101", "MATH201"]
    cs = entry.courses[0]
    assert cs.grades == [78, 92]
    assert cs.average == 85
    assert cs.highest == 92
    assert cs.status == "Pass"
    assert entry.gpa == 3.0


def test_grade_report_for_all_students(seeded: Registry) -> None:
    report = reports.grade_report(seeded)
    assert [s.student_id for s in report.students] == ["S001", "S002", "S003"]


def test_grade_report_student_without_grades(registry: Registry, student: Student) -> None:
    registry.add_student(student)
    report = reports.grade_report(registry)
    assert report.students[0].courses == []
    assert report.students[0].gpa == 0.0
    assert "No grades recorded yet." in report.render_text()


def test_enrollment_report(seeded: Registry, teacher: Teacher) -> None:
    seeded.add_teacher(teacher)
    seeded.create_course("CS300", "Compilers", teacher)
    report = reports.enrollment_report(seeded)
    by_code = {c.course_code: c for c in report.courses}
    assert by_code["CS101"].instructor_name == "Dr. Sabry"
    assert [s.student_id for s in by_code["CS101"].students] == ["S001", "S003"]
    assert by_code["MATH201"].enrolled_count == 2
    assert by_code["CS300"].students == []
    assert "No students enrolled." in report.render_text()


def test_teacher_load_report(seeded: Registry, teacher: Teacher) -> None:
    seeded.add_teacher(teacher)
    report = reports.teacher_load_report(seeded)
    loads = {t.teacher_id: t for t in report.teachers}
    assert loads["T001"].subject == "Computer Science"
    assert [(c.course_code, c.enrolled_count) for c in loads["T001"].courses] == [("CS101", 2)]
    assert loads["T100"].courses == []
    assert "No courses assigned." in report.render_text()


def test_reports_do_not_mutate(seeded: Registry) -> None:
    before = seeded.statistics()
    versions = [s.version for s in seeded.students()]
    reports.grade_report(seeded)
    reports.enrollment_report(seeded)
    reports.teacher_load_report(seeded)
    assert seeded.statistics() == before
    assert [s.version for s in seeded.students()] == versions


def test_empty_registry_reports(registry: Registry) -> None:
    assert "No students available." in reports.grade_report(registry).render_text()
    assert "No courses available." in reports.enrollment_report(registry).render_text()
    assert "No teachers available." in reports.teacher_load_report(registry).render_text()


def test_json_rendering(seeded: Registry) -> None:
    rendered = reports.render_report(reports.enrollment_report(seeded), ReportFormat.JSON)
    data = json.loads(rendered)
    assert data['report'] == "enrollment"
    assert data['courses'][0]['enrolled_count'] == 2


def test_listings_are_numbered(seeded: Registry) -> None:
    text = reports.render_report(reports.course_listing(seeded))
    assert "1. CS101 - Introduction to Programming" in text
    assert reports.student_listing(Registry()).render_text() == "No students available."


def test_member_details_dispatches_on_person_type(seeded: Registry) -> None:
    student_view = reports.member_details(seeded.get_student("S001"))
    teacher_view = reports.member_details(seeded.get_teacher("T002"))
    assert student_view.to_dict()['fields']['Student ID'] == "S001"
    assert "Grades" in student_view.sections
    assert teacher_view.to_dict()['fields']['Subject'] == "Mathematics"
    assert teacher_view.sections == {}


def test_course_details(seeded: Registry) -> None:
    view = reports.course_details(seeded, seeded.get_course("MATH201"))
    assert view.to_dict()['fields']['Instructor'] == "Prof. Rania (Mathematics)"
    assert len(view.sections["Enrolled Students"]) == 2
