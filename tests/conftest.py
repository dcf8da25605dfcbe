import pytest

from registrar.core.entities import Student, Teacher
from registrar.sample_data import create_sample_data
from registrar.services.registry import Registry


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def seeded() -> Registry:
    return create_sample_data(Registry())


@pytest.fixture
def student() -> Student:
    return Student("Ada", 20, "Female", "S100", "Computer Science")


@pytest.fixture
def teacher() -> Teacher:
    return Teacher("Dr. Grace", 40, "Female", "Computer Science", "T100")
