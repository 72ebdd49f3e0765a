import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from lending import create_app
from lending.models.item import Book, DVD, Magazine
from lending.models.person import make_member, make_staff, make_student, make_teaching_assistant


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "LENDING_STRICT": False})
    yield app


@pytest.fixture
def runner(app):
    """Flask CLI runner bound to the test app."""
    return app.test_cli_runner()


@pytest.fixture
def member():
    return make_member("M1", "Sam", "sam@uni.edu", 10.0)


@pytest.fixture
def student():
    return make_student("S100", "Amina", "amina@uni.edu", 50.0, 2, 0.8)


@pytest.fixture
def staff():
    return make_staff("ST200", "Omar", "omar@uni.edu", 3.0, True)


@pytest.fixture
def ta():
    return make_teaching_assistant("TA300", "Lina", "lina@uni.edu", 60.0, 2, 0.85, True)


@pytest.fixture
def book():
    return Book("B001", "Effective C++")


@pytest.fixture
def magazine():
    return Magazine("M010", "Tech Monthly")


@pytest.fixture
def dvd():
    return DVD("D100", "C++ Patterns")
