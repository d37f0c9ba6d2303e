import pytest

from studentdb.models import Gender, Student
from studentdb.store import EmptyCriteriaError, StoreError, StudentStore

ALICE = Student("Alice", "alice@example.com", "100", Gender.FEMALE, "Physics", "North", "1 Road")
BOB = Student("Bob", "bob@example.com", "200", Gender.MALE, "Maths", "South", "2 Road")
ALAN = Student("Alan", "alan@example.com", "201", Gender.OTHER, "Art", "North", "3 Road")


@pytest.fixture
def store(tmp_path):
    with StudentStore(tmp_path / "students.db") as s:
        yield s


@pytest.fixture
def filled(store):
    for student in (ALICE, BOB, ALAN):
        store.add(student)
    return store


def test_add_and_all_in_insert_order(filled):
    assert filled.all() == [ALICE, BOB, ALAN]


def test_data_persists_between_stores(tmp_path):
    path = tmp_path / "students.db"
    with StudentStore(path) as first:
        first.add(ALICE)
    with StudentStore(path) as second:
        assert second.all() == [ALICE]


def test_all_without_table_fails(store):
    with pytest.raises(StoreError):
        store.all()


def test_search_by_name_substring(filled):
    assert filled.search(name="Al") == [ALICE, ALAN]


def test_search_by_phone_substring(filled):
    assert filled.search(phone="20") == [BOB, ALAN]


def test_search_by_both_uses_and(filled):
    assert filled.search(name="Al", phone="20") == [ALAN]


def test_search_without_match_is_empty(filled):
    assert filled.search(name="Zed") == []


def test_search_requires_criteria(filled):
    with pytest.raises(EmptyCriteriaError):
        filled.search()


def test_empty_criteria_is_store_error(filled):
    with pytest.raises(StoreError):
        filled.search("", "")
    with pytest.raises(StoreError):
        filled.delete("", "")
    assert filled.all() == [ALICE, BOB, ALAN]


def test_quotes_are_stored_verbatim(store):
    student = Student(name="O'Neil", email="o@example.com", phone="300")
    store.add(student)
    assert store.search(name="O'N") == [student]


def test_delete_returns_count_and_removes(filled):
    assert filled.delete(name="Al") == 2
    assert filled.all() == [BOB]


def test_delete_requires_criteria(filled):
    with pytest.raises(EmptyCriteriaError):
        filled.delete("", "")
    assert len(filled.all()) == 3


def test_closed_store_fails(tmp_path):
    store = StudentStore(tmp_path / "students.db")
    store.add(ALICE)
    store.close()
    with pytest.raises(StoreError):
        store.all()


def test_unopenable_path_fails(tmp_path):
    with pytest.raises(StoreError):
        StudentStore(tmp_path)