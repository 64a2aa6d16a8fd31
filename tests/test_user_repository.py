# File: tests/test_user_repository.py

import pytest
from sqlalchemy.exc import IntegrityError

from user_manager.models.user import User
from user_manager.repositories.user_repository import UserRepository


@pytest.fixture()
def repository(db_session) -> UserRepository:
    return UserRepository(db_session)


def add(repository: UserRepository, name: str, email: str) -> User:
    return repository.create(User(id=0, name=name, email=email, password="ciphertext"))


def test_create_assigns_id(repository):
    user = add(repository, "Alice", "alice@example.com")

    assert user.id and user.id > 0
    assert repository.get_by_id(user.id).email == "alice@example.com"


def test_get_by_id_missing_returns_none(repository):
    assert repository.get_by_id(12345) is None


def test_get_all_empty_and_populated(repository):
    assert repository.get_all() == []

    add(repository, "Alice", "alice@example.com")
    add(repository, "Bob Builder", "bob@example.com")

    assert [u.name for u in repository.get_all()] == ["Alice", "Bob Builder"]


def test_get_by_email_is_case_insensitive(repository):
    user = add(repository, "Alice", "Alice@Example.com")

    assert repository.get_by_email("alice@example.COM").id == user.id
    assert repository.get_by_email("nobody@example.com") is None


def test_email_unique_index_ignores_case(repository, db_session):
    add(repository, "Alice", "alice@example.com")

    with pytest.raises(IntegrityError):
        add(repository, "Other Alice", "ALICE@example.com")

    # Session stays usable after the rollback.
    assert len(repository.get_all()) == 1


def test_search_by_name_substring(repository):
    add(repository, "Alice Smith", "alice@example.com")
    add(repository, "Bob Smithson", "bob@example.com")
    add(repository, "Carol", "carol@example.com")

    assert {u.name for u in repository.search_by_name("SMITH")} == {"Alice Smith", "Bob Smithson"}
    assert repository.search_by_name("zed") == []


def test_search_by_email_substring(repository):
    add(repository, "Alice", "alice@example.com")
    add(repository, "Bob", "bob@sample.org")

    assert [u.name for u in repository.search_by_email("EXAMPLE")] == ["Alice"]
    assert repository.search_by_email("nowhere") == []


def test_get_by_email_non_ascii_exact_match(repository):
    user = add(repository, "Élodie", "Élodie@example.com")

    assert repository.get_by_email("Élodie@example.com").id == user.id
    assert [u.id for u in repository.search_by_email("Élodie")] == [user.id]
    assert [u.id for u in repository.search_by_name("ÉLO")] == [user.id]


def test_search_treats_wildcards_literally(repository):
    add(repository, "Alice", "alice@example.com")

    assert repository.search_by_name("%") == []
    assert repository.search_by_name("_") == []


def test_update_replaces_fields(repository):
    user = add(repository, "Alice", "alice@example.com")

    updated = repository.update(User(id=user.id, name="Alicia", email="alicia@example.com", password="new"))

    assert updated.id == user.id
    assert updated.name == "Alicia"
    assert repository.get_by_email("alicia@example.com").password == "new"


def test_update_unknown_id_is_noop(repository):
    assert repository.update(User(id=999, name="Ghost", email="ghost@example.com", password="x")) is None
    assert repository.get_all() == []


def test_remove(repository):
    user_id = add(repository, "Alice", "alice@example.com").id

    assert repository.remove(user_id) is True
    assert repository.get_by_id(user_id) is None
    assert repository.remove(user_id) is False
