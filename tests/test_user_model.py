# File: tests/test_user_model.py

import pytest

from user_manager.core.exceptions import ValidationError
from user_manager.models.user import User


def make_user(**overrides) -> User:
    fields = {"name": "Alice", "email": "alice@example.com", "password": "secret1"}
    fields.update(overrides)
    return User(**fields)


def test_valid_user_passes():
    make_user().validate()


def test_collects_every_violation():
    with pytest.raises(ValidationError) as exc:
        make_user(name="", email="", password="").validate()

    assert exc.value.errors == [
        "O nome não pode ser vazio.",
        "O email não pode ser vazio.",
        "A senha não pode ser vazia.",
    ]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": "Al"}, "O nome deve ter no mínimo 3 caracteres."),
        ({"name": "A" * 81}, "O nome deve ter no máximo 80 caracteres."),
        ({"email": "a@b.io"}, "O email deve ter no mínimo 10 caracteres."),
        ({"email": "not-an-email-address"}, "O email informado não é válido."),
        ({"email": "a" * 175 + "@x.com"}, "O email deve ter no máximo 180 caracteres."),
        ({"password": "12345"}, "A senha deve ter no mínimo 6 caracteres."),
        ({"password": "x" * 31}, "A senha deve ter no máximo 30 caracteres."),
        ({"email": "alice@example.com\n"}, "O email informado não é válido."),
        ({"password": " " * 6}, "A senha não pode ser vazia."),
    ],
)
def test_single_rule_violations(overrides, message):
    with pytest.raises(ValidationError) as exc:
        make_user(**overrides).validate()

    assert exc.value.errors == [message]


def test_short_malformed_email_reports_both_rules():
    with pytest.raises(ValidationError) as exc:
        make_user(email="bad").validate()

    assert "O email deve ter no mínimo 10 caracteres." in exc.value.errors
    assert "O email informado não é válido." in exc.value.errors


def test_change_password_replaces_value():
    user = make_user()
    user.change_password("ciphertext")
    assert user.password == "ciphertext"
