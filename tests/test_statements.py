"""
Tests for the UPDATE statement builder.
"""

import pytest

from bookapp.db.statements import EmptyUpdateError, Statement, build_update

COLUMNS = ("username", "password", "name", "surname", "image_link")


def test_single_column_update():
    statement = build_update("users", COLUMNS, {"name": "X"}, key_value=4)

    assert statement == Statement(sql="UPDATE users SET name = $1 WHERE id = $2", params=("X", 4))


def test_assignments_follow_column_order_not_input_order():
    values = {"image_link": "https://example.com/a.png", "username": "new_name", "surname": "Doe"}

    statement = build_update("users", COLUMNS, values, key_value=9)

    assert statement.sql == (
        "UPDATE users SET username = $1, surname = $2, image_link = $3 WHERE id = $4"
    )
    assert statement.params == ("new_name", "Doe", "https://example.com/a.png", 9)


def test_none_values_are_skipped():
    statement = build_update("users", COLUMNS, {"name": None, "surname": "Doe"}, key_value=1)

    assert statement.sql == "UPDATE users SET surname = $1 WHERE id = $2"
    assert statement.params == ("Doe", 1)


def test_unknown_keys_are_ignored():
    statement = build_update("users", COLUMNS, {"name": "X", "is_admin": True}, key_value=1)

    assert "is_admin" not in statement.sql
    assert statement.params == ("X", 1)


def test_values_are_never_inlined():
    hostile = "x'; DROP TABLE users; --"

    statement = build_update("users", COLUMNS, {"name": hostile}, key_value=1)

    assert hostile not in statement.sql
    assert statement.params[0] == hostile


@pytest.mark.parametrize("values", [{}, {"name": None}, {"unrelated": "value"}])
def test_nothing_to_update_raises(values):
    with pytest.raises(EmptyUpdateError):
        build_update("users", COLUMNS, values, key_value=1)


def test_custom_key_column():
    statement = build_update("books", ("name",), {"name": "Dune"}, key_column="book_id", key_value=2)

    assert statement.sql == "UPDATE books SET name = $1 WHERE book_id = $2"


@pytest.mark.parametrize("table", ["users; DROP TABLE books", "users u", ""])
def test_rejects_non_identifier_table(table):
    with pytest.raises(ValueError):
        build_update(table, COLUMNS, {"name": "X"}, key_value=1)
