from __future__ import annotations

from storage.kv.keys import (
    create_password_key,
    create_user_key,
    normalize_full_name,
    parse_user_key,
    validate_full_name,
)


def test_user_key_round_trip():
    key = create_user_key("  Emily Kwan ")
    assert key == "user:emily kwan"
    assert parse_user_key(key) == normalize_full_name("Emily Kwan")


def test_parse_rejects_foreign_keys():
    assert parse_user_key("guest:emily") is None


def test_password_key():
    assert create_password_key("emily_kwan") == "user:emily_kwan:password"


def test_validate_full_name():
    assert validate_full_name("Arden Chew")
    assert not validate_full_name("   ")
