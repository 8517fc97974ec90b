"""Unit tests for security/password.py"""

from collabnotes.security.password import hash_password, needs_update, verify_password


def test_hash_and_verify_roundtrip():
    pwd = "StrongPassw0rd!"
    h = hash_password(pwd)
    assert h != pwd
    assert verify_password(pwd, h) is True
    assert verify_password("wrong", h) is False


def test_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_needs_update_returns_bool():
    h = hash_password("AnotherPass123!")
    assert isinstance(needs_update(h), bool)
