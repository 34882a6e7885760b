"""Unit tests for shallow-merge helpers."""
import pytest

from tuiter.domain.user import User
from tuiter.domain.tuit import Tuit
from tuiter.utils.patch import apply_patch, validate_patch


def test_apply_patch_dataclass_overwrites_only_named_fields():
    user = User(user_id="u1", username="ana", password="h", first_name="Ana", last_name="Lee")

    patched = apply_patch(user, {"first_name": "Anna"})

    assert patched.first_name == "Anna"
    assert patched.last_name == "Lee"
    assert patched.username == "ana"
    # Original untouched
    assert user.first_name == "Ana"


def test_apply_patch_dict():
    doc = {"tuit_id": "t1", "body": "hi", "likes": 3}

    patched = apply_patch(doc, {"likes": 4})

    assert patched == {"tuit_id": "t1", "body": "hi", "likes": 4}
    assert doc["likes"] == 3


def test_apply_patch_explicit_none_is_a_value():
    tuit = Tuit(tuit_id="t1", topic="space")

    assert apply_patch(tuit, {"topic": None}).topic is None


def test_apply_patch_rejects_other_types():
    with pytest.raises(TypeError):
        apply_patch(["not", "a", "record"], {"a": 1})


def test_validate_patch_rejects_unknown_field():
    with pytest.raises(ValueError, match="nickname"):
        validate_patch(User, {"nickname": "x"})


def test_validate_patch_rejects_immutable_field():
    with pytest.raises(ValueError, match="user_id"):
        validate_patch(User, {"user_id": "other"}, immutable=("user_id",))


def test_validate_patch_rejects_null_for_not_null_field():
    with pytest.raises(ValueError, match="username"):
        validate_patch(User, {"username": None, "first_name": "Ana"}, not_null=("username", "password"))


def test_validate_patch_not_null_field_may_be_omitted():
    result = validate_patch(User, {"first_name": None}, not_null=("username", "password"))

    assert result == {"first_name": None}


def test_validate_patch_returns_copy():
    patch = {"username": "bob"}
    result = validate_patch(User, patch)

    result["password"] = "x"
    assert "password" not in patch
