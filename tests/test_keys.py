import pytest

from flagpick import errors, keys

# --- Flags ------------------------------------------------------------------ #


def test_is_flag():
    assert keys.isFlag("-c")
    assert keys.isFlag("--key")
    assert keys.isFlag("--key=value")
    assert keys.isFlag("-Key")


def test_is_not_flag():
    assert not keys.isFlag("c")
    assert not keys.isFlag("-")
    assert not keys.isFlag("--")
    assert not keys.isFlag("-1")
    assert not keys.isFlag("--1")
    assert not keys.isFlag("---key")
    assert not keys.isFlag("")
    assert not keys.isFlag(None)


# --- Validate --------------------------------------------------------------- #


def test_validate_ok():
    keys.validate("test()", ["--key", "-k", "-Key", "--k-e_y"])


def test_validate_no_dash():
    with pytest.raises(errors.InvalidKeyError) as e:
        keys.validate("test()", ["--key", "key"])
    assert e.value.key == "key"
    assert e.value.method == "test()"
    assert "test()" in str(e.value)
    assert "'key'" in str(e.value)


def test_validate_equal_sign():
    with pytest.raises(errors.InvalidKeyError) as e:
        keys.validate("test()", ["--key=value"])
    assert e.value.key == "--key=value"


def test_validate_digit():
    with pytest.raises(errors.InvalidKeyError):
        keys.validate("test()", ["-1"])


def test_validate_empty():
    with pytest.raises(errors.InvalidKeyError):
        keys.validate("test()", [])


def test_invalid_key_is_value_error():
    with pytest.raises(ValueError):
        keys.validate("test()", ["key"])


# --- Requirement ------------------------------------------------------------ #


def test_check_requirement():
    keys.checkRequirement("test()", None)
    keys.checkRequirement("test()", "required")
    keys.checkRequirement("test()", "optional")

    with pytest.raises(ValueError):
        keys.checkRequirement("test()", "mandatory")
