import pytest

from flagpick import extract, errors


def test_arr_space_separated():
    argv = ["node", "app", "k=v", "c", "d", "--key", "value"]
    assert extract.extractArray("--key", tokens=argv) == ["value"]


def test_arr_equal_separated():
    argv = ["node", "app", "k=v", "c", "d", "--key=value"]
    assert extract.extractArray(["--key"], tokens=argv) == ["value"]


def test_arr_skip_flag_lookalike():
    argv = ["node", "app", "--key", "-c", "d", "--key", "value"]
    assert extract.extractArray("--key", tokens=argv) == ["value"]


def test_arr_quoted_lists():
    argv = ["node", "app", "--key", '"1,2,3"', "--key", '"a,b"']
    assert extract.extractArray("--key", tokens=argv) == ["1", "2", "3", "a", "b"]


def test_arr_combine_repeated_keys():
    argv = ["node", "app", "--key", '"1,2,3"', "k=v", "c", "d", '--key="a,b,c,d"']
    assert extract.extractArray("--key", tokens=argv) == [
        "1",
        "2",
        "3",
        "a",
        "b",
        "c",
        "d",
    ]


def test_arr_unquoted_commas_are_kept():
    assert extract.extractArray("--key", tokens=["--key", "a,b"]) == ["a,b"]


def test_arr_lone_quote():
    assert extract.extractArray("--key", tokens=["--key", '"']) == ['"']


def test_arr_empty_quotes():
    assert extract.extractArray("--key", tokens=["--key", '""']) == [""]


def test_arr_many_names():
    argv = ["-k", "1", "--key", "2", "-k=3"]
    assert extract.extractArray(["--key", "-k"], tokens=argv) == ["2", "1", "3"]


def test_arr_bare_flag_at_end():
    assert extract.extractArray("--key", tokens=["--key", "a", "--key"]) == ["a"]


def test_arr_missing_optional():
    assert extract.extractArray("--hey", tokens=["a", "b"]) is None
    assert extract.extractArray(["--hey"], "optional", "", ["a", "b"]) is None


def test_arr_missing_required():
    with pytest.raises(errors.MissingArgumentError) as e:
        extract.extractArray(["--hey", "-h"], "required", "Give a list.", ["a", "b"])
    assert '"--hey", "-h"' in str(e.value)
    assert "Give a list." in str(e.value)


def test_arr_invalid_key():
    with pytest.raises(errors.InvalidKeyError) as e:
        extract.extractArray("hey", tokens=["a", "b"])
    assert "extractArray()" in str(e.value)


def test_arr_does_not_mutate_tokens():
    argv = ["--key", '"a,b"', "--key=c"]
    copy = list(argv)
    assert extract.extractArray("--key", tokens=argv) == ["a", "b", "c"]
    assert extract.extractArray("--key", tokens=argv) == ["a", "b", "c"]
    assert argv == copy
