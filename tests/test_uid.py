from pcfnozzle.uid import concat


def test_concat_joins_with_slash():
    assert concat("", "a", "b") == "/a/b"


def test_concat_without_values_returns_input():
    assert concat("root") == "root"


def test_concat_incremental_matches_single_call():
    assert concat(concat("", "a"), "b", "c") == concat("", "a", "b", "c")


def test_concat_keeps_prefix():
    result = concat("root", "x")
    assert result.startswith("root/")
    assert result.endswith("/x")


def test_concat_formats_numbers():
    assert concat("", 5) == "/5"