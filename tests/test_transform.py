import pytest

from upcase.services.transform import to_text, uppercase


@pytest.mark.parametrize(
    "value, expected",
    [
        ("abc", "abc"),
        (123, "123"),
        (1.0, "1"),
        (1.5, "1.5"),
        (True, "true"),
        (False, "false"),
        (["a", 1, None, True], "a,1,,true"),
        ([1, [2, 3]], "1,2,3"),
        ({"k": "v"}, "[object Object]"),
        ([{"k": "v"}, 2], "[object Object],2"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (-0.0, "0"),
        (0.001, "0.001"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (123.456, "123.456"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (-2.5e25, "-2.5e+25"),
        (12345678901234567890, "12345678901234567000"),
    ],
)
def test_to_text_coerces_json_values(value, expected):
    assert to_text(value) == expected


@pytest.mark.parametrize("text", ["abc", "Hello, World!", "straße", "ﬁx", "ǆ", "", "123 !?"])
def test_uppercase_is_idempotent(text):
    once = uppercase(text)
    assert uppercase(once) == once


def test_uppercase_uses_full_case_mapping():
    assert uppercase("straße") == "STRASSE"
    assert uppercase("héllo wörld") == "HÉLLO WÖRLD"
