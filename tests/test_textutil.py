import pytest

from ascendkit.textutil import get_sha256_code, mask_prefix, replace_prefix, reverse_string


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("./testdata/cert/ca.crt", "****testdata/cert/ca.crt"),
        ("/testdata/cert/ca.crt", "****estdata/cert/ca.crt"),
        ("/", "****"),
        ("", "****"),
    ],
)
def test_replace_prefix(source, expected):
    assert replace_prefix(source, "****") == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("./testdata/cert/ca.crt", "****testdata/cert/ca.crt"),
        ("/testdata/cert/ca.crt", "****estdata/cert/ca.crt"),
        ("/", "****"),
        ("", "****"),
    ],
)
def test_mask_prefix(source, expected):
    assert mask_prefix(source) == expected


def test_replace_prefix_custom_prefix():
    assert replace_prefix("abcdef", "##") == "##cdef"


def test_replace_prefix_empty_prefix_defaults_to_mask():
    assert replace_prefix("abcdef", "") == "****cdef"


def test_sha256_length():
    assert len(get_sha256_code(b"this is a test sentence")) == 32


def test_sha256_known_value():
    assert get_sha256_code(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_reverse_string():
    assert reverse_string("userName") == "emaNresu"
    assert reverse_string("") == ""


def test_reverse_string_round_trip():
    text = "héllo wörld"
    assert reverse_string(reverse_string(text)) == text