import csv
import io

import pytest

from dealer_search.utils.csv_encoder import encode_row, escape_field, to_csv


@pytest.mark.parametrize("text", ["plain", "2021 Toyota Camry SE | VIN123456", "[2021 toyota camry se]", "", "a;b", "tab\there"])
def test_fields_without_specials_are_verbatim(text):
    assert escape_field(text) == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b", '"a,b"'),
        ('"toyota camry"', '"""toyota camry"""'),
        ("line1\nline2", '"line1\nline2"'),
        ('say "hi", then\nleave', '"say ""hi"", then\nleave"'),
    ],
)
def test_fields_with_specials_are_quoted(text, expected):
    assert escape_field(text) == expected


def test_carriage_return_alone_is_not_quoted():
    assert escape_field("a\rb") == "a\rb"


def test_numbers_and_none():
    assert escape_field(2021) == "2021"
    assert escape_field(0.01) == "0.01"
    assert escape_field(None) == ""


def test_encode_row_has_no_trailing_comma():
    assert encode_row(["a", "b,c", None, 3]) == 'a,"b,c",,3'


def test_header_only_document():
    assert to_csv(["Campaign", "Status"], []) == "Campaign,Status"


def test_document_uses_bare_newlines():
    text = to_csv(["A", "B"], [["1", "2"], ["3", "4"]])
    assert text == "A,B\n1,2\n3,4"
    assert "\r" not in text
    assert not text.endswith("\n")


def test_output_parses_back_with_csv_module():
    rows = [["x,y", 'he said "go"', "multi\nline"], ["plain", "", "0.01"]]
    text = to_csv(["One", "Two", "Three"], rows)
    parsed = list(csv.reader(io.StringIO(text, newline="")))
    assert parsed == [["One", "Two", "Three"]] + rows


def test_deterministic():
    rows = [["a", 1, None], ['"q"', "b,c", 2.5]]
    assert to_csv(["h1", "h2", "h3"], rows) == to_csv(["h1", "h2", "h3"], rows)
