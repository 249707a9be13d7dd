import pytest

from queueboard.services.queue.numbering import format_ticket_id, next_ticket_id, parse_ticket_number


@pytest.mark.parametrize(
    ("ticket_id", "expected"),
    [
        ("A007", 7),
        ("A120", 120),
        ("A1000", 1000),
        (" A003 ", 3),
        ("A", 0),
        ("A12b", 0),
        ("Walk-in", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_ticket_number(ticket_id, expected):
    assert parse_ticket_number(ticket_id) == expected


def test_format_ticket_id_pads_to_width():
    assert format_ticket_id(7) == "A007"
    assert format_ticket_id(42, prefix="B", digits=4) == "B0042"


def test_format_ticket_id_does_not_truncate():
    assert format_ticket_id(1234) == "A1234"


def test_next_ticket_id_starts_at_one():
    assert next_ticket_id(None) == "A001"
    assert next_ticket_id("garbage") == "A001"


def test_next_ticket_id_increments_suffix():
    assert next_ticket_id("A009") == "A010"
    assert next_ticket_id("A999") == "A1000"
