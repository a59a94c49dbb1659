import pytest

from listcrunch.codec.crunch import crunch
from listcrunch.codec.errors import UncrunchError
from listcrunch.codec.uncrunch import uncrunch


def test_uncrunch_distinct():
    assert uncrunch("1:0;2:1;3:2") == ["1", "2", "3"]


def test_uncrunch_broken_run():
    assert uncrunch("1:0,2;2:1") == ["1", "2", "1"]


def test_uncrunch_order():
    assert uncrunch("2:0;1:1") == ["2", "1"]


def test_uncrunch_composite():
    assert uncrunch("50:0-1,3-4;3:2,5;60:6;70:7-8") == [
        "50", "50", "3", "50", "50", "3", "60", "70", "70"
    ]


def test_uncrunch_blank():
    assert uncrunch("") == []
    assert uncrunch("   ") == []
    assert uncrunch("\n\t") == []


def test_uncrunch_single_item():
    assert uncrunch("77:0") == ["77"]


def test_uncrunch_page_sizes():
    assert uncrunch("595.0x842.0:0-6") == ["595.0x842.0"] * 7


def test_round_trip():
    seq = ["a", "b", "b", "c", "a", "a", "d", "c"]
    assert uncrunch(crunch(seq)) == seq


def test_round_trip_renders_items():
    seq = [3, 3, 1, 2, 2, 3]
    assert uncrunch(crunch(seq)) == [str(x) for x in seq]


def test_uncrunch_empty_value():
    assert uncrunch(":0;x:1") == ["", "x"]


def test_uncrunch_reversed_range_is_empty():
    assert uncrunch("a:3-1;b:0") == ["b"]


def test_uncrunch_is_permissive_about_coverage():
    assert uncrunch("a:0-1;b:1;c:5") == ["a", "a", "b", "c"]


@pytest.mark.parametrize(
    "text",
    [
        "1-2",
        "1:0:0",
        "1:0;2",
        "1:a-b",
        "1:0-1-2",
        "1:x",
        "1:",
        "1:-1",
        "1: 0",
        "1:0_0",
        "1:0;",
    ],
)
def test_uncrunch_rejects_malformed(text):
    with pytest.raises(UncrunchError):
        uncrunch(text)


def test_uncrunch_error_messages():
    with pytest.raises(UncrunchError, match="exactly one ':'"):
        uncrunch("1:0:0")
    with pytest.raises(UncrunchError, match="exactly one '-'"):
        uncrunch("1:0-1-2")
    with pytest.raises(UncrunchError, match="Couldn't parse range"):
        uncrunch("1:a-b")


def test_uncrunch_error_is_value_error():
    with pytest.raises(ValueError):
        uncrunch("nope")


def test_uncrunch_validate_accepts_full_coverage():
    assert uncrunch("a:0,2;b:1", validate=True) == ["a", "b", "a"]


@pytest.mark.parametrize("text", ["a:1", "a:0-1;b:1", "a:0;b:2"])
def test_uncrunch_validate_rejects_gaps_and_overlaps(text):
    with pytest.raises(UncrunchError, match="exactly once"):
        uncrunch(text, validate=True)
