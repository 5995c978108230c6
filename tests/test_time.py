import pytest
from hypothesis import given
from hypothesis import strategies as st

from btrfs_diskformat.binary import LayoutError
from btrfs_diskformat.time import Time

times = st.builds(
    Time,
    timestamp=st.integers(-(2**63), 2**63 - 1),
    nanoseconds=st.integers(0, 2**32 - 1),
)


@given(times)
def test_round_trip(value):
    data = value.to_bytes()
    assert len(data) == 12
    assert Time.from_bytes(data) == value


def test_negative_timestamp_encoding():
    assert Time(timestamp=-1).to_bytes() == b"\xff" * 8 + b"\0" * 4


def test_ordering():
    assert Time(1, 5) < Time(2, 0)
    assert Time(1, 5) < Time(1, 6)
    assert max(Time(3, 0), Time(2, 999)) == Time(3, 0)


def test_nanoseconds_out_of_range():
    with pytest.raises(LayoutError):
        Time(0, 2**32).to_bytes()


def test_short_input():
    with pytest.raises(LayoutError):
        Time.from_bytes(b"\0" * 11)