import pytest

from reactorkit.utility import tsc, u32_len, u32_toa


def test_tsc_is_monotonic():
    t1 = tsc()
    t2 = tsc()
    assert t2 >= t1
    assert t1 > 0


@pytest.mark.parametrize(
    "value, expected",
    [(1, "1"), (12, "12"), (4294967295, "4294967295"), (0, "0")],
)
def test_u32_toa(value, expected):
    assert u32_toa(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (9, 1), (10, 2), (99, 2), (100, 3), (999999999, 9), (1000000000, 10), (4294967295, 10)],
)
def test_u32_len(value, expected):
    assert u32_len(value) == expected


@pytest.mark.parametrize("value", [-1, 4294967296])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        u32_len(value)
    with pytest.raises(ValueError):
        u32_toa(value)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        u32_toa(1.5)