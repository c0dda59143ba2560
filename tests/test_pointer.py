import pytest

from reactorkit.pointer import Cursor


def test_push_then_move_back():
    buffer = bytearray(16)
    cursor = Cursor(buffer)
    cursor.push(b"test")
    cursor.push_byte(0)
    assert cursor.position == 5
    cursor.move(-5)
    assert cursor.position == 0
    end = buffer.index(0, cursor.position)
    assert bytes(buffer[cursor.position:end]) == b"test"


def test_push_grows_empty_buffer():
    buffer = bytearray()
    cursor = Cursor(buffer)
    cursor.push(b"GET")
    cursor.push_byte(ord(" "))
    cursor.push(b"/")
    assert bytes(buffer) == b"GET /"
    assert cursor.position == 5


def test_push_overwrites_in_place():
    buffer = bytearray(b"xxxxxx")
    cursor = Cursor(buffer, 2)
    cursor.push(b"ab")
    assert bytes(buffer) == b"xxabxx"


def test_move_forward_then_push():
    buffer = bytearray(8)
    cursor = Cursor(buffer)
    cursor.move(3)
    cursor.push_byte(7)
    assert buffer[3] == 7
    assert cursor.position == 4


def test_move_below_zero_raises():
    cursor = Cursor(bytearray(4))
    with pytest.raises(IndexError):
        cursor.move(-1)


def test_push_past_end_raises():
    cursor = Cursor(bytearray(2))
    cursor.move(5)
    with pytest.raises(IndexError):
        cursor.push(b"a")


def test_invalid_start_position():
    with pytest.raises(IndexError):
        Cursor(bytearray(2), 3)


def test_push_byte_rejects_large_value():
    cursor = Cursor(bytearray(2))
    with pytest.raises(ValueError):
        cursor.push_byte(256)