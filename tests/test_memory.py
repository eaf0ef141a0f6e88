import pytest

from evmlite.errors import ExitException, ExitFatal
from evmlite.memory import (
    U256_MAX,
    USIZE_MAX,
    Memory,
    next_multiple_of_32,
    read_return_range,
)


def test_next_multiple_of_32_keeps_multiples():
    for i in range(32):
        x = i * 32
        assert next_multiple_of_32(x) == x


def test_next_multiple_of_32_rounds_up():
    for x in range(1024):
        if x % 32 == 0:
            continue
        assert next_multiple_of_32(x) == x + 32 - (x % 32)


def test_next_multiple_of_32_overflow():
    last_multiple_of_32 = U256_MAX & ~31
    for i in range(63):
        x = U256_MAX - i
        if x > last_multiple_of_32:
            assert next_multiple_of_32(x) is None
        else:
            assert next_multiple_of_32(x) == last_multiple_of_32


def test_set_grows_and_get_round_trips():
    memory = Memory(1024)
    memory.set(4, b"\x01\x02\x03")
    assert len(memory) == 7
    assert memory.get(4, 3) == b"\x01\x02\x03"
    assert memory.data == b"\x00\x00\x00\x00\x01\x02\x03"


def test_get_past_end_is_zero_padded():
    memory = Memory(1024)
    memory.set(0, b"\xaa\xbb")
    assert memory.get(1, 4) == b"\xbb\x00\x00\x00"
    assert memory.get(100, 2) == b"\x00\x00"


def test_set_with_larger_target_zero_fills():
    memory = Memory(1024)
    memory.set(0, b"\xff" * 8)
    memory.set(2, b"\x11", 4)
    assert memory.data == b"\xff\xff\x11\x00\x00\x00\xff\xff"


def test_set_with_smaller_target_truncates():
    memory = Memory(1024)
    memory.set(0, b"\x01\x02\x03\x04", 2)
    assert memory.data == b"\x01\x02"


def test_set_zero_size_is_noop():
    memory = Memory(4)
    memory.set(1000, b"", None)
    memory.set(1000, b"\x01", 0)
    assert len(memory) == 0


def test_set_over_limit_is_not_supported():
    memory = Memory(8)
    with pytest.raises(ExitException) as info:
        memory.set(6, b"\x01\x02\x03")
    assert info.value.reason.code is ExitFatal.NOT_SUPPORTED
    assert len(memory) == 0


def test_copy_large_zero_length_is_noop():
    memory = Memory(16)
    memory.copy_large(USIZE_MAX + 1, 0, 0, b"\x01")
    assert len(memory) == 0


def test_copy_large_copies_slice_and_pads():
    memory = Memory(64)
    memory.copy_large(0, 1, 4, b"\x0a\x0b\x0c")
    assert memory.data == b"\x0b\x0c\x00\x00"


def test_copy_large_data_offset_past_data_writes_zeros():
    memory = Memory(64)
    memory.set(0, b"\xff\xff\xff")
    memory.copy_large(0, 10, 3, b"\x01\x02")
    assert memory.data == b"\x00\x00\x00"


def test_copy_large_huge_offset_not_supported():
    memory = Memory(64)
    with pytest.raises(ExitException) as info:
        memory.copy_large(USIZE_MAX + 1, 0, 1, b"\x01")
    assert info.value.reason.code is ExitFatal.NOT_SUPPORTED


def test_read_return_range_normal():
    memory = Memory(64)
    memory.set(0, b"\x01\x02\x03\x04")
    assert read_return_range(memory, 1, 3) == b"\x02\x03"
    assert read_return_range(memory, 2, 6) == b"\x03\x04\x00\x00"


def test_read_return_range_start_beyond_usize_is_zeros():
    memory = Memory(64)
    memory.set(0, b"\x01")
    start = USIZE_MAX + 1
    assert read_return_range(memory, start, start + 5) == bytes(5)