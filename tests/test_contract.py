from evmlite.contract import Contract, ValidJumpAddress
from evmlite.models import CallContext


def test_jumpdest_is_valid():
    jumps = ValidJumpAddress(bytes([0x00, 0x5B, 0x00]))
    assert jumps.is_valid(1)
    assert not jumps.is_valid(0)
    assert not jumps.is_valid(2)


def test_length_matches_code():
    code = bytes([0x60, 0x01, 0x5B])
    assert len(ValidJumpAddress(code)) == len(code)
    assert len(ValidJumpAddress(b"")) == 0


def test_push_data_is_not_a_jumpdest():
    # PUSH1 0x5b, JUMPDEST
    jumps = ValidJumpAddress(bytes([0x60, 0x5B, 0x5B]))
    assert not jumps.is_valid(1)
    assert jumps.is_valid(2)


def test_push32_skips_all_immediates():
    code = bytes([0x7F]) + bytes([0x5B]) * 32 + bytes([0x5B])
    jumps = ValidJumpAddress(code)
    assert not any(jumps.is_valid(p) for p in range(33))
    assert jumps.is_valid(33)


def test_truncated_push_at_end():
    jumps = ValidJumpAddress(bytes([0x5B, 0x62, 0x5B]))
    assert jumps.is_valid(0)
    assert not jumps.is_valid(2)


def test_out_of_range_is_invalid():
    jumps = ValidJumpAddress(bytes([0x5B]))
    assert not jumps.is_valid(1)
    assert not jumps.is_valid(1000)


def test_equal_code_gives_equal_maps():
    code = bytes([0x5B, 0x60, 0x5B, 0x5B])
    first = ValidJumpAddress(code)
    second = ValidJumpAddress(code)
    assert first == second
    assert [first.is_valid(p) for p in range(4)] == [True, False, False, True]
    assert first != ValidJumpAddress(bytes([0x00, 0x60, 0x5B, 0x5B]))


def test_contract_is_valid_jump():
    contract = Contract(code=bytes([0x00, 0x5B]))
    assert contract.is_valid_jump(1)
    assert not contract.is_valid_jump(0)


def test_new_with_context_copies_context():
    address = bytes([0x11]) * 20
    caller = bytes([0x22]) * 20
    context = CallContext(address=address, caller=caller, apparent_value=7)
    contract = Contract.new_with_context(b"\x01\x02", bytes([0x5B]), context)
    assert contract.address == address
    assert contract.caller == caller
    assert contract.value == 7
    assert contract.input == b"\x01\x02"
    assert contract.is_valid_jump(0)