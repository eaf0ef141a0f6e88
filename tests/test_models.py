import pytest

from evmlite.models import (
    KECCAK_EMPTY,
    ZERO_HASH,
    AccountInfo,
    CallContext,
    CreateScheme,
    GlobalEnv,
    Log,
    SelfDestructResult,
    TransactOut,
    TransactTo,
    Transfer,
    keccak256,
)


def test_keccak_of_empty_is_keccak_empty():
    assert keccak256(b"") == KECCAK_EMPTY


def test_keccak_digest_length_and_determinism():
    assert len(keccak256(b"abc")) == 32
    assert keccak256(b"abc") == keccak256(bytearray(b"abc"))
    assert keccak256(b"abc") != keccak256(b"abd")


def test_default_account_is_empty():
    info = AccountInfo()
    assert info.is_empty()
    assert not info.exists()
    assert info.code_hash == KECCAK_EMPTY


def test_zero_code_hash_counts_as_empty():
    assert AccountInfo(code_hash=ZERO_HASH).is_empty()


def test_account_with_code_exists():
    info = AccountInfo(code_hash=keccak256(b"\x00"))
    assert info.exists()


def test_account_with_nonce_exists():
    assert AccountInfo(nonce=1).exists()


def test_from_balance():
    info = AccountInfo.from_balance(10_000_000)
    assert info.balance == 10_000_000
    assert info.nonce == 0
    assert info.code is None
    assert info.exists()


def test_from_balance_zero_is_empty():
    assert AccountInfo.from_balance(0).is_empty()


def test_create_schemes():
    assert not CreateScheme.create().is_create2
    salt = bytes(range(32))
    scheme = CreateScheme.create2(salt)
    assert scheme.is_create2
    assert scheme.salt == salt


def test_transact_to():
    address = bytes(19) + b"\x01"
    call = TransactTo.call(address)
    assert call.address == address
    assert not call.is_create
    create = TransactTo.create()
    assert create.is_create
    assert create.scheme == CreateScheme.create()


def test_transact_to_requires_one_target():
    with pytest.raises(ValueError):
        TransactTo()
    with pytest.raises(ValueError):
        TransactTo(address=bytes(20), scheme=CreateScheme.create())


def test_transact_out_defaults_to_nothing():
    out = TransactOut()
    assert out.output is None
    assert out.address is None
    assert not out.created


def test_effective_gas_price_without_basefee():
    env = GlobalEnv(gas_max_fee=100, gas_priority_fee=5)
    assert env.effective_gas_price() == 100


def test_effective_gas_price_without_priority_fee():
    env = GlobalEnv(gas_max_fee=100, block_basefee=10)
    assert env.effective_gas_price() == 100


def test_effective_gas_price_uses_basefee_plus_priority():
    env = GlobalEnv(gas_max_fee=100, block_basefee=10, gas_priority_fee=5)
    assert env.effective_gas_price() == 15


def test_effective_gas_price_capped_by_max_fee():
    env = GlobalEnv(gas_max_fee=100, block_basefee=90, gas_priority_fee=50)
    assert env.effective_gas_price() == 100


def test_default_env_values():
    env = GlobalEnv()
    assert env.gas_priority_fee is None
    assert env.block_basefee is None
    assert env.origin == bytes(20)
    assert env.effective_gas_price() == 0


def test_call_context_and_transfer():
    ctx = CallContext()
    assert ctx.address == bytes(20)
    assert ctx.apparent_value == 0
    transfer = Transfer(source=bytes(20), target=b"\x01" * 20, value=7)
    assert transfer.target == b"\x01" * 20
    assert transfer.value == 7


def test_log_topics_are_independent():
    first = Log(address=bytes(20))
    second = Log(address=bytes(20))
    first.topics.append(bytes(32))
    assert second.topics == []
    assert first == Log(address=bytes(20), topics=[bytes(32)])


def test_selfdestruct_result_defaults():
    res = SelfDestructResult()
    assert (res.had_value, res.exists, res.is_cold, res.previously_destroyed) == (
        False,
        False,
        False,
        False,
    )