# evmlite

Building blocks for an Ethereum virtual machine, in pure Python.

- `evmlite.errors`: exit reasons. `ExitReason` pairs an `ExitKind` with an
  `ExitSucceed`, `ExitRevert`, `ExitError` or `ExitFatal` code.
  `ExitReason.of(code)` works out the kind from the code. `ExitException`
  carries a reason.
- `evmlite.models`: `AccountInfo`, `GlobalEnv` (with
  `effective_gas_price()`), `TransactTo`, `TransactOut`, `CreateScheme`,
  `CallScheme`, `CallContext`, `Transfer`, `Log`, `SelfDestructResult`,
  the `KECCAK_EMPTY` constant and `keccak256`.
- `evmlite.spec`: hard-fork identifiers. `SpecId.from_name` maps unknown names
  to `LATEST`. `Spec` is one fork's rule set, and `SpecName` holds the fork
  names used in test fixtures. Only London, Berlin and Istanbul convert
  with `to_spec_id()`.
- `evmlite.stack`: `Stack`, a bounded stack of 32-byte words. It raises
  `ExitException` on underflow and overflow.
- `evmlite.memory`: `Memory`, which grows when written. It raises
  `ExitException` with `ExitFatal.NOT_SUPPORTED` past its limit. The module
  also has `next_multiple_of_32` and `read_return_range`.
- `evmlite.gas`: `Gas` accounting. It records cost, memory cost and refunds,
  and `reimburse_unspend` handles sub-frames.
- `evmlite.contract`: `Contract` and `ValidJumpAddress`, which finds the
  JUMPDEST positions that lie outside PUSH data.
- `evmlite.db`: the abstract `Database` and `DummyStateDB`, which keeps the
  whole state in memory.
- `evmlite.rlp`: RLP `encode`.
- `evmlite.trie`: Merkle Patricia `trie_root` and `sec_trie_root`.
- `evmlite.merkle`: account and state roots.
- `evmlite.fixtures`: parsers for the hex and decimal values used in test
  fixtures: `parse_u64`, `parse_u256`, `parse_bytes`, `parse_bytes_list` and
  `parse_maybe_address`.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Computing a state root

A state file is a JSON object. Each key is an address, and each value has
exactly the fields `balance`, `nonce`, `code` and `storage`:

```json
{
  "0x1000000000000000000000000000000000000000": {
    "balance": "0x0",
    "nonce": 0,
    "code": "0x4660015500",
    "storage": {
      "0x0000000000000000000000000000000000000000000000000000000000000001":
      "0x0000000000000000000000000000000000000000000000000000000000000001"
    }
  }
}
```

Print its Merkle root:

```
evmlite-merkle run state.json
```

The command reads the path from its second argument; the first argument is
ignored. Without a second argument it reads `./storage.json`. The output is
one line of the form `MERKLE ROOT:"<hex>"`.

From Python:

```python
from evmlite.merkle import parse_state, merkelize

with open("state.json") as fh:
    state = parse_state(fh.read())
print(merkelize(state).hex())
```

`merkle_trie_root(accounts, storage)` computes the same kind of root. It takes
a mapping of addresses to `AccountInfo` and a mapping of addresses to storage,
as returned by `DummyStateDB.accounts()` and `DummyStateDB.storages()`.

## Using the state database

```python
from evmlite.db import DummyStateDB
from evmlite.models import AccountInfo

db = DummyStateDB()
address = bytes.fromhex("1000000000000000000000000000000000000000")
db.insert_cache(address, AccountInfo.from_balance(10_000_000))
assert db.basic(address).balance == 10_000_000
```

`insert_cache` moves an account's code into a table keyed by code hash, where
`code_by_hash` can look it up. `block_hash` always returns 32 zero bytes.

## What this package does not do

The package has no interpreter loop and no opcode set, so it does not run
bytecode. It does not execute transactions or apply their state changes, and
it has no precompiled contracts. It has no runner for state-test suites. It
provides the parts such an engine is built from, and it computes state roots.

## Running the tests

```
pytest
```