"""Ethereum virtual machine building blocks: exit reasons, gas, stack, memory,
contracts, an in-memory state database, RLP, tries and Merkle state roots."""

__version__ = "0.1.0"