"""CREATE2 address derivation (EIP-1014)."""

from __future__ import annotations

from eth_typing import ChecksumAddress
from eth_utils import decode_hex, is_address, keccak, to_canonical_address, to_checksum_address


def compute_create2_address(deployer: str, salt: bytes, init_code: bytes | str) -> ChecksumAddress:
    """
    Compute the address a contract lands at when deployed through CREATE2.

    address = keccak256(0xff ++ deployer ++ salt ++ keccak256(init_code))[12:]

    Args:
        deployer: Address of the deploying contract (hex string)
        salt: 32-byte salt
        init_code: Creation bytecode (bytes or 0x-prefixed hex)

    Returns:
        Checksummed deployment address

    Raises:
        ValueError: If the deployer or salt is malformed
    """
    if not is_address(deployer):
        raise ValueError(f"Invalid deployer address: {deployer}")
    if len(salt) != 32:
        raise ValueError(f"Salt must be 32 bytes, got {len(salt)}")
    if isinstance(init_code, str):
        init_code = decode_hex(init_code)

    preimage = b"\xff" + to_canonical_address(deployer) + salt + keccak(init_code)
    return to_checksum_address(keccak(preimage)[12:])
