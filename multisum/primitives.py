import hashlib
import zlib
from collections.abc import Buffer, Callable
from typing import Protocol

from Crypto.Hash import MD2

from multisum.algorithm import Algorithm


class DigestContext(Protocol):
    """Live state of a digest-family primitive."""

    def update(self, data: Buffer, /) -> None: ...

    def digest(self) -> bytes: ...


type ChecksumFunction = Callable[[Buffer, int], int]

CHECKSUM_FUNCTIONS: dict[Algorithm, ChecksumFunction] = {
    Algorithm.CRC32: zlib.crc32,
    Algorithm.ADLER32: zlib.adler32,
}

_SEED: dict[Algorithm, int] = {
    Algorithm.CRC32: 0,
    Algorithm.ADLER32: 1,
}


def _md2() -> DigestContext:
    return MD2.new()


_DIGEST_FACTORIES: dict[Algorithm, Callable[[], DigestContext]] = {
    Algorithm.MD2: _md2,
    Algorithm.MD5: lambda: hashlib.md5(usedforsecurity=False),
    Algorithm.SHA1: lambda: hashlib.sha1(usedforsecurity=False),
    Algorithm.SHA224: hashlib.sha224,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA384: hashlib.sha384,
    Algorithm.SHA512: hashlib.sha512,
}


def checksum_init(algorithm: Algorithm) -> int:
    """Initial running value of a checksum algorithm (0 for CRC32, 1 for Adler32)."""
    return CHECKSUM_FUNCTIONS[algorithm](b"", _SEED[algorithm])


def checksum_update(algorithm: Algorithm, value: int, data: Buffer) -> int:
    return CHECKSUM_FUNCTIONS[algorithm](data, value)


def checksum_finalize(value: int) -> bytes:
    """Serialize a running checksum as 4 little-endian bytes."""
    return (value & 0xFFFFFFFF).to_bytes(4, "little", signed=False)


def digest_init(algorithm: Algorithm) -> DigestContext:
    return _DIGEST_FACTORIES[algorithm]()


def digest_update(context: DigestContext, data: Buffer) -> None:
    context.update(data)


def digest_finalize(context: DigestContext) -> bytes:
    return context.digest()
