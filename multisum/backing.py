from dataclasses import dataclass
from typing import assert_never

from multisum.algorithm import Algorithm
from multisum.define import ChecksumClosedError, ChecksumFinalizedError
from multisum.primitives import (
    DigestContext,
    checksum_finalize,
    checksum_init,
    checksum_update,
    digest_finalize,
    digest_init,
    digest_update,
)


@dataclass(slots=True)
class RunningChecksum:
    algorithm: Algorithm
    """CRC32 or Adler32"""

    value: int
    """Running checksum value"""

    def __post_init__(self) -> None:
        if not self.algorithm.is_checksum:
            raise ValueError(f"{self.algorithm} has no running checksum value")


@dataclass(slots=True)
class LiveContext:
    algorithm: Algorithm
    """Digest algorithm"""

    context: DigestContext
    """Primitive context, owned by this backing only"""

    def __post_init__(self) -> None:
        if self.algorithm.is_checksum:
            raise ValueError(f"{self.algorithm} has no digest context")


@dataclass(slots=True, frozen=True)
class Finalized:
    digest: bytes
    """Finalized digest"""


@dataclass(slots=True, frozen=True)
class Released:
    pass


type Backing = RunningChecksum | LiveContext | Finalized | Released


def allocate(algorithm: Algorithm) -> Backing:
    """Create the initial backing for an algorithm."""
    if algorithm.is_checksum:
        return RunningChecksum(algorithm, checksum_init(algorithm))

    return LiveContext(algorithm, digest_init(algorithm))


def apply(backing: Backing, data: memoryview) -> None:
    """Feed one region to the primitive behind the backing, in place.

    The region must not exceed the algorithm's `max_update_length`.

    Args:
        backing: A live backing.
        data: Contiguous unsigned-byte view.

    Raises:
        ChecksumFinalizedError: The backing already holds a digest.
        ChecksumClosedError: The backing was released.
    """
    match backing:
        case RunningChecksum(algorithm=algorithm, value=value):
            backing.value = checksum_update(algorithm, value, data)
        case LiveContext(context=context):
            digest_update(context, data)
        case Finalized():
            raise ChecksumFinalizedError("Digest already finalized")
        case Released():
            raise ChecksumClosedError("Checksum is closed")
        case _:
            assert_never(backing)


def finalize(backing: Backing) -> Finalized:
    """Materialize the digest.

    A live context is consumed; the caller replaces its backing with the
    returned value and drops the context. An already finalized backing is
    returned unchanged.

    Raises:
        ChecksumClosedError: The backing was released before finalization.
    """
    match backing:
        case RunningChecksum(value=value):
            return Finalized(checksum_finalize(value))
        case LiveContext(context=context):
            return Finalized(digest_finalize(context))
        case Finalized():
            return backing
        case Released():
            raise ChecksumClosedError("Checksum was closed before finalization")
        case _:
            assert_never(backing)


def release(backing: Backing) -> Backing:
    """Drop any live context. Safe to call on every variant, any number of times."""
    match backing:
        case RunningChecksum() | LiveContext():
            return Released()
        case Finalized() | Released():
            return backing
        case _:
            assert_never(backing)
