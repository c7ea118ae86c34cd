import asyncio
from collections.abc import Buffer, Iterable
from contextlib import ExitStack
from pathlib import Path

from loguru import logger

from multisum.algorithm import Algorithm
from multisum.define import BUFFER_SIZE, ByteRegions
from multisum.file_handler import FileHandler, OsFileHandler
from multisum.hash_handler import Checksum
from multisum.stream_handler import (
    checksum_async,
    checksum_async_bytes,
    checksum_async_chunks,
    checksum_reader,
    checksum_stream,
    read_chunks,
)

__all__ = [
    "checksum",
    "checksum_many",
    "checksum_file",
    "checksum_file_many",
    "checksum_file_async",
    "checksum_stream",
    "checksum_async",
    "checksum_async_bytes",
    "checksum_async_chunks",
    "checksum_reader",
]


def checksum(data: ByteRegions, algorithm: Algorithm) -> bytes:
    """Compute the digest of an in-memory buffer or sequence of regions."""
    with Checksum(algorithm) as cksum:
        cksum.update(data)
        return cksum.digest


def checksum_many(
    data: ByteRegions, algorithms: Iterable[Algorithm]
) -> dict[Algorithm, bytes]:
    """Compute several digests of the same data in one pass over the regions."""
    with ExitStack() as stack:
        checksums = [stack.enter_context(Checksum(a)) for a in dict.fromkeys(algorithms)]
        regions = [data] if isinstance(data, Buffer) else data
        for region in regions:
            for cksum in checksums:
                cksum.update(region)

        return {cksum.algorithm: cksum.digest for cksum in checksums}


def checksum_file(
    filepath: str | Path,
    algorithm: Algorithm,
    chunk_size: int = BUFFER_SIZE,
    file_handler: FileHandler | None = None,
) -> bytes:
    """Compute the digest of a file.

    Args:
        filepath: The file to read.
        algorithm: The algorithm to use.
        chunk_size: Read buffer size in bytes.
        file_handler: File access, the OS file system by default.

    Returns:
        The digest bytes.

    Raises:
        OSError: The file cannot be opened or read.
    """
    return checksum_file_many(filepath, (algorithm,), chunk_size, file_handler)[
        algorithm
    ]


def checksum_file_many(
    filepath: str | Path,
    algorithms: Iterable[Algorithm],
    chunk_size: int = BUFFER_SIZE,
    file_handler: FileHandler | None = None,
) -> dict[Algorithm, bytes]:
    """Compute several digests of one file, reading it once."""
    file_handler = file_handler or OsFileHandler()

    with ExitStack() as stack:
        f = stack.enter_context(file_handler.open(filepath))
        checksums = [stack.enter_context(Checksum(a)) for a in dict.fromkeys(algorithms)]
        logger.debug(
            f"Hashing '{filepath}' ({file_handler.get_file_size(filepath)} bytes)"
            f" with {', '.join(c.name for c in checksums)}"
        )

        for chunk in read_chunks(f, chunk_size):
            for cksum in checksums:
                cksum.update(chunk)

        return {cksum.algorithm: cksum.digest for cksum in checksums}


async def checksum_file_async(
    filepath: str | Path,
    algorithm: Algorithm,
    chunk_size: int = BUFFER_SIZE,
    file_handler: FileHandler | None = None,
) -> bytes:
    """`checksum_file` run in a worker thread so the event loop is not blocked."""
    return await asyncio.to_thread(
        checksum_file, filepath, algorithm, chunk_size, file_handler
    )
