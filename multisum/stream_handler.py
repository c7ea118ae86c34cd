import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Buffer, Iterator
from contextlib import aclosing
from typing import BinaryIO

from multisum.algorithm import Algorithm
from multisum.define import BUFFER_SIZE
from multisum.hash_handler import Checksum


def read_chunks(stream: BinaryIO, chunk_size: int = BUFFER_SIZE) -> Iterator[memoryview]:
    """Read a binary stream into one reused buffer until a zero-length read.

    Each yielded view is only valid until the next iteration.

    Args:
        stream: Binary stream to read.
        chunk_size: Buffer size in bytes.

    Yields:
        A view over the bytes read by one call.
    """
    _check_size(chunk_size)

    readinto = getattr(stream, "readinto", None)
    if readinto is None:
        while chunk := stream.read(chunk_size):
            yield memoryview(chunk)
        return

    buffer = bytearray(chunk_size)
    view = memoryview(buffer)
    while True:
        count = readinto(view)
        if not count:
            break
        yield view[:count]


def checksum_stream(
    stream: BinaryIO, algorithm: Algorithm, chunk_size: int = BUFFER_SIZE
) -> bytes:
    """Compute the digest of everything left in a binary stream."""
    with Checksum(algorithm) as cksum:
        for chunk in read_chunks(stream, chunk_size):
            cksum.update(chunk)

        return cksum.digest


async def chunk_bytes(
    source: AsyncIterable[int], buffer_size: int = BUFFER_SIZE
) -> AsyncIterator[bytes]:
    """Group single bytes from an async source into chunks.

    A chunk is emitted each time `buffer_size` bytes have accumulated, and a
    final partial chunk is emitted when the source ends.
    """
    _check_size(buffer_size)

    accumulator = bytearray()
    async for byte in source:
        accumulator.append(byte)

        if len(accumulator) >= buffer_size:
            yield bytes(accumulator)
            accumulator.clear()

    if accumulator:
        yield bytes(accumulator)
        accumulator.clear()


async def checksum_async_bytes(
    source: AsyncIterable[int], algorithm: Algorithm, buffer_size: int = BUFFER_SIZE
) -> bytes:
    """Compute the digest of an async source yielding single bytes."""
    with Checksum(algorithm) as cksum:
        async with aclosing(chunk_bytes(source, buffer_size)) as chunks:
            async for chunk in chunks:
                cksum.update(chunk)

        return cksum.digest


async def checksum_async_chunks(
    source: AsyncIterable[Buffer], algorithm: Algorithm
) -> bytes:
    """Compute the digest of an async source yielding bytes-like chunks."""
    with Checksum(algorithm) as cksum:
        async for chunk in source:
            cksum.update(chunk)

        return cksum.digest


async def checksum_async(
    source: AsyncIterable[int | Buffer],
    algorithm: Algorithm,
    buffer_size: int | None = None,
) -> bytes:
    """Compute the digest of an async source of single bytes, chunks, or both.

    Single bytes are buffered up to `buffer_size` (default `BUFFER_SIZE`)
    before hashing. Chunks are hashed as they arrive, after flushing any
    buffered bytes so input order is kept.

    Errors raised by the source propagate unchanged. If the awaiting task is
    cancelled no digest is produced.
    """
    size = BUFFER_SIZE if buffer_size is None else buffer_size
    _check_size(size)

    with Checksum(algorithm) as cksum:
        pending = bytearray()
        async for item in source:
            if isinstance(item, int):
                pending.append(item)
                if len(pending) >= size:
                    cksum.update(pending)
                    pending = bytearray()
                continue

            if pending:
                cksum.update(pending)
                pending = bytearray()
            cksum.update(item)

        if pending:
            cksum.update(pending)

        return cksum.digest


async def checksum_reader(
    reader: asyncio.StreamReader, algorithm: Algorithm, chunk_size: int = BUFFER_SIZE
) -> bytes:
    """Compute the digest of an `asyncio.StreamReader` read until EOF."""
    _check_size(chunk_size)

    with Checksum(algorithm) as cksum:
        while chunk := await reader.read(chunk_size):
            cksum.update(chunk)

        return cksum.digest


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"Buffer size must be positive, got {size}")
