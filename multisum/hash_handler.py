from abc import ABCMeta, abstractmethod
from collections.abc import Buffer, Iterator
from types import TracebackType
from typing import Self

from loguru import logger

from multisum.algorithm import Algorithm
from multisum.backing import (
    Backing,
    Finalized,
    Released,
    allocate,
    apply,
    finalize,
    release,
)
from multisum.define import ByteRegions, ChecksumClosedError, ChecksumFinalizedError


class Hasher(metaclass=ABCMeta):
    @abstractmethod
    def update(self, data: ByteRegions) -> None:
        raise NotImplementedError()

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError()

    @property
    @abstractmethod
    def digest(self) -> bytes:
        raise NotImplementedError()

    @property
    @abstractmethod
    def hexdigest(self) -> str:
        raise NotImplementedError()


class Checksum(Hasher):
    """Incremental checksum or digest for one algorithm.

    Feed data with `update` as many times as needed, then read `digest`.
    The first read finalizes and caches the result; later reads return the
    cached bytes. Updating a finalized accumulator raises
    `ChecksumFinalizedError`, `reset` starts over.

    An instance is not safe for concurrent use.
    """

    _algorithm: Algorithm
    _backing: Backing

    def __init__(self, algorithm: Algorithm) -> None:
        self._algorithm = algorithm
        self._backing = allocate(algorithm)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def name(self) -> str:
        return self._algorithm.display_name

    @property
    def digest_size(self) -> int:
        return self._algorithm.digest_size

    @property
    def finalized(self) -> bool:
        return isinstance(self._backing, Finalized)

    @property
    def closed(self) -> bool:
        """`True` if the accumulator was closed before producing a digest."""
        return isinstance(self._backing, Released)

    def update(self, data: ByteRegions) -> None:
        """Feed data to the accumulator.

        Args:
            data: A bytes-like object, or an iterable of bytes-like regions
                processed in order.

        Raises:
            ChecksumFinalizedError: The digest was already produced.
            ChecksumClosedError: The accumulator was closed.
            TypeError: `data` is not bytes-like.
        """
        self._ensure_live()

        # Reject the whole call before any region reaches the backing.
        views = [_byte_view(region) for region in _regions(data)]
        for view in views:
            self._update_view(view)

    def _update_view(self, view: memoryview) -> None:
        length = len(view)
        if length == 0:
            return

        max_length = self._algorithm.max_update_length
        if length > max_length:
            logger.trace(
                f"Splitting {length} bytes for {self.name} into chunks of {max_length}"
            )

        for start in range(0, length, max_length):
            apply(self._backing, view[start : start + max_length])

    def reset(self) -> None:
        """Discard all state and start a new computation with the same algorithm."""
        self._backing = allocate(self._algorithm)

    def close(self) -> None:
        """Release the live primitive context. A produced digest stays readable."""
        if not self.finalized and not self.closed:
            logger.debug(f"{self.name} checksum closed before finalization")

        self._backing = release(self._backing)

    @property
    def digest(self) -> bytes:
        """Finalized digest, `digest_size` bytes long.

        Raises:
            ChecksumClosedError: The accumulator was closed before finalization.
        """
        if isinstance(self._backing, Finalized):
            return self._backing.digest

        self._backing = finalize(self._backing)
        logger.debug(f"{self.name} digest finalized")
        return self._backing.digest

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    def _ensure_live(self) -> None:
        match self._backing:
            case Finalized():
                raise ChecksumFinalizedError(
                    f"{self.name} digest already finalized, call reset() to start over"
                )
            case Released():
                raise ChecksumClosedError(f"{self.name} checksum is closed")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Checksum({self.name}, finalized={self.finalized})"


def _regions(data: ByteRegions) -> Iterator[Buffer]:
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")

    if isinstance(data, Buffer):
        yield data
        return

    for region in data:
        if isinstance(region, str) or not isinstance(region, Buffer):
            raise TypeError(
                f"Expected a bytes-like region, got '{type(region).__name__}'"
            )
        yield region


def _byte_view(region: Buffer) -> memoryview:
    view = memoryview(region)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())

    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")

    return view
