from collections.abc import Buffer, Iterable

type ByteRegions = Buffer | Iterable[Buffer]

ENCODING = "utf-8"

BUFFER_SIZE = 1024 * 10
# Read buffer for files and streams, and the default threshold for
# buffering single bytes from an async source.

CRC_MAX_UPDATE_LENGTH = 2**32 - 1
DIGEST_MAX_UPDATE_LENGTH = 2**31 - 1

DEFAULT_ALGORITHM = "sha256"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_ALGORITHM = "MULTISUM_ALGORITHM"
ENV_BUFFER_SIZE = "MULTISUM_BUFFER_SIZE"
ENV_LOG_LEVEL = "MULTISUM_LOG_LEVEL"
ENV_LOG_DIR = "MULTISUM_LOG_DIR"

LOG_FILENAME = "multisum.log"


class ChecksumError(Exception):
    """Base class for errors raised by multisum."""

    pass


class ChecksumUsageError(ChecksumError):
    """Raised when an accumulator is used outside its lifecycle."""

    pass


class ChecksumFinalizedError(ChecksumUsageError):
    """Raised when data is fed to an accumulator whose digest was already produced."""

    pass


class ChecksumClosedError(ChecksumUsageError):
    """Raised when a closed accumulator is updated or asked for a digest."""

    pass


class UnknownAlgorithmError(ChecksumError, ValueError):
    """Raised when an algorithm name cannot be parsed."""

    pass
