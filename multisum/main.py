import argparse
import os
import sys
from contextlib import ExitStack
from pathlib import Path

from loguru import logger

from multisum.algorithm import Algorithm
from multisum.api import checksum_file_many
from multisum.define import (
    BUFFER_SIZE,
    DEFAULT_ALGORITHM,
    DEFAULT_LOG_LEVEL,
    ENV_ALGORITHM,
    ENV_BUFFER_SIZE,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILENAME,
)
from multisum.file_handler import FileHandler, OsFileHandler
from multisum.formatting import (
    base64_to_bytes,
    bytes_to_base64,
    bytes_to_hex,
    hex_to_bytes,
    matches,
)
from multisum.hash_handler import Checksum
from multisum.stream_handler import read_chunks

STDIN_PATH = "-"

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_IO_ERROR = 2


def configure_logging() -> None:
    level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()

    logger.remove()
    logger.add(sys.stderr, level=level)

    log_dir = os.getenv(ENV_LOG_DIR)
    if log_dir:
        logger.add(Path(log_dir) / LOG_FILENAME, level=level, rotation="10 MB")


def default_algorithm() -> Algorithm:
    return Algorithm.from_name(os.getenv(ENV_ALGORITHM, DEFAULT_ALGORITHM))


def default_buffer_size() -> int:
    value = os.getenv(ENV_BUFFER_SIZE)
    if value is None:
        return BUFFER_SIZE

    return check_buffer_size(int(value), ENV_BUFFER_SIZE)


def check_buffer_size(size: int, source: str) -> int:
    if size <= 0:
        raise ValueError(f"{source} must be positive, got {size}")

    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multisum", description="Calculate checksums and digests of files."
    )
    parser.add_argument("paths", nargs="+", help=f"File paths, '{STDIN_PATH}' for stdin")
    parser.add_argument(
        "-a",
        "--algorithm",
        action="append",
        type=Algorithm.from_name,
        dest="algorithms",
        help="Algorithm, may be repeated: "
        + ", ".join(a.value for a in Algorithm),
    )
    parser.add_argument(
        "--base64", action="store_true", help="Print digests as base64 instead of hex"
    )
    parser.add_argument(
        "--check",
        metavar="DIGEST",
        help="Expected digest (hex, or base64 with --base64); exit with 1 on mismatch",
    )
    parser.add_argument("--chunk-size", type=int, help="Read buffer size in bytes")
    return parser


def hash_path(
    path: str,
    algorithms: list[Algorithm],
    chunk_size: int,
    file_handler: FileHandler,
) -> dict[Algorithm, bytes]:
    if path != STDIN_PATH:
        return checksum_file_many(path, algorithms, chunk_size, file_handler)

    with ExitStack() as stack:
        checksums = [stack.enter_context(Checksum(a)) for a in algorithms]
        for chunk in read_chunks(sys.stdin.buffer, chunk_size):
            for cksum in checksums:
                cksum.update(chunk)

        return {cksum.algorithm: cksum.digest for cksum in checksums}


def run(args: argparse.Namespace, file_handler: FileHandler | None = None) -> int:
    file_handler = file_handler or OsFileHandler()
    algorithms = list(dict.fromkeys(args.algorithms or [default_algorithm()]))
    if args.chunk_size is not None:
        chunk_size = check_buffer_size(args.chunk_size, "--chunk-size")
    else:
        chunk_size = default_buffer_size()
    render = bytes_to_base64 if args.base64 else bytes_to_hex

    for algorithm in algorithms:
        if not algorithm.is_secure:
            logger.warning(f"{algorithm} is not secure, use it for integrity checks only")

    if args.check is not None and (len(args.paths) != 1 or len(algorithms) != 1):
        raise ValueError("--check needs exactly one path and one algorithm")

    expected: bytes | None = None
    if args.check is not None and args.base64:
        expected = base64_to_bytes(args.check)
    elif args.check is not None:
        expected = hex_to_bytes(args.check)

    status = EXIT_OK
    for path in args.paths:
        if path != STDIN_PATH and not file_handler.check_file(path):
            logger.error(f"Not a readable file: {path}")
            status = EXIT_IO_ERROR
            continue

        try:
            digests = hash_path(path, algorithms, chunk_size, file_handler)
        except OSError as e:
            logger.error(f"Cannot read '{path}': {e}")
            status = EXIT_IO_ERROR
            continue

        for algorithm, digest in digests.items():
            print(f"{algorithm} ({path}) = {render(digest)}")

        if expected is not None and not matches(digests[algorithms[0]], expected):
            logger.error(f"{algorithms[0]} mismatch for '{path}'")
            status = EXIT_MISMATCH

    return status


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
