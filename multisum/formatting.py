import base64
import binascii

from multisum.define import ENCODING


def bytes_to_hex(data: bytes) -> str:
    return data.hex()


def bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode(ENCODING)


def hex_to_bytes(text: str) -> bytes:
    """Parse a hex digest such as `193db42e` or `193DB42E`.

    Raises:
        ValueError: The text is not an even-length hex string.
    """
    try:
        return bytes.fromhex(text.strip())
    except ValueError as e:
        raise ValueError(f"Invalid hex digest '{text}'") from e


def base64_to_bytes(text: str) -> bytes:
    try:
        return base64.b64decode(text.strip(), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 digest '{text}'") from e


def matches(digest: bytes, expected: bytes | str) -> bool:
    """Compare a digest with expected raw bytes or hex text."""
    if isinstance(expected, str):
        expected = hex_to_bytes(expected)

    return digest == expected
