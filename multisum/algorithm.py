from enum import Enum

from multisum.define import (
    CRC_MAX_UPDATE_LENGTH,
    DIGEST_MAX_UPDATE_LENGTH,
    UnknownAlgorithmError,
)


class Algorithm(Enum):
    CRC32 = "crc32"
    ADLER32 = "adler32"
    MD2 = "md2"  # Not secure. Legacy file formats only.
    MD5 = "md5"  # Not secure. Legacy file formats only.
    SHA1 = "sha1"  # Not secure. Legacy file formats only.
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def display_name(self) -> str:
        """Canonical human-readable name, e.g. `Adler32` or `SHA256`."""
        return _DISPLAY_NAMES[self]

    @property
    def digest_size(self) -> int:
        """Length of the finalized digest in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def is_checksum(self) -> bool:
        """`True` for the zlib running-value family (CRC32, Adler32)."""
        return self in (Algorithm.CRC32, Algorithm.ADLER32)

    @property
    def is_secure(self) -> bool:
        return self not in _INSECURE

    @property
    def max_update_length(self) -> int:
        """Largest number of bytes a single primitive update call accepts.

        Longer inputs are split by the accumulator before reaching the primitive.
        """
        if self.is_checksum:
            return CRC_MAX_UPDATE_LENGTH

        return DIGEST_MAX_UPDATE_LENGTH

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Parse an algorithm from its value or display name.

        Args:
            name: Name such as `sha256`, `SHA256`, `SHA-256` or `Adler32`.

        Returns:
            The matching algorithm.

        Raises:
            UnknownAlgorithmError: If the name matches no algorithm.
        """
        key = name.strip().lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm

        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}', expected one of: "
            + ", ".join(a.value for a in cls)
        )


_DISPLAY_NAMES: dict[Algorithm, str] = {
    Algorithm.CRC32: "CRC32",
    Algorithm.ADLER32: "Adler32",
    Algorithm.MD2: "MD2",
    Algorithm.MD5: "MD5",
    Algorithm.SHA1: "SHA1",
    Algorithm.SHA224: "SHA224",
    Algorithm.SHA256: "SHA256",
    Algorithm.SHA384: "SHA384",
    Algorithm.SHA512: "SHA512",
}

_DIGEST_SIZES: dict[Algorithm, int] = {
    Algorithm.CRC32: 4,
    Algorithm.ADLER32: 4,
    Algorithm.MD2: 16,
    Algorithm.MD5: 16,
    Algorithm.SHA1: 20,
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}

_INSECURE = frozenset(
    (
        Algorithm.CRC32,
        Algorithm.ADLER32,
        Algorithm.MD2,
        Algorithm.MD5,
        Algorithm.SHA1,
    )
)
