import pytest

from multisum.algorithm import Algorithm
from multisum.define import UnknownAlgorithmError


class TestAlgorithmNames:
    def test_display_names(self) -> None:
        assert Algorithm.ADLER32.display_name == "Adler32"
        assert Algorithm.CRC32.display_name == "CRC32"
        assert Algorithm.MD2.display_name == "MD2"
        assert Algorithm.MD5.display_name == "MD5"
        assert Algorithm.SHA1.display_name == "SHA1"
        assert Algorithm.SHA224.display_name == "SHA224"
        assert Algorithm.SHA256.display_name == "SHA256"
        assert Algorithm.SHA384.display_name == "SHA384"
        assert Algorithm.SHA512.display_name == "SHA512"

    def test_str_is_display_name(self, algorithm: Algorithm) -> None:
        assert str(algorithm) == algorithm.display_name

    def test_closed_set(self) -> None:
        assert len(Algorithm) == 9


class TestAlgorithmSizes:
    @pytest.mark.parametrize(
        "algorithm, size",
        [
            (Algorithm.CRC32, 4),
            (Algorithm.ADLER32, 4),
            (Algorithm.MD2, 16),
            (Algorithm.MD5, 16),
            (Algorithm.SHA1, 20),
            (Algorithm.SHA224, 28),
            (Algorithm.SHA256, 32),
            (Algorithm.SHA384, 48),
            (Algorithm.SHA512, 64),
        ],
    )
    def test_digest_size(self, algorithm: Algorithm, size: int) -> None:
        assert algorithm.digest_size == size

    def test_max_update_length(self, algorithm: Algorithm) -> None:
        if algorithm.is_checksum:
            assert algorithm.max_update_length == 0xFFFFFFFF
        else:
            assert algorithm.max_update_length == 0x7FFFFFFF

    def test_checksum_family(self) -> None:
        assert {a for a in Algorithm if a.is_checksum} == {
            Algorithm.CRC32,
            Algorithm.ADLER32,
        }

    def test_secure_family(self) -> None:
        assert {a for a in Algorithm if a.is_secure} == {
            Algorithm.SHA224,
            Algorithm.SHA256,
            Algorithm.SHA384,
            Algorithm.SHA512,
        }


class TestAlgorithmFromName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("sha256", Algorithm.SHA256),
            ("SHA256", Algorithm.SHA256),
            ("SHA-256", Algorithm.SHA256),
            (" sha_512 ", Algorithm.SHA512),
            ("Adler32", Algorithm.ADLER32),
            ("crc32", Algorithm.CRC32),
            ("MD2", Algorithm.MD2),
        ],
    )
    def test_parse(self, name: str, expected: Algorithm) -> None:
        assert Algorithm.from_name(name) is expected

    def test_round_trip_display_name(self, algorithm: Algorithm) -> None:
        assert Algorithm.from_name(algorithm.display_name) is algorithm

    @pytest.mark.parametrize("name", ["", "sha3", "blake2b", "crc64"])
    def test_unknown(self, name: str) -> None:
        with pytest.raises(UnknownAlgorithmError):
            Algorithm.from_name(name)

    def test_unknown_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown algorithm 'whirlpool'"):
            Algorithm.from_name("whirlpool")
