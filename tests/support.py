from collections.abc import AsyncIterator, Iterable
from pathlib import Path

from multisum.algorithm import Algorithm

FIXTURE_DIR = Path(__file__).parent / "fixtures"

ABC_VECTORS: dict[Algorithm, str] = {
    Algorithm.CRC32: "c2412435",
    Algorithm.ADLER32: "27014d02",
    Algorithm.MD2: "da853b0d3f88d99b30283a69e6ded6bb",
    Algorithm.MD5: "900150983cd24fb0d6963f7d28e17f72",
    Algorithm.SHA1: "a9993e364706816aba3e25717850c26c9cd0d89d",
    Algorithm.SHA224: "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
    Algorithm.SHA256: "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    Algorithm.SHA384: "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
    "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7",
    Algorithm.SHA512: "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
}
"""Digests of b"abc". CRC32 and Adler32 are little-endian."""

EMPTY_VECTORS: dict[Algorithm, str] = {
    Algorithm.CRC32: "00000000",
    Algorithm.ADLER32: "01000000",
    Algorithm.MD2: "8350e5a3e24c153df2275c9f80692773",
    Algorithm.MD5: "d41d8cd98f00b204e9800998ecf8427e",
    Algorithm.SHA1: "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    Algorithm.SHA224: "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    Algorithm.SHA256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    Algorithm.SHA384: "38b060a751ac96384cd9327eb1b1e36a21fdb71114be0743"
    "4c0cc7bf63f6e1da274edebfe76f65fbd51ad2f14898b95b",
    Algorithm.SHA512: "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
    "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e",
}

GETTYSBURG_VECTORS: dict[Algorithm, str] = {
    Algorithm.ADLER32: "0013f1a6",
    Algorithm.CRC32: "193db42e",
    Algorithm.MD2: "a9095080724e5beffc35ed027f0d84a7",
    Algorithm.MD5: "f7cf20533efd90326ee656e72e22801d",
    Algorithm.SHA1: "1ad822f01126b638ba4c3ca56df32f2087d84b90",
    Algorithm.SHA224: "27240785a8f5911147d5b2e73c3760b828185a7f6b74c7a9c3b5b987",
    Algorithm.SHA256: "463d2aa337dd761d9d634e82b19df72084a162a65511a488d8bacf7cbeb455f9",
    Algorithm.SHA384: "1b98237747fce47f94d2a0c69f8090775d5475471e7ec2c9"
    "c024318fc7062361ace122fda22ca7da3e98a051ea7c9118",
    Algorithm.SHA512: "4728caf36f2776d8192123d4650a8af19c44430b317140d7224609c6c58f3ba2"
    "f7749f716c1c7b93fb67cc52264d55dd854e34f47acf1d207966dd82965275f0",
}


async def aiter_items[T](items: Iterable[T]) -> AsyncIterator[T]:
    for item in items:
        yield item


