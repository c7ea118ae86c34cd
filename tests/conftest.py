from pathlib import Path

import pytest

from multisum.algorithm import Algorithm


@pytest.fixture(params=list(Algorithm), ids=lambda a: a.value)
def algorithm(request: pytest.FixtureRequest) -> Algorithm:
    return request.param


@pytest.fixture
def sample_data() -> bytes:
    """A few KiB of non-repeating bytes, longer than the small buffer sizes used in tests."""
    return bytes((i * 31 + i // 7) % 256 for i in range(5000))


@pytest.fixture
def sample_file(tmp_path: Path, sample_data: bytes) -> Path:
    filepath = tmp_path / "sample.bin"
    filepath.write_bytes(sample_data)
    return filepath
