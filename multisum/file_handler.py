import os
from abc import ABCMeta, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import BinaryIO


class FileHandler(metaclass=ABCMeta):
    @abstractmethod
    def open(self, filepath: str | Path) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            filepath: The file to open.

        Returns:
            A binary stream the caller must close.

        Raises:
            OSError: The file does not exist or cannot be read.
        """
        raise NotImplementedError()

    @abstractmethod
    def check_file(self, filepath: str | Path) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def get_file_size(self, filepath: str | Path) -> int:
        raise NotImplementedError()


class OsFileHandler(FileHandler):
    """OS File System"""

    def open(self, filepath: str | Path) -> BinaryIO:
        return open(filepath, "rb")

    def check_file(self, filepath: str | Path) -> bool:
        return os.path.isfile(filepath)

    def get_file_size(self, filepath: str | Path) -> int:
        return os.path.getsize(filepath)


class MockFileSystem(FileHandler):
    """In-memory file system. Keeps every stream it opened in `opened`."""

    files: dict[str, bytes]
    opened: list[BytesIO]

    def __init__(self) -> None:
        self.files = {}
        self.opened = []

    def save(self, filename: str | Path, content: bytes) -> None:
        self.files[str(filename)] = bytes(content)

    def open(self, filepath: str | Path) -> BinaryIO:
        file = str(filepath)
        if file not in self.files:
            raise FileNotFoundError(f"File '{filepath}' not found.")

        stream = BytesIO(self.files[file])
        self.opened.append(stream)
        return stream

    def check_file(self, filepath: str | Path) -> bool:
        return str(filepath) in self.files

    def get_file_size(self, filepath: str | Path) -> int:
        try:
            return len(self.files[str(filepath)])
        except KeyError:
            return -1
