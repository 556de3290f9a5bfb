"""
File I/O service for reading and writing text files.

Handles:
- Strict UTF-8 decoding
- Line splitting on LF with CRLF support
- Error translation to FileAccessError
"""

from __future__ import annotations

import logging
from pathlib import Path

from textdiff.core.models import FileAccessError, LineSequence


class FileIOService:
    """Service for text file I/O operations."""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def read_lines(self, path: Path | str) -> LineSequence:
        """
        Read every line of a text file.

        Lines are split on "\\n". The terminator is stripped, along with a
        "\\r" directly before it. Bytes that do not decode fail the whole read.

        Args:
            path: Path to the file

        Returns:
            The lines of the file in file order

        Raises:
            FileAccessError: If the file cannot be opened or read
        """
        path = Path(path)
        lines: LineSequence = []

        try:
            # newline='\n' splits on LF only and leaves "\r" untranslated
            with open(path, 'r', encoding=self.encoding, newline='\n') as f:
                for line in f:
                    lines.append(self._strip_terminator(line))
        except PermissionError as e:
            raise FileAccessError(f"Permission denied: {path}", path, e) from e
        except FileNotFoundError as e:
            raise FileAccessError(f"File not found: {path}", path, e) from e
        except IsADirectoryError as e:
            raise FileAccessError(f"Not a file: {path}", path, e) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(
                f"File is not valid {self.encoding} text: {path} ({e.reason} at byte {e.start})",
                path, e
            ) from e
        except OSError as e:
            raise FileAccessError(f"OS error: {e}", path, e) from e

        logging.debug(f"FileIOService - Read {len(lines)} lines from {path}")
        return lines

    def write_text(self, path: Path | str, content: str) -> int:
        """
        Write content to a file in a single write.

        Content is encoded before the file is opened, so text that cannot
        be encoded leaves an existing file untouched. Newlines are written
        untranslated on every platform.

        Returns:
            Number of bytes written

        Raises:
            FileAccessError: If the content cannot be encoded or the file
                cannot be created or written
        """
        path = Path(path)

        try:
            data = content.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise FileAccessError(
                f"Content cannot be written as {self.encoding}: {path} ({e.reason})",
                path, e
            ) from e

        try:
            with open(path, 'wb') as f:
                written = f.write(data)
        except PermissionError as e:
            raise FileAccessError(f"Permission denied: {path}", path, e) from e
        except IsADirectoryError as e:
            raise FileAccessError(f"Not a file: {path}", path, e) from e
        except OSError as e:
            raise FileAccessError(f"OS error: {e}", path, e) from e

        return written

    @staticmethod
    def _strip_terminator(line: str) -> str:
        """Remove a trailing "\\n" or "\\r\\n"."""
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        return line
