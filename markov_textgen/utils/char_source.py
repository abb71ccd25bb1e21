# char_source.py - character sources the trainer reads a corpus from

from __future__ import annotations

from markov_textgen.core.errors import CorpusDecodeError, SourceExhaustedError


class StringCharSource:
    """Reads characters one at a time from an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def is_exhausted(self) -> bool:
        return self._pos >= len(self._text)

    def read_char(self) -> str:
        if self.is_exhausted():
            raise SourceExhaustedError("no characters left to read")
        c = self._text[self._pos]
        self._pos += 1
        return c

    @property
    def chars_read(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._text)


class FileCharSource(StringCharSource):
    """
    Character source over a text file.
    The whole file is decoded up front, so line endings and every other
    character (newlines included) are part of the stream.
    Missing files raise FileNotFoundError straight away; undecodable ones
    raise CorpusDecodeError.
    """

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise CorpusDecodeError(
                f"{path} is not valid {encoding} text: {e.reason} at byte {e.start}"
            ) from e
        except LookupError as e:
            raise CorpusDecodeError(f"unknown encoding {encoding!r}") from e
        super().__init__(text)
        self.path = path
