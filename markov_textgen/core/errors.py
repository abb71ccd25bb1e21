# errors.py - exception types raised by the language model and its collaborators


class LanguageModelError(Exception):
    """Base class for every error raised by markov_textgen."""


class InvalidConfiguration(LanguageModelError, ValueError):
    """Bad construction parameters (window length, seed, config values)."""


class InsufficientDataError(LanguageModelError):
    """Corpus too short to form a single window (strict training only)."""

    def __init__(self, window_length: int, chars_read: int) -> None:
        super().__init__(
            f"corpus has {chars_read} chars, need at least {window_length} to form a window"
        )
        self.window_length = window_length
        self.chars_read = chars_read


class ModelStateError(LanguageModelError):
    """Operation not allowed in the model's current lifecycle state."""


class SourceExhaustedError(LanguageModelError, EOFError):
    """read_char() called on a character source that has nothing left."""


class CorpusDecodeError(LanguageModelError, ValueError):
    """Corpus file could not be decoded with the configured encoding."""
