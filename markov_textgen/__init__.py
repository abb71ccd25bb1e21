"""
markov_textgen

Character-level Markov text generation.
Contains:
 - LanguageModel: single-pass trainer, probability tables and generator
 - CharData / CharDistribution: per-context frequency records
 - sample: stateless inverse-CDF character draw
 - character sources for strings and files
"""

from .core import (
    CharData,
    CharDistribution,
    LanguageModel,
    sample,
    FALLBACK_CHAR,
)
from .core.errors import (
    LanguageModelError,
    InvalidConfiguration,
    InsufficientDataError,
    ModelStateError,
    SourceExhaustedError,
    CorpusDecodeError,
)
from .utils.char_source import StringCharSource, FileCharSource

__all__ = [
    "CharData",
    "CharDistribution",
    "LanguageModel",
    "sample",
    "FALLBACK_CHAR",
    "LanguageModelError",
    "InvalidConfiguration",
    "InsufficientDataError",
    "ModelStateError",
    "SourceExhaustedError",
    "CorpusDecodeError",
    "StringCharSource",
    "FileCharSource",
]

__version__ = "0.1.0"
