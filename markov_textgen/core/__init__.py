"""
markov_textgen.core

The modelling engine:
 - frequency records and per-context distributions (char_data)
 - training, probability computation and generation (LanguageModel)
 - inverse-CDF sampling (sampler)
"""

from .char_data import CharData, CharDistribution
from .sampler import sample, FALLBACK_CHAR
from .language_model import LanguageModel

__all__ = [
    "CharData",
    "CharDistribution",
    "sample",
    "FALLBACK_CHAR",
    "LanguageModel",
]
