# language_model.py
# fixed-order character-level Markov language model: training, probabilities and generation.

from __future__ import annotations
import random
from typing import Dict, Iterator, Optional

from .char_data import CharDistribution
from .errors import InsufficientDataError, InvalidConfiguration, ModelStateError
from .protocols import CharacterSource, DistributionRow, RandomSource
from .sampler import FALLBACK_CHAR, sample
from markov_textgen.utils.char_source import FileCharSource, StringCharSource
from markov_textgen.utils.logger_utils import Log


class LanguageModel:
    """
    Character-level Markov model with a fixed window length.

    Maps every window (substring of `window_length` chars) seen in the corpus
    to a CharDistribution of the chars that followed it. Generation extends
    seed text by repeatedly sampling from the distribution of its last window.

      - one training pass, then the store is read-only
      - each model owns its random source; seeded models are reproducible
      - lookups that miss stop generation early rather than failing
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        *,
        strict: bool = False,
        log: Optional[Log] = None,
    ) -> None:
        if isinstance(window_length, bool) or not isinstance(window_length, int):
            raise InvalidConfiguration(f"window_length must be an int, got {window_length!r}")
        if window_length <= 0:
            raise InvalidConfiguration(f"window_length must be positive, got {window_length}")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidConfiguration(f"seed must be an int or None, got {seed!r}")

        self.window_length = window_length
        self.seed = seed
        self.strict = strict
        self.log = log or Log()
        # window -> distribution of next chars
        self.char_data_map: Dict[str, CharDistribution] = {}
        self._rng: RandomSource = random.Random(seed) if seed is not None else random.Random()
        self._trained = False

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, source: CharacterSource) -> bool:
        """
        Build the model from a character source in a single pass.
        Returns False when the source is shorter than one window (the model
        stays empty), or raises InsufficientDataError if the model is strict.
        The store is only replaced once the pass is finalized, so a source
        failing mid-stream leaves the model empty and untrained.
        """
        if self._trained:
            raise ModelStateError("model is already trained; build a new one to retrain")

        with self.log.time_block("train"):
            window = ""
            for _ in range(self.window_length):
                if source.is_exhausted():
                    if self.strict:
                        raise InsufficientDataError(self.window_length, len(window))
                    self.log.warning(
                        f"corpus too short for window length {self.window_length} "
                        f"({len(window)} chars); model is empty"
                    )
                    self._trained = True
                    return False
                window += source.read_char()

            store: Dict[str, CharDistribution] = {}
            n_chars = self.window_length
            while not source.is_exhausted():
                c = source.read_char()
                n_chars += 1
                probs = store.get(window)
                if probs is None:
                    probs = CharDistribution()
                    store[window] = probs
                probs.update(c)
                window = window[1:] + c

            for probs in store.values():
                self.calculate_probabilities(probs)
                probs.freeze()

        self.char_data_map = store
        self._trained = True
        self.log.info(f"read {n_chars} chars, learned {len(store)} contexts")
        return True

    def train_text(self, text: str) -> bool:
        return self.train(StringCharSource(text))

    def train_file(self, path: str, encoding: str = "utf-8") -> bool:
        self.log.debug(f"training from {path}")
        return self.train(FileCharSource(path, encoding=encoding))

    @property
    def is_trained(self) -> bool:
        return self._trained

    # ------------------------------------------------------------------
    # Probability computation
    # ------------------------------------------------------------------
    @staticmethod
    def calculate_probabilities(probs: Optional[CharDistribution]) -> None:
        """
        Set p and cp on every record of `probs`.
        Counts are summed first so nothing is divided before the total is known.
        A zero total leaves the records unfinalized.
        """
        if probs is None:
            return
        total = probs.total_count()
        if total == 0:
            return

        cumulative = 0.0
        for rec in probs:
            rec.p = rec.count / total
            cumulative += rec.p
            rec.cp = cumulative

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def get_random_char(
        self, probs: Optional[CharDistribution], rng: Optional[RandomSource] = None
    ) -> str:
        """Draw one char from `probs` using `rng` (default: the model's own)."""
        if probs is None:
            return FALLBACK_CHAR
        r = (rng or self._rng).random()
        return sample(probs, r)

    def generate(
        self,
        initial_text: Optional[str],
        text_length: int,
        rng: Optional[RandomSource] = None,
    ) -> str:
        """
        Extend `initial_text` by up to `text_length` sampled chars.

        The initial text comes back unchanged when it is shorter than the
        window or text_length <= 0. Generation stops early, returning what it
        has so far, as soon as the current window was never seen in training.
        """
        if initial_text is None:
            return ""
        if len(initial_text) < self.window_length or text_length <= 0:
            return initial_text

        chars = list(initial_text)
        final_len = len(initial_text) + text_length
        while len(chars) < final_len:
            window = "".join(chars[-self.window_length:])
            probs = self.char_data_map.get(window)
            if probs is None or not probs.is_finalized:
                self.log.debug(f"unseen window {window!r}, stopping at {len(chars)} chars")
                break
            chars.append(self.get_random_char(probs, rng))
        return "".join(chars)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def get_distribution(self, window: str) -> Optional[CharDistribution]:
        return self.char_data_map.get(window)

    def rows(self) -> Iterator[DistributionRow]:
        """Flatten the store into dump rows, contexts in insertion order."""
        for window, probs in self.char_data_map.items():
            for rec in probs:
                yield DistributionRow(
                    context=window, chr=rec.chr, count=rec.count, p=rec.p, cp=rec.cp
                )

    def __len__(self) -> int:
        return len(self.char_data_map)

    def __contains__(self, window: object) -> bool:
        return window in self.char_data_map

    def __str__(self) -> str:
        return "".join(f"{key} : {probs}\n" for key, probs in self.char_data_map.items())

    def __repr__(self) -> str:
        return (
            f"LanguageModel(window_length={self.window_length}, seed={self.seed}, "
            f"contexts={len(self.char_data_map)})"
        )
