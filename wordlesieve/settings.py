from dataclasses import dataclass, replace
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    word_length: int = 5
    suggestion_count: int = 10  # minimum number of ranked guesses to offer
    n_jobs: int = 1             # joblib workers for batch self-play; -1 uses all cores

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive, got {self.word_length}")
        if self.suggestion_count < 1:
            raise ValueError(f"suggestion_count must be positive, got {self.suggestion_count}")
        if self.n_jobs == 0:
            raise ValueError("n_jobs must not be 0")

    def replace(self, **changes):
        new = replace(self, **changes)
        logger.debug(f"settings changed: {changes}")
        return new
