from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging

import numpy as np
from joblib import Parallel, delayed
from sortedcontainers import SortedSet

from .knowledge import Knowledge
from .ranking import best_candidates
from .settings import Settings
from .wordle_game import Color, WordleGame, parse_tiles, format_tiles

logger = logging.getLogger(__name__)


class AbstractGuessManager(metaclass=ABCMeta):

    @abstractmethod
    def reset(self):
        pass

    @abstractmethod
    def update_guess_result(self, tiles):
        pass

    @abstractmethod
    def undo_last_guess(self):
        pass

    @abstractmethod
    def get_suggestions(self):
        pass


class GuessManager(AbstractGuessManager):
    """Suggests guesses for a game whose feedback comes from outside.

    Feedback is given either as tiles or in the ``*``/``?``/``!`` notation
    (see ``parse_tiles``). Rejected feedback leaves the manager untouched.
    """

    def __init__(self, lexicon, letter_freq, settings=None):
        self.settings = settings if settings is not None else Settings()
        self.letter_freq = letter_freq

        probe = Knowledge(self.settings.word_length)
        self.lexicon = tuple(SortedSet(word for word in lexicon if probe.is_consistent(word)))
        logger.debug(f"{len(self.lexicon)} words of length {self.settings.word_length}")

        self.reset()

    def reset(self):
        self.knowledge = Knowledge(self.settings.word_length)
        self.candidates = self.lexicon
        self.clue_hist = []
        self._history = []

    def get_suggestions(self):
        return best_candidates(self.candidates, self.knowledge, self.letter_freq,
                               self.settings.suggestion_count)

    def is_exhausted(self):
        return not self.candidates

    def update_guess_result(self, tiles):
        if isinstance(tiles, str):
            tiles = parse_tiles(tiles, self.settings.word_length)
        tiles = tuple(tiles)

        previous = (self.knowledge.copy(), self.candidates)
        self.knowledge.absorb(tiles)
        self._history.append(previous)
        self.clue_hist.append(tiles)

        self.candidates = _refilter(self.knowledge, self.candidates, tiles)
        logger.debug(f"{format_tiles(tiles)}: {len(self.candidates)} candidates left")
        return len(self.candidates)

    def undo_last_guess(self):
        if not self._history:
            return False
        self.knowledge, self.candidates = self._history.pop()
        self.clue_hist.pop()
        return True

    def run(self, ask):
        '''
        Keep suggesting guesses until the candidates run out or ``ask`` returns
        nothing. ``ask(suggestions, candidates)`` must return the feedback for
        the guess that was played. Returns the remaining candidates; an empty
        tuple means no word fits the feedback given.
        '''
        while self.candidates:
            suggestions = self.get_suggestions()
            while True:
                feedback = ask(suggestions, self.candidates)
                if not feedback:
                    logger.debug("no more feedback, stopping")
                    return self.candidates
                try:
                    self.update_guess_result(feedback)
                except ValueError as e:
                    logger.warning(f"Bad input: {e}")
                    continue
                break

        logger.warning("no candidates left!")
        return self.candidates


def _refilter(knowledge, candidates, tiles):
    # A guess that was not all green is not the secret, even if the feedback
    # happens to leave it consistent.
    guess = ''.join(letter for letter, _ in tiles)
    solved = all(color == Color.GREEN for _, color in tiles)
    return tuple(word for word in knowledge.filter(candidates)
                 if solved or word != guess)


def solve_for(secret, candidates, letter_freq, count=10):
    """Play against ``secret``, always taking the top-ranked candidate.

    Returns ``(guess, remaining)`` pairs, one per guess; the final pair is
    ``(secret, 1)`` when solved, or ``('', 0)`` when no candidate is left.
    """
    knowledge = Knowledge(len(secret))
    candidates = tuple(knowledge.filter(candidates))
    game = WordleGame(candidates, secret=secret)
    guesses = []

    while True:
        best = best_candidates(candidates, knowledge, letter_freq, count)
        if not best:
            logger.warning(f"no candidates left for {secret!r}; is the word in the dictionary?")
            guesses.append(('', 0))
            return guesses

        guess = best[0]
        solved, tiles = game.guess(guess)
        if solved:
            guesses.append((guess, 1))
            return guesses

        knowledge.absorb(tiles)
        candidates = _refilter(knowledge, candidates, tiles)
        guesses.append((guess, len(candidates)))


def format_trial(word, guesses, dictionary_size):
    '''<guesses required> <the word> (<size of dictionary>) [<guessed word> (<words remaining>)]...'''
    line = f"{len(guesses)} {word} ({dictionary_size})"
    return line + ''.join(f" {guess} ({remaining})" for guess, remaining in guesses)


@dataclass
class SelfPlayReport:
    trials: Dict[str, List[Tuple[str, int]]] = field(default_factory=dict)
    dictionary_size: int = 0

    @property
    def failures(self):
        return [word for word, guesses in self.trials.items() if guesses[-1][0] == '']

    def solved(self):
        return {word: guesses for word, guesses in self.trials.items() if guesses[-1][0] != ''}

    @property
    def worst_case(self):
        return max((len(guesses) for guesses in self.solved().values()), default=0)

    @property
    def worst_words(self):
        worst = self.worst_case
        return [word for word, guesses in self.solved().items() if len(guesses) == worst]

    def depth_profile(self):
        '''Number of solved words per guess count; index 0 is always 0.'''
        depths = [len(guesses) for guesses in self.solved().values()]
        return np.bincount(np.array(depths, dtype=int), minlength=1)

    def mean_guesses(self):
        depths = [len(guesses) for guesses in self.solved().values()]
        return float(np.mean(depths)) if depths else 0.0

    def lines(self):
        for word, guesses in self.trials.items():
            yield format_trial(word, guesses, self.dictionary_size)


def check_all_words(dictionary, letter_freq, settings=None):
    """Run ``solve_for`` against every word of the dictionary.

    Each trial is independent, so with ``settings.n_jobs`` other than 1 they
    are spread over joblib workers.
    """
    settings = settings if settings is not None else Settings()
    words = tuple(SortedSet(dictionary))
    results = Parallel(n_jobs=settings.n_jobs)(
        delayed(solve_for)(word, words, letter_freq, settings.suggestion_count)
        for word in words)

    report = SelfPlayReport(dict(zip(words, results)), len(words))
    logger.info(f"checked {len(words)} words: worst case {report.worst_case} guesses "
                f"({', '.join(report.worst_words)}), {len(report.failures)} failures")
    return report
