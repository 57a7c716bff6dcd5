from collections import Counter, namedtuple
from string import ascii_lowercase
import logging

from .wordle_game import Color

logger = logging.getLogger(__name__)

ALPHABET = frozenset(ascii_lowercase)

# Slot states. A slot starts out Excluded(frozenset()) and may become Fixed
# once; it never goes back.
Fixed = namedtuple('Fixed', 'letter')
Excluded = namedtuple('Excluded', 'letters')


class FeedbackConflict(ValueError):
    """Feedback contradicts a slot that is already fixed to another letter."""

    def __init__(self, position, letter):
        super().__init__(f"letter {position} was already given as {letter!r}")
        self.position = position
        self.letter = letter


class Knowledge:
    """Everything learned about the secret word from feedback so far.

    ``positions`` holds one Fixed/Excluded restriction per slot and
    ``minimum_counts`` how many copies of a letter the word must contain.
    Both are replaced wholesale by ``absorb`` so copies never share state.
    """

    def __init__(self, length):
        if length < 1:
            raise ValueError(f"word length must be positive, got {length}")
        self.positions = (Excluded(frozenset()),) * length
        self.minimum_counts = {}

    @property
    def length(self):
        return len(self.positions)

    def copy(self):
        new = Knowledge.__new__(Knowledge)
        new.positions = self.positions
        new.minimum_counts = dict(self.minimum_counts)
        return new

    def __repr__(self):
        slots = ', '.join(r.letter if isinstance(r, Fixed) else
                          '!' + ''.join(sorted(r.letters)) for r in self.positions)
        return f"Knowledge([{slots}], minimum_counts={self.minimum_counts})"

    def is_consistent(self, word):
        '''
        True if ``word`` could still be the secret. Never raises: words of the
        wrong length or outside a-z are simply rejected.
        '''
        if len(word) != self.length:
            return False

        for pos, (c, restriction) in enumerate(zip(word, self.positions)):
            if c not in ALPHABET:
                return False

            if isinstance(restriction, Fixed):
                matches = c == restriction.letter
            else:
                matches = c not in restriction.letters
            if not matches:
                logger.debug(f"{word}: {c} violates {restriction} at {pos}")
                return False

        counts = Counter(word)
        for c, count in self.minimum_counts.items():
            if counts[c] < count:
                logger.debug(f"{word}: lacks required letter {c} ({count} times)")
                return False

        return True

    def filter(self, words):
        return [word for word in words if self.is_consistent(word)]

    def is_letter_known(self, letter):
        if letter in self.minimum_counts:
            return True
        for restriction in self.positions:
            if isinstance(restriction, Fixed):
                if restriction.letter == letter:
                    return True
            elif letter in restriction.letters:
                return True
        return False

    def absorb(self, tiles):
        '''
        Apply the feedback for one guess, one tile per slot. The whole batch is
        applied to a working copy first; on a FeedbackConflict nothing changes.
        '''
        tiles = tuple(tiles)
        if len(tiles) != self.length:
            raise ValueError(f"expected {self.length} tiles, got {len(tiles)}")

        positions = list(self.positions)
        seen = Counter()

        for pos, (c, color) in enumerate(tiles):
            restriction = positions[pos]

            if color == Color.GREEN:
                if isinstance(restriction, Fixed) and restriction.letter != c:
                    raise FeedbackConflict(pos, restriction.letter)
                positions[pos] = Fixed(c)
                seen[c] += 1

            elif color == Color.YELLOW:
                if isinstance(restriction, Fixed):
                    if restriction.letter != c:
                        raise FeedbackConflict(pos, restriction.letter)
                else:
                    positions[pos] = Excluded(restriction.letters | {c})
                seen[c] += 1

            elif color == Color.BLACK:
                if any(isinstance(r, Excluded) and c in r.letters for r in positions):
                    logger.debug(f"not adding restriction against {c}; already have one somewhere")
                    continue
                logger.debug(f"adding restriction against {c}")
                positions = [Excluded(r.letters | {c}) if isinstance(r, Excluded) else r
                             for r in positions]

            else:
                raise ValueError(f"tile {pos} has no usable color: {color!r}")

        minimum_counts = dict(self.minimum_counts)
        for c, num in seen.items():
            # NOTE keeps the smaller of the old and new counts, so a later
            # guess showing fewer copies lowers the requirement.
            minimum_counts[c] = min(minimum_counts.get(c, num), num)

        self.positions = tuple(positions)
        self.minimum_counts = minimum_counts
