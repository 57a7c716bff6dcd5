import random
import logging
from enum import EnumMeta, IntEnum
from collections import Counter, namedtuple
from string import ascii_letters

logger = logging.getLogger(__name__)

# Notation markers, keyed by color name
_MARKERS = {'GREEN': '*', 'YELLOW': '?', 'BLACK': '!'}


class ColorMeta(EnumMeta):
    def __init__(cls, name, bases, classdict):
        super().__init__(name, bases, classdict)
        # Automatically initialize the lookup maps when the class is created
        cls._map = {name[0]: member for name, member in cls.__members__.items()}
        cls._marker_map = {_MARKERS[name]: member for name, member in cls.__members__.items()
                           if name in _MARKERS}
        cls._val_map = {member.value: member for member in cls.__members__.values()}


class Color(IntEnum, metaclass=ColorMeta):
    BLACK = 0
    YELLOW = 1
    GREEN = 2
    UNKNOWN = -1

    @staticmethod
    def map(c):
        return Color._map.get(c, Color.UNKNOWN)

    @staticmethod
    def from_marker(marker):
        return Color._marker_map.get(marker, Color.UNKNOWN)

    @staticmethod
    def from_value(color):
        return Color._val_map.get(color, Color.UNKNOWN)

    @property
    def marker(self):
        return _MARKERS.get(self.name, '')


class Tile(namedtuple('Tile', 'letter color')):
    """Feedback for one letter of a guess.

    GREEN is an exact match, YELLOW means the letter is somewhere else in the
    word, BLACK means it is absent (see ``Knowledge.absorb`` for how far an
    absence reaches).
    """
    __slots__ = ()

    def __str__(self):
        return self.color.marker + self.letter


def exact(letter):
    return Tile(letter, Color.GREEN)


def somewhere(letter):
    return Tile(letter, Color.YELLOW)


def absent(letter):
    return Tile(letter, Color.BLACK)


class FeedbackParseError(ValueError):
    pass


def evaluate(secret, guess):
    """Return the tiles a player sees after guessing ``guess`` against ``secret``.

    Greens are reserved first, counted over the whole word. Yellows for a
    letter are then handed out left to right until the letter's count in the
    secret is used up; any further copies come back gray.
    """
    tiles = []
    yellows = Counter()

    for g, s in zip(guess, secret):
        if g == s:
            tiles.append(exact(g))
        elif g in secret:
            total = secret.count(g)
            matched = sum(1 for a, b in zip(guess, secret) if a == b == g)
            if total > matched + yellows[g]:
                yellows[g] += 1
                tiles.append(somewhere(g))
            else:
                tiles.append(absent(g))
        else:
            tiles.append(absent(g))

    return tuple(tiles)


def parse_tiles(text, length=None):
    """Parse feedback such as ``'!t?h*o!r!n'`` into tiles.

    Every letter is prefixed with ``*`` (green), ``?`` (yellow) or ``!``
    (gray). Whitespace is ignored.
    """
    flag = None
    tiles = []
    for c in text:
        if c.isspace():
            continue
        if length is not None and len(tiles) == length:
            raise FeedbackParseError("too many letters in input")
        if flag is None:
            flag = c
            continue
        color = Color.from_marker(flag)
        if color == Color.UNKNOWN:
            raise FeedbackParseError(f"unknown annotation {flag!r}")
        if c not in ascii_letters:
            raise FeedbackParseError(f"expected a letter after {flag!r}, got {c!r}")
        tiles.append(Tile(c.lower(), color))
        flag = None

    if flag is not None:
        raise FeedbackParseError(f"unprocessed input {flag!r}")
    if length is not None and len(tiles) != length:
        raise FeedbackParseError(f"expected {length} letters, got {len(tiles)}")

    return tuple(tiles)


def format_tiles(tiles):
    return ''.join(map(str, tiles))


class WordleGame:
    def __init__(self, word_list, max_attempts=None, secret=None):
        self.words = tuple(word.lower() for word in word_list)
        self.word_set = set(self.words)
        self.max_attempts = max_attempts
        self.reset_game(secret)

    def guess(self, word):
        word = word.lower()
        if len(word) != len(self.secret_word):
            raise ValueError("Guess must be the same length as the secret word.")
        if word not in self.word_set:
            raise ValueError("Guess must be a valid word.")
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            raise ValueError("No attempts left.")

        self.attempts += 1
        self.guesses.append(word)
        feedback = evaluate(self.secret_word, word)
        self.feedback.append(feedback)
        logger.debug(f"guess {self.attempts}: {format_tiles(feedback)}")

        return word == self.secret_word, feedback

    def is_over(self):
        solved = bool(self.guesses) and self.guesses[-1] == self.secret_word
        out_of_attempts = self.max_attempts is not None and self.attempts >= self.max_attempts
        return solved or out_of_attempts

    def get_status(self):
        return {
            "attempts": self.attempts,
            "max_attempts": self.max_attempts,
            "guesses": list(self.guesses),
            "feedback": list(self.feedback),
            "secret_word": self.secret_word if self.is_over() else None
        }

    def reset_game(self, secret=None):
        if secret is None:
            if not self.words:
                raise ValueError("Cannot pick a secret from an empty word list.")
            secret = random.choice(self.words)
        self.secret_word = secret.lower()
        self.attempts = 0
        self.guesses = []
        self.feedback = []
