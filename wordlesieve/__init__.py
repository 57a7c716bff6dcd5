# wordlesieve/__init__.py
"""
wordlesieve: narrows a word list from Wordle-style feedback and ranks the
next guesses.
"""

from .knowledge import Knowledge, Fixed, Excluded, FeedbackConflict
from .wordle_game import (Color, Tile, exact, somewhere, absent, evaluate,
                          parse_tiles, format_tiles, FeedbackParseError,
                          WordleGame)
from .ranking import best_candidates
from .settings import Settings
from .solver import (GuessManager, SelfPlayReport, solve_for, check_all_words,
                     format_trial)
from .lazy_handler import LazyRotatingFileHandler, setup_logger

__version__ = "0.1.0"

__all__ = [
    "Knowledge",
    "Fixed",
    "Excluded",
    "FeedbackConflict",
    "Color",
    "Tile",
    "exact",
    "somewhere",
    "absent",
    "evaluate",
    "parse_tiles",
    "format_tiles",
    "FeedbackParseError",
    "WordleGame",
    "best_candidates",
    "Settings",
    "GuessManager",
    "SelfPlayReport",
    "solve_for",
    "check_all_words",
    "format_trial",
    "LazyRotatingFileHandler",
    "setup_logger",
]
