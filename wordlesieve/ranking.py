from itertools import groupby
import logging

import numpy as np

logger = logging.getLogger(__name__)


def score_words(words, knowledge, letter_freq):
    '''
    Sum the dictionary frequency of every letter occurrence in each word.
    Letters the knowledge already covers add nothing, as they would not tell
    us anything new.
    '''
    weights = {}
    for word in words:
        for c in word:
            if c not in weights:
                weights[c] = 0.0 if knowledge.is_letter_known(c) else letter_freq.get(c, 0.0)

    scores = np.fromiter((sum(weights[c] for c in word) for word in words),
                         dtype=float, count=len(words))
    if np.isnan(scores).any():
        raise ValueError("letter frequencies must not be NaN")
    return scores


def best_candidates(candidates, knowledge, letter_freq, count=10):
    """Order candidates by how much a guess of them is likely to reveal.

    Words with more distinct letters come first. Within a group sharing the
    same number of distinct letters, words are ordered by ``score_words``,
    highest first, keeping the incoming order on ties. Groups are added whole
    until at least ``count`` words are collected, so more than ``count`` may
    be returned. An empty list means nothing fits.
    """
    by_letters = sorted(((word, len(set(word))) for word in candidates),
                        key=lambda item: item[1], reverse=True)

    results = []
    for distinct, group in groupby(by_letters, key=lambda item: item[1]):
        if len(results) >= count:
            break
        tier = [word for word, _ in group]
        if len(tier) > 1:
            scores = score_words(tier, knowledge, letter_freq)
            order = np.argsort(-scores, kind='stable')
            tier = [tier[i] for i in order]
        logger.debug(f"{len(tier)} words with {distinct} distinct letters")
        results.extend(tier)

    return results
