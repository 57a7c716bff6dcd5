from collections import Counter


def letter_frequencies(words):
    """Letter frequencies over ``words``, normalized by the total letter count."""
    counts = Counter(''.join(words))
    total = sum(counts.values())
    return {c: n / total for c, n in counts.items()}
