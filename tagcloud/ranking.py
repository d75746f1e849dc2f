"""
ranking.py - Top-N Word Selection

Picks the most frequent words (ties broken alphabetically) and keeps
the count range of that subset for font scaling.
"""


def by_frequency(item):
    """Sort key: count descending, then word ascending."""
    word, count = item
    return (-count, word)


def by_word(item):
    return item[0]


class Selection(object):
    """
    The words chosen for the cloud, in display (alphabetical) order.

    Attributes:
        entries: List of (word, count) tuples sorted by word
        requested: Number of words the user asked for
        min_count: Count of the least frequent selected word (0 if none)
        max_count: Count of the most frequent selected word (0 if none)
    """

    def __init__(self, entries, requested, min_count, max_count):
        self.entries = entries
        self.requested = requested
        self.min_count = min_count
        self.max_count = max_count

    def __len__(self):
        return len(self.entries)

    @property
    def clamped(self):
        """True when fewer words were available than requested."""
        return len(self.entries) < self.requested


def select_top_words(frequencies, requested):
    """
    Select the `requested` most frequent words.

    Args:
        frequencies: Dict mapping word -> count
        requested: Positive number of words wanted

    Returns:
        Selection with at most `requested` entries

    Runtime Complexity: O(n log n) where n is the number of distinct words.
    """
    ranked = sorted(frequencies.items(), key=by_frequency)
    top = ranked[:requested]

    max_count = top[0][1] if top else 0
    min_count = top[-1][1] if top else 0

    return Selection(sorted(top, key=by_word), requested, min_count, max_count)
