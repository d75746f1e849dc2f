"""
frequency.py - Word Frequency Tabulation

Counts lower-cased words line by line. A word broken across a line
break is counted as two separate words.
"""

from tagcloud.tokenizer import tokenize, is_separator_run


def compute_word_frequencies(lines, separators, logger):
    """
    Build a word -> count map from an iterable of lines.

    Args:
        lines: Any iterable of strings (an open text file works)
        separators: Set of separator characters
        logger: Receives read failures

    Returns:
        Dict mapping each word to its number of occurrences

    A read failure while iterating is logged and treated as the end of
    the input, so whatever was counted so far is returned.

    Runtime Complexity: O(N) where N is the total number of characters.
    """
    frequencies = {}
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as err:
            logger.error(f"Error reading from input file: {err}")
            break

        for token in tokenize(line.lower(), separators):
            if is_separator_run(token, separators):
                continue
            if token in frequencies:
                frequencies[token] += 1
            else:
                frequencies[token] = 1
    return frequencies
