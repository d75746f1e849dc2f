"""
tokenizer.py - Word / Separator Tokenizer

Splits a line into maximal runs of separator characters and maximal
runs of word characters. Concatenating the tokens of a line gives the
line back unchanged.
"""

# Fixed for the lifetime of the program; callers pass it in explicitly.
SEPARATORS = frozenset("\" \t\n\r,-.!?[]';:/()")


def next_word_or_separator(text, position, separators):
    """
    Return the word or separator run in text starting at position.

    Runtime Complexity: O(k)
    where k is the length of the returned token. Each character is
    checked against the separator set once.
    """
    assert 0 <= position < len(text), "Violation of: 0 <= position < |text|"

    is_sep = text[position] in separators
    end = position
    while end < len(text) and (text[end] in separators) == is_sep:
        end += 1
    return text[position:end]


def tokenize(line, separators):
    """
    Yield the tokens of line from left to right.

    Runtime Complexity: O(n) where n is the length of the line.
    """
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        yield token
        position += len(token)


def is_separator_run(token, separators):
    return token[0] in separators
