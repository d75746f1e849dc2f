"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs one tag cloud build:
- Counts the words of the input (plain text, or the visible text of an
  HTML page)
- Selects the most frequent words
- Writes the HTML cloud to the output

Key role: High-level coordinator that ties tokenizer, ranking and
renderer together
"""

from utils import get_logger
from tagcloud.tokenizer import SEPARATORS
from tagcloud.frequency import compute_word_frequencies
from tagcloud.ranking import select_top_words
from tagcloud.render import write_page
from tagcloud.extract import page_lines


class TagCloud(object):
    """
    Builds a tag cloud page from one input file.

    The separator set is fixed for the lifetime of the object.
    """

    def __init__(self, config, logger=None, separators=SEPARATORS):
        """
        Args:
            config: Configuration object (stylesheet, class_prefix, ...)
            logger: Logger for progress and read failures
            separators: Set of word separator characters
        """
        self.config = config
        self.logger = logger or get_logger("TAGCLOUD", "TagCloud", config.log_dir)
        self.separators = separators

    def count_words(self, stream, html=False):
        """Tabulate word frequencies of an open input stream."""
        lines = page_lines(stream, self.logger) if html else stream
        frequencies = compute_word_frequencies(lines, self.separators, self.logger)
        self.logger.info(
            f"Counted {sum(frequencies.values())} words, "
            f"{len(frequencies)} distinct.")
        return frequencies

    def build(self, stream, input_name, requested, out, html=False):
        """
        Count, select and render in one go.

        Args:
            stream: Open input text stream
            input_name: Input file name shown in the page title
            requested: Number of words wanted in the cloud
            out: Open output text stream receiving the HTML page
            html: Extract the visible text of an HTML page before counting

        Returns:
            The Selection that was rendered
        """
        frequencies = self.count_words(stream, html)
        selection = select_top_words(frequencies, requested)

        if selection.clamped:
            available = len(selection)
            print(f"{requested} words were requested, but only {available} "
                  f"are available. Printing the {available} words with the "
                  f"highest count.")

        write_page(out, selection, input_name,
                   self.config.stylesheet, self.config.class_prefix)
        self.logger.info(
            f"Wrote {len(selection)} words to {getattr(out, 'name', 'output')}.")
        return selection
