"""
launch.py - Tag Cloud Entry Point

Asks for an input file, a word count and an output file, then writes
the HTML tag cloud of the most frequent words.

Usage:
    python launch.py                            # Ask for everything
    python launch.py --input BeeMovie.txt       # Pre-answer a prompt
    python launch.py --html --input page.html   # Count visible page text
    python launch.py --config_file path         # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloud
from tagcloud.prompts import (
    Prompt, PromptCancelled, preset_answers,
    open_for_reading, open_for_writing, parse_word_count)


def close_input(file_in, logger):
    try:
        file_in.close()
    except OSError:
        logger.error("Error closing file input")


def main(config_file, input_path=None, count=None, output_path=None,
         html=False, read=input):
    """
    Run the interactive tag cloud session.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path, count, output_path: Optional pre-answers for the prompts
        html: Always extract visible page text from the input
        read: Console line reader

    Returns:
        Process exit status (1 when the console closed mid-session)
    """
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)

    logger = get_logger("TAGCLOUD", "TagCloud", config.log_dir)
    prompt_logger = get_logger("PROMPT", "Prompt", config.log_dir)

    print("Word Counter")
    print()

    try:
        file_in = Prompt(
            "File Input Name: \nexample: BeeMovie.txt ",
            open_for_reading(config.encoding, config.decode_errors),
            preset_answers(input_path, read), prompt_logger,
            "input file name").run()
    except PromptCancelled as err:
        logger.error(f"{err}. Exiting.")
        return 1

    try:
        number = Prompt(
            "Number of words to be included: ", parse_word_count,
            preset_answers(count, read), prompt_logger,
            "number of words").run()
        file_out = Prompt(
            "File Output Name: ", open_for_writing(config.encoding),
            preset_answers(output_path, read), prompt_logger,
            "output file name").run()
    except PromptCancelled as err:
        logger.error(f"{err}. Exiting.")
        close_input(file_in, logger)
        return 1

    try:
        TagCloud(config, logger).build(
            file_in, file_in.name, number, file_out,
            html=config.wants_html(html))
    finally:
        file_out.close()
        close_input(file_in, logger)
    return 0


def cli():
    parser = ArgumentParser(description="Build an HTML tag cloud of a text file")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input", type=str, default=None,
                        help="Input file (skips the first prompt when valid)")
    parser.add_argument("--count", type=str, default=None,
                        help="Number of words (skips the second prompt when valid)")
    parser.add_argument("--output", type=str, default=None,
                        help="Output file (skips the last prompt when valid)")
    parser.add_argument("--html", action="store_true", default=False,
                        help="Count the visible text of an HTML input page")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.count, args.output, args.html))


if __name__ == "__main__":
    cli()
