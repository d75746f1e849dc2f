"""
extract.py - Visible Text Extraction for HTML Inputs

Only used when asked for (--html or STRIPHTML = yes). By default an
HTML file is counted line by line like any other text file.
"""

import re

from bs4 import BeautifulSoup


# never rendered as text
HIDDEN_TAGS = ["head", "script", "style", "noscript", "template"]

# page chrome around the content
CHROME_TAGS = ["nav", "header", "footer", "aside"]


def extract_visible_text(markup):
    """Return the text of the page body with one text block per line."""
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup.find_all(HIDDEN_TAGS + CHROME_TAGS):
        # nested matches go with their parent
        if not tag.decomposed:
            tag.decompose()

    text = soup.get_text(separator="\n")
    return re.sub(r"[ \t]*\n\s*", "\n", text).strip()


def page_lines(stream, logger):
    """
    Read an HTML page from an open text stream and return its text lines.

    A read failure is logged and yields no lines.
    """
    try:
        markup = stream.read()
    except (OSError, UnicodeDecodeError) as err:
        logger.error(f"Error reading from input file: {err}")
        return []
    return extract_visible_text(markup).splitlines(keepends=True)
