"""
render.py - HTML Tag Cloud Renderer

Words are written into the page as-is; HTML special characters are not
escaped.
"""

MIN_FONT_CLASS = 11
MAX_FONT_CLASS = 48
FONT_RANGE = MAX_FONT_CLASS - MIN_FONT_CLASS


def format_class(count, min_count, max_count):
    """
    Map a count onto a font class between 11 and 48.

    Interpolates linearly between the smallest and largest count of the
    selected words and truncates. When every selected word has the same
    count there is nothing to interpolate and the class is 11.
    """
    if max_count == min_count:
        return MIN_FONT_CLASS
    return int((count - min_count) / (max_count - min_count) * FONT_RANGE
               + MIN_FONT_CLASS)


def render_span(word, count, font_class, class_prefix="f"):
    return (f"<span style=\"cursor:default\" class=\"{class_prefix}{font_class}\""
            f" title=\"count: {count}\">{word}</span>")


def render_page(selection, input_name, stylesheet, class_prefix="f"):
    """
    Render the full HTML document for a selection.

    Args:
        selection: Selection from ranking.select_top_words
        input_name: Input file name as shown in the title and heading
        stylesheet: URL of the external tag cloud stylesheet
        class_prefix: Prefix of the font class names

    Returns:
        The document as a string, one element per line
    """
    title = f"Top {len(selection)} words in {input_name}"
    lines = [
        "<html><head>",
        f"<title>{title}</title>",
        f"<link href=\"{stylesheet}\" rel=\"stylesheet\" type=\"text/css\">",
        "</head>",
        f"<body> <h2> {title}</h2>",
        "<hr> <div class=\"cdiv\"> <p class=\"cbox\">",
    ]
    for word, count in selection.entries:
        font_class = format_class(count, selection.min_count, selection.max_count)
        lines.append(render_span(word, count, font_class, class_prefix))
    lines.append("</p></div></body></html>")
    return "\n".join(lines) + "\n"


def write_page(stream, selection, input_name, stylesheet, class_prefix="f"):
    stream.write(render_page(selection, input_name, stylesheet, class_prefix))
