"""
config.py - Typed view over config.ini

Every option has a default so a missing file or section still yields
a usable configuration.
"""

DEFAULT_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css")

STRIP_HTML_MODES = {"yes", "no"}


class Config(object):

    def __init__(self, config):
        """
        Args:
            config: A ConfigParser that has already read config.ini
        """
        self.stylesheet = config.get(
            "TAG CLOUD", "STYLESHEET", fallback=DEFAULT_STYLESHEET).strip()
        self.class_prefix = config.get(
            "TAG CLOUD", "CLASSPREFIX", fallback="f").strip()
        self.strip_html = config.get(
            "TAG CLOUD", "STRIPHTML", fallback="no").strip().lower()
        if self.strip_html not in STRIP_HTML_MODES:
            raise ValueError(
                f"STRIPHTML must be one of {sorted(STRIP_HTML_MODES)}, "
                f"got {self.strip_html!r}")

        self.encoding = config.get(
            "LOCAL PROPERTIES", "ENCODING", fallback="utf-8").strip()
        self.decode_errors = config.get(
            "LOCAL PROPERTIES", "DECODEERRORS", fallback="replace").strip()
        self.log_dir = config.get(
            "LOCAL PROPERTIES", "LOGDIR", fallback="Logs").strip()

    def wants_html(self, force=False):
        """Whether the input should go through page text extraction first."""
        return force or self.strip_html == "yes"
