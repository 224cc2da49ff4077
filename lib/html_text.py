# =============================================================================
# lib/html_text.py - Rich Text to Plain Text
# =============================================================================
# Contract content arrives as HTML from the rich text editor. Validation
# needs to know whether there is any visible text, and the PDF renderer
# needs the text split into paragraphs.
# =============================================================================

from html.parser import HTMLParser

# Tags that end a line of text
_BLOCK_TAGS = {
    "p", "div", "br", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6",
    "blockquote", "pre", "tr", "table", "section", "article", "hr",
}
_SKIP_TAGS = {"script", "style", "head", "title"}


class _TextExtractor(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in _SKIP_TAGS:
            self._skip_depth += 1
        elif tag in _BLOCK_TAGS:
            self.parts.append("\n")
            if tag == "li":
                self.parts.append("• ")

    def handle_endtag(self, tag):
        if tag in _SKIP_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in _BLOCK_TAGS:
            self.parts.append("\n")

    def handle_startendtag(self, tag, attrs):
        if tag in ("br", "hr"):
            self.parts.append("\n")

    def handle_data(self, data):
        if not self._skip_depth:
            self.parts.append(data)


def html_to_paragraphs(content: str) -> list[str]:
    """
    Split HTML (or plain text) into non-empty paragraphs.

    Plain text with newlines passes through unchanged apart from
    whitespace trimming, so AI/template output renders the same way
    as editor HTML.

    Example:
        html_to_paragraphs("<h1>TITLE</h1><p>Body &amp; more</p>")
        -> ["TITLE", "Body & more"]
    """
    parser = _TextExtractor()
    parser.feed(content)
    parser.close()

    text = "".join(parser.parts).replace("\xa0", " ")
    paragraphs = []
    for line in text.splitlines():
        line = " ".join(line.split())
        if line and line != "•":
            paragraphs.append(line)
    return paragraphs


def has_visible_text(content: str) -> bool:
    """True if the HTML renders at least one non-whitespace character."""
    return bool(html_to_paragraphs(content))
