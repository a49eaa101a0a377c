"""
Helpers for the small HTML fragments carried by model records (license anchors
and descriptions).
"""

import re
from html.parser import HTMLParser

from bs4 import BeautifulSoup

# Elements that never take a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Unparsed text at the end of a fragment that starts like a tag
INCOMPLETE_TAG = re.compile(r"^<[A-Za-z/]")


class _TagBalanceParser(HTMLParser):
    """Tracks open elements and records every nesting problem it sees."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.stack: list[str] = []
        self.problems: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag not in VOID_ELEMENTS:
            self.stack.append(tag)

    def handle_startendtag(self, tag, attrs):
        pass

    def handle_endtag(self, tag):
        if tag in VOID_ELEMENTS:
            return
        if not self.stack:
            self.problems.append(f"unexpected closing tag </{tag}>")
        elif self.stack[-1] == tag:
            self.stack.pop()
        elif tag in self.stack:
            # Everything opened after `tag` was left unclosed
            while self.stack[-1] != tag:
                self.problems.append(
                    f"<{self.stack.pop()}> closed implicitly by </{tag}>"
                )
            self.stack.pop()
        else:
            self.problems.append(
                f"closing tag </{tag}> does not match open <{self.stack[-1]}>"
            )


def find_unbalanced_tags(fragment: str) -> list[str]:
    """
    Checks that every opening tag in an HTML fragment has a matching closing tag.

    Returns:
        A list of human-readable problems. An empty list means the markup is
        balanced.
    """
    parser = _TagBalanceParser()
    parser.feed(fragment)
    # feed() keeps an unfinished trailing tag buffered; close() would flush it
    # as plain text
    leftover = parser.rawdata
    if INCOMPLETE_TAG.match(leftover):
        parser.problems.append(f"incomplete tag '{leftover.split()[0]}'")
    else:
        parser.close()
    problems = list(parser.problems)
    problems.extend(f"unclosed tag <{tag}>" for tag in reversed(parser.stack))
    return problems


def is_balanced(fragment: str) -> bool:
    """Returns True if the fragment's tags are all properly closed and nested."""
    return not find_unbalanced_tags(fragment)


def extract_links(fragment: str) -> list[tuple[str, str]]:
    """Returns (text, href) pairs for every anchor in the fragment."""
    soup = BeautifulSoup(fragment, "html.parser")
    return [
        (" ".join(a.get_text().split()), a["href"])
        for a in soup.select("a[href]")
    ]


def to_plain_text(fragment: str) -> str:
    """Strips markup and collapses whitespace, decoding entities like &copy;."""
    soup = BeautifulSoup(fragment, "html.parser")
    return " ".join(soup.get_text().split())
