"""
HTML helpers for reading the degree programs table
"""

import logging
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

PARSER = 'lxml'


def make_soup(html_content):
    """Parse raw markup into a BeautifulSoup document."""
    return BeautifulSoup(html_content, PARSER)


def find_table(soup, selector):
    """
    Return the first element matching a CSS selector

    Args:
        soup (BeautifulSoup): Parsed document
        selector (str): CSS selector, e.g. '.order-table'

    Returns:
        Tag: The matched element

    Raises:
        ValueError: If nothing on the page matches the selector
    """
    table = soup.select_one(selector)
    if table is None:
        logger.error(f"No element matches selector {selector!r}")
        raise ValueError(f"Table not found for selector {selector!r}")
    return table


def element_text(element):
    """
    Text content of an element, whitespace and line breaks kept as-is

    Cells hold subtitles and certificate variants on separate lines, so
    whitespace is not collapsed.
    """
    return element.get_text()


def first_line(text):
    """Everything before the first line break."""
    return text.split('\n', 1)[0]
