"""
Reconcile degree programs table rows into per-program offering records.

The programs table is irregular: a program can span several rows, cells are
left blank when an earlier row already filled them, and the certificate
column lists variants one per line. The functions here turn the rows into::

    {
        "Computer Science": {
            "Bachelor's": "CS",
            "Master's": False,
            "Doctorate": False,
            "Certificate": "Data Science, Cybersecurity",
            "Minor": True,
        },
    }

``fold_row`` works on plain strings so the carry-forward rules can be
exercised without any HTML.
"""

import logging
from tqdm import tqdm

from umbc_degrees.config import OFFERING_COLUMNS, MINOR_LABEL, CERTIFICATE_LABEL
from umbc_degrees.utils.html_utils import element_text, first_line

logger = logging.getLogger(__name__)


def normalize_certificate(value):
    """Join certificate variants listed on separate lines with ', '."""
    return ', '.join(part.strip() for part in value.split('\n'))


def read_row(row):
    """
    Read a table row into its program title and data cell texts

    The title comes from the row's <th>, or its first <td> when the row has
    no header cell. Only the first line is kept; the rest is a subtitle.

    Args:
        row (Tag): A <tr> element

    Returns:
        tuple: (title, list of cell texts in column order)

    Raises:
        ValueError: If the row has neither a <th> nor a <td>
    """
    title_elem = row.find('th') or row.find('td')
    if title_elem is None:
        raise ValueError(f"Row has no title cell: {str(row)[:80]!r}")

    title = first_line(element_text(title_elem))
    cells = [element_text(td) for td in row.find_all('td') if td is not title_elem]
    return title, cells


def resolve_value(kind, text, prior_value, seen, minor_label=MINOR_LABEL,
                  certificate_label=CERTIFICATE_LABEL):
    """Value of one cell, given the previous value for the same program and kind."""
    if text:
        value = text
    elif seen:
        value = prior_value
    else:
        value = False

    if value == minor_label:
        value = True

    if kind == certificate_label and isinstance(value, str):
        value = normalize_certificate(value)

    return value


def fold_row(prior, cells, kinds=OFFERING_COLUMNS, minor_label=MINOR_LABEL,
             certificate_label=CERTIFICATE_LABEL):
    """
    Fold one row's cells into a program record

    Args:
        prior (dict or None): Record built from earlier rows with the same title
        cells (list): Cell texts, cells[i] belongs to kinds[i]
        kinds (tuple): Offering labels in column order

    Returns:
        dict: A new record with one value per kind. Non-empty cells win,
        empty cells keep the prior value (or False for a new program).
        Kinds without a column in this row keep the prior value or False.
    """
    if len(cells) > len(kinds):
        logger.warning(f"Row has {len(cells)} data cells but only {len(kinds)} offering columns; "
                       f"ignoring {cells[len(kinds):]!r}")

    seen = prior is not None
    prior = prior or {}

    record = {}
    for kind, text in zip(kinds, cells):
        record[kind] = resolve_value(kind, text, prior.get(kind, False), seen,
                                     minor_label, certificate_label)

    for kind in kinds[len(cells):]:
        record[kind] = prior.get(kind, False)

    return record


def is_blank_row(cells):
    """True when every data cell is empty text (section headings, spacers)."""
    return all(text == '' for text in cells)


def reconcile_rows(rows, kinds=OFFERING_COLUMNS, show_progress=False):
    """
    Build the offerings table from (title, cells) pairs

    Args:
        rows (iterable): (title, list of cell texts) pairs, header row excluded
        kinds (tuple): Offering labels in column order
        show_progress (bool): Show a tqdm progress bar

    Returns:
        dict: Program title -> record
    """
    offerings = {}

    for title, cells in tqdm(rows, desc="Reconciling rows", disable=not show_progress):
        if is_blank_row(cells):
            logger.debug(f"Skipping blank row {title!r}")
            continue

        if title in offerings:
            logger.debug(f"Merging repeated row for {title!r}")

        offerings[title] = fold_row(offerings.get(title), cells, kinds)

    return offerings
