"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Make the package importable without an editable install
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import pytest


HEADER_ROW = (
    "<tr><th>Program</th><th>Bachelor's</th><th>Master's</th>"
    "<th>Doctorate</th><th>Certificate</th><th>Minor</th></tr>"
)


def build_page(rows, table_class="order-table"):
    """Wrap row markup in a programs page with a header row."""
    body = HEADER_ROW + "".join(rows)
    return (
        "<html><body>"
        f"<table class=\"{table_class}\">{body}</table>"
        "<table class=\"order-table\"><tr><th>Other campus</th></tr></table>"
        "</body></html>"
    )


@pytest.fixture
def programs_page():
    """A programs table with a split program, a blank section row and a td-only title."""
    return build_page([
        "<tr><th>Computer Science\nB.S. and M.S.</th><td>CS</td><td></td><td></td><td></td><td>Minor</td></tr>",
        "<tr><th>Computer Science</th><td></td><td>CS</td><td>CS</td><td>Data Science\n  Cybersecurity  </td><td></td></tr>",
        "<tr><th>Engineering</th><td></td><td></td><td></td><td></td><td></td></tr>",
        "<tr><td>Ancient Studies</td><td>Ancient Studies</td><td></td><td></td><td></td><td>Minor</td></tr>",
    ])


@pytest.fixture
def output_dir(tmp_path):
    """An existing snapshot directory."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir
