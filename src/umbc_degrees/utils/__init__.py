"""
Utility modules for the UMBC degree offerings scraper
"""

from .logger_config import setup_logger
from .file_utils import snapshot_filename, write_json
from .html_utils import make_soup, find_table, element_text, first_line

__all__ = [
    'setup_logger',
    'snapshot_filename',
    'write_json',
    'make_soup',
    'find_table',
    'element_text',
    'first_line',
]
