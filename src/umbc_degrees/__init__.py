"""
Scrape the UMBC degree programs table into dated JSON snapshots
"""

__version__ = "0.1.0"
