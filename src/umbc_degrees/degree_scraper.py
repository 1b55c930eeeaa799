import requests
import os
from datetime import date

from umbc_degrees import config
from umbc_degrees.offerings import read_row, reconcile_rows
from umbc_degrees.utils.logger_config import setup_logger
from umbc_degrees.utils.html_utils import make_soup, find_table
from umbc_degrees.utils.file_utils import snapshot_filename, write_json

# Get logger from configuration
logger = setup_logger("UMBCDegreeScraper")


class UMBCDegreeScraper:
    """
    Scraper for the UMBC degree programs table.

    Fetches the programs page, reconciles the Main Campus table into one
    offerings record per program and writes a dated JSON snapshot.
    """
    def __init__(self, degrees_url=config.DEGREES_URL, table_selector=config.TABLE_SELECTOR,
                 offering_columns=config.OFFERING_COLUMNS, output_dir=config.OUTPUT_DIR,
                 show_progress=False):
        self.degrees_url = degrees_url
        self.table_selector = table_selector
        self.offering_columns = tuple(offering_columns)
        self.output_dir = output_dir
        self.show_progress = show_progress
        self.session = requests.Session()
        self.headers = {
            "User-Agent": config.USER_AGENT
        }
        self.offerings = {}

    def get_page(self, url):
        """Get page content from URL"""
        try:
            response = self.session.get(url, headers=self.headers)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching page {url}: {str(e)}")
            raise
        logger.info(f"Fetched {url} ({len(response.text)} characters)")
        return response.text

    def extract_rows(self, html_content):
        """
        Return the programs table's <tr> elements without the header row

        Raises:
            ValueError: If the table is missing or has no rows after the header
        """
        soup = make_soup(html_content)
        table = find_table(soup, self.table_selector)

        rows = table.find_all('tr')[1:]
        if not rows:
            raise ValueError(f"Table {self.table_selector!r} has no program rows")

        logger.info(f"Found {len(rows)} rows in {self.table_selector!r}")
        return rows

    def parse_offerings(self, html_content):
        """Reconcile the programs table in html_content into title -> record."""
        rows = (read_row(row) for row in self.extract_rows(html_content))
        self.offerings = reconcile_rows(rows, self.offering_columns, show_progress=self.show_progress)
        logger.info(f"Reconciled {len(self.offerings)} programs")
        return self.offerings

    def save_snapshot(self, offerings=None, day=None):
        """
        Write the offerings to <output_dir>/<YYYY-M-D>.json

        Args:
            offerings (dict, optional): Defaults to the last parsed offerings
            day (date, optional): Snapshot date, defaults to today

        Returns:
            str: Path of the written file
        """
        if offerings is None:
            offerings = self.offerings
        day = day or date.today()

        filename = os.path.join(self.output_dir, snapshot_filename(day))
        write_json(filename, offerings)
        logger.info(f"Data saved to {filename}")

        return filename

    def run(self, day=None):
        """Fetch, parse and save; returns the snapshot path."""
        html_content = self.get_page(self.degrees_url)
        offerings = self.parse_offerings(html_content)
        return self.save_snapshot(offerings, day)


def main():
    scraper = UMBCDegreeScraper()
    output_file = scraper.run()
    logger.info(f"Scraping completed. Data saved to {output_file}")


if __name__ == "__main__":
    main()
