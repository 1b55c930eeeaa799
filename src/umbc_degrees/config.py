# Scraping targets and table layout for the UMBC degree programs page.
#
# OFFERING_COLUMNS is positional: the label at index i describes the i-th
# data column (after the title column) of the programs table. If the page
# reorders its columns, reorder this tuple.

DEGREES_URL = "https://www.umbc.edu/degrees/"

# First match is the Main Campus programs table.
TABLE_SELECTOR = ".order-table"

BACHELORS_LABEL = "Bachelor's"
MASTERS_LABEL = "Master's"
DOCTORATE_LABEL = "Doctorate"
CERTIFICATE_LABEL = "Certificate"
MINOR_LABEL = "Minor"

OFFERING_COLUMNS = (
    BACHELORS_LABEL,
    MASTERS_LABEL,
    DOCTORATE_LABEL,
    CERTIFICATE_LABEL,
    MINOR_LABEL,
)

# Relative to the working directory; must already exist.
OUTPUT_DIR = "data"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
