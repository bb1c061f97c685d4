"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (capacity, rates, field limits, prompt texts).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

from decimal import Decimal

# Default bound on the number of boats held in memory (None in BoatRepo = unbounded)
MAX_BOATS = 120

MAX_NAME_LENGTH = 127
TRAILOR_TAG_MAX = 15

# Monthly charge per foot of boat length, keyed by storage type token.
# "invalid" is intentionally absent: those boats are not billed.
MONTHLY_RATES = {
    "slip": Decimal("12.50"),
    "land": Decimal("14.00"),
    "trailor": Decimal("25.00"),
    "storage": Decimal("11.20"),
}

## Data file
FIELD_SEPARATOR = ","
FIELD_COUNT = 5
DATA_ENCODING = "utf-8"
# fallback when a data file is not valid UTF-8; decodes any byte
LEGACY_ENCODING = "latin-1"

## Shell texts
WELCOME_BANNER = "Welcome to the Boat Management System\n-------------------------------------"
MENU_PROMPT = "\n(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
ADD_PROMPT = "Please enter the boat data in CSV format                 : "
NAME_PROMPT = "Please enter the boat name                               : "
AMOUNT_PROMPT = "Please enter the amount to be paid                       : "
EXIT_MESSAGE = "\nExiting the Boat Management System"

USAGE = "Usage: marina <BoatData.csv>"
