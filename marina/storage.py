"""
Design (storage.py)
- Purpose: Load and save the boat inventory to/from disk (flat comma-delimited text, one
           boat per line: name,length,type,location,amountOwed).
- Inputs: Path of the data file (from the command line), BoatRepo.
- Outputs: LoadReport on load; None on save.
- Side effects: Reads/writes file. A missing file on load leaves the repo untouched (logged);
                an unwritable file on save raises StorageError.
- Thread-safety: Call from main thread only (startup and exit).
"""

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .config import DATA_ENCODING, FIELD_COUNT, FIELD_SEPARATOR, LEGACY_ENCODING, MAX_NAME_LENGTH
from .errors import BoatParseError, StorageError
from .logging import get_logger
from .models import Boat, StorageType, parse_location
from .repository import BoatRepo
from .utils import format_length, format_money, location_token, parse_decimal, to_cents

logger = get_logger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing one line: exactly one of boat / error is set."""
    line: str
    line_number: int | None = None
    boat: Boat | None = None
    error: BoatParseError | None = None

    @property
    def ok(self) -> bool:
        return self.boat is not None


@dataclass
class LoadReport:
    loaded: int = 0
    errors: List[BoatParseError] = field(default_factory=list)
    dropped_for_capacity: int = 0
    file_found: bool = True


def parse_boat_line(line: str, line_number: int | None = None) -> ParseResult:
    """
    Purpose: Turn one data line (or one CSV entry typed at the prompt) into a Boat.
    Inputs: raw line (trailing newline allowed), optional 1-based line number for messages.
    Outputs: ParseResult with either .boat or .error.
    Notes: An unrecognized storage type is not an error; the boat is kept as INVALID with
           no location, and a warning is logged because it will not be billed.
    """
    text = line.rstrip("\r\n")

    def fail(reason: str) -> ParseResult:
        return ParseResult(text, line_number, error=BoatParseError(reason, text, line_number))

    try:
        row = next(csv.reader([text], delimiter=FIELD_SEPARATOR), [])
    except csv.Error as exc:
        return fail(str(exc))
    fields = [f.strip() for f in row]
    if len(fields) != FIELD_COUNT:
        return fail(f"expected {FIELD_COUNT} fields, got {len(fields)}")
    name, length_raw, type_raw, location_raw, owed_raw = fields

    if not name:
        return fail("missing name")
    if len(name) > MAX_NAME_LENGTH:
        return fail(f"name longer than {MAX_NAME_LENGTH} characters")

    try:
        length = parse_decimal(length_raw)
        amount_owed = to_cents(parse_decimal(owed_raw))
    except ValueError as exc:
        return fail(str(exc))

    storage_type = StorageType.parse(type_raw)
    if storage_type is StorageType.INVALID:
        logger.warning(
            "Unrecognized storage type %r for boat %r; it will not be billed", type_raw, name
        )

    try:
        location = parse_location(storage_type, location_raw)
        boat = Boat(
            name=name,
            length=length,
            storage_type=storage_type,
            location=location,
            amount_owed=amount_owed,
        )
    except ValueError as exc:
        return fail(str(exc))

    return ParseResult(text, line_number, boat=boat)


def boat_fields(boat: Boat) -> List[str]:
    return [
        boat.name,
        format_length(boat.length),
        boat.storage_type.token,
        location_token(boat.location),
        format_money(boat.amount_owed),
    ]


def format_boat_line(boat: Boat) -> str:
    """One data-file line, without the newline."""
    buf = io.StringIO()
    csv.writer(buf, delimiter=FIELD_SEPARATOR, lineterminator="").writerow(boat_fields(boat))
    return buf.getvalue()


def _read_lines(path: Path) -> List[str]:
    try:
        with open(path, "r", encoding=DATA_ENCODING) as f:
            return f.readlines()
    except UnicodeDecodeError as exc:
        logger.warning(
            "Data file %s is not valid %s (%s); reading it as %s",
            path, DATA_ENCODING, exc.reason, LEGACY_ENCODING,
        )
    with open(path, "r", encoding=LEGACY_ENCODING) as f:
        return f.readlines()


def load_boats(path: Path, repo: BoatRepo) -> LoadReport:
    """
    Load boats from the data file into repo. Bad lines are skipped with a warning; lines
    beyond the repo capacity are dropped with a warning. A missing/unreadable file leaves
    the repo as it was.
    """
    report = LoadReport()
    try:
        lines = _read_lines(path)
    except FileNotFoundError:
        logger.info("Data file %s not found; starting with an empty inventory", path)
        report.file_found = False
        return report
    except OSError as exc:
        logger.warning("Could not read data file %s: %s", path, exc)
        report.file_found = False
        return report

    parsed: List[Boat] = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        result = parse_boat_line(line, number)
        if result.ok:
            parsed.append(result.boat)
        else:
            logger.warning("Skipping %s", result.error)
            report.errors.append(result.error)

    if repo.capacity is not None:
        room = max(repo.capacity - len(repo), 0)
        if len(parsed) > room:
            report.dropped_for_capacity = len(parsed) - room
            logger.warning(
                "Boat limit of %d reached; %d record(s) from %s not loaded",
                repo.capacity, report.dropped_for_capacity, path,
            )
            parsed = parsed[:room]

    report.loaded = repo.extend(parsed)
    logger.debug("Loaded %d boat(s) from %s", report.loaded, path)
    return report


def save_boats(repo: BoatRepo, path: Path) -> None:
    """
    Save the inventory to the data file, overwriting it.
    Raises StorageError if the file cannot be written; the repo is never touched.
    """
    rows = [boat_fields(b) for b in repo.boats()]
    try:
        with open(path, "w", encoding=DATA_ENCODING, newline="") as f:
            csv.writer(f, delimiter=FIELD_SEPARATOR, lineterminator="\n").writerows(rows)
    except OSError as exc:
        logger.error("Error saving file %s: %s", path, exc)
        raise StorageError(f"Error saving file {path}: {exc}") from exc
    logger.info("Saved %d boat(s) to %s", len(repo), path)
