from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


def parse_csv_line(line: str) -> List[str]:
    """Split one line on commas that sit outside double quotes.

    Quote characters toggle the quoted state and are dropped; there is no
    escaping, so ``""`` never yields a literal quote.
    """
    values = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def parse_csv(csv_text: str) -> List[Dict[str, str]]:
    """Turn CSV text into one header -> value dict per line.

    Lenient: short rows get "" for the missing trailing fields, extra fields
    are ignored and nothing here ever raises on bad input.
    """
    lines = csv_text.strip().split("\n")
    if not lines[0].strip():
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    rows = []

    for line in lines[1:]:
        values = parse_csv_line(line)
        row = {}
        for index, header in enumerate(headers):
            row[header] = values[index].strip() if index < len(values) else ""
        rows.append(row)

    logger.debug(f"Parsed {len(rows)} rows with headers {headers}")
    return rows
