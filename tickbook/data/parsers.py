"""
Delimited-text parsers for converting raw record lines to Record objects.

Line format (no header): timestamp, market, side, amount, price

    2020/03/17 17:01:24.884492,ETH/BTC,bid,0.02187308,7.44564869

All functions here are pure. Failures are reported by raising
MalformedRecordError; deciding what to do with a bad line is the loader's job.
"""

import math
from typing import Optional

from ..errors import MalformedRecordError
from ..utils.time import matches_format
from .models import Record, Side

FIELD_COUNT = 5

# Field positions in a record line
TIMESTAMP_FIELD = 0
MARKET_FIELD = 1
SIDE_FIELD = 2
AMOUNT_FIELD = 3
PRICE_FIELD = 4


def tokenize_line(line: str, delimiter: str = ",") -> list[str]:
    """
    Split a record line into raw field tokens.

    The trailing line terminator is removed first. Never raises; an empty
    line yields no tokens.

    Args:
        line: Raw line as read from the source
        delimiter: Single field separator character

    Returns:
        List of field tokens, possibly fewer than a full record needs
    """
    stripped = line.rstrip("\r\n")
    if not stripped:
        return []
    return stripped.split(delimiter)


def parse_side(token: str, strict: bool = True) -> Side:
    """
    Map a side token to Side.

    Args:
        token: Raw side token ("bid" or "ask")
        strict: Reject anything other than "bid"/"ask"; when False every
            token other than "bid" is taken as an ask

    Returns:
        Side.BUY for "bid", Side.SELL otherwise

    Raises:
        MalformedRecordError: If strict and the token is not recognised
    """
    if token == Side.BUY.token:
        return Side.BUY
    if token == Side.SELL.token or not strict:
        return Side.SELL
    raise MalformedRecordError(f"Unknown side token '{token}'", field="side")


def parse_number(text: str, field: str) -> float:
    """
    Convert a numeric field to float.

    Args:
        text: Raw field text
        field: Field name for error reporting

    Returns:
        Finite float value

    Raises:
        MalformedRecordError: If the text is not a number or is out of range
    """
    if "_" in text:
        raise MalformedRecordError(f"Invalid {field} '{text}'", field=field)

    try:
        value = float(text)
    except ValueError:
        raise MalformedRecordError(f"Invalid {field} '{text}'", field=field)

    if math.isnan(value):
        raise MalformedRecordError(f"Invalid {field} '{text}': not a number", field=field)
    if math.isinf(value):
        raise MalformedRecordError(f"{field.capitalize()} '{text}' out of range", field=field)

    return value


def parse_amount(text: str) -> float:
    """Parse the amount field."""
    return parse_number(text, "amount")


def parse_price(text: str) -> float:
    """Parse the price field."""
    return parse_number(text, "price")


def parse_record_line(line: str, *,
                      delimiter: str = ",",
                      strict_side: bool = True,
                      timestamp_format: Optional[str] = None) -> Record:
    """
    Parse one delimited line into a Record.

    Fields beyond the fifth are ignored.

    Args:
        line: Raw record line
        delimiter: Single field separator character
        strict_side: Reject unknown side tokens (see parse_side)
        timestamp_format: Optional strptime format the timestamp must match

    Returns:
        Parsed Record

    Raises:
        MalformedRecordError: If the line has fewer than 5 fields, an empty
            timestamp or market, an unknown side token (strict mode), a
            timestamp not matching timestamp_format, or a bad number
    """
    tokens = tokenize_line(line, delimiter)

    if len(tokens) < FIELD_COUNT:
        raise MalformedRecordError(
            f"Expected {FIELD_COUNT} fields, got {len(tokens)}",
            field="line",
        )

    timestamp = tokens[TIMESTAMP_FIELD]
    market = tokens[MARKET_FIELD]

    if not timestamp.strip():
        raise MalformedRecordError("Empty timestamp", field="timestamp")
    if not market.strip():
        raise MalformedRecordError("Empty market", field="market")

    if timestamp_format is not None and not matches_format(timestamp, timestamp_format):
        raise MalformedRecordError(
            f"Timestamp '{timestamp}' does not match format '{timestamp_format}'",
            field="timestamp",
        )

    side = parse_side(tokens[SIDE_FIELD], strict=strict_side)
    amount = parse_amount(tokens[AMOUNT_FIELD])
    price = parse_price(tokens[PRICE_FIELD])

    return Record(
        price=price,
        amount=amount,
        timestamp=timestamp,
        market=market,
        side=side,
    )
