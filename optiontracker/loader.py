"""Load trade snapshots from JSON files."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from optiontracker.models import Trade

logger = logging.getLogger(__name__)

_TRADE_LIST = TypeAdapter(list[Trade])


def parse_trades(payload) -> list[Trade]:
    """Validate decoded JSON into trades.

    Args:
        payload: Either a list of trade objects or a mapping with a
            ``trades`` list.

    Raises:
        ValueError: If the payload has the wrong shape or a trade is invalid.
    """
    if isinstance(payload, dict):
        payload = payload.get("trades")
    if not isinstance(payload, list):
        raise ValueError("Expected a list of trades or an object with a 'trades' list")
    return _TRADE_LIST.validate_python(payload)


def load_trades(path: Path) -> list[Trade]:
    """Read and validate a trade snapshot file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or holds invalid trades.
    """
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    trades = parse_trades(payload)
    logger.debug("Loaded %d trades from %s", len(trades), path)
    return trades
