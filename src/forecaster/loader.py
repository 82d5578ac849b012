"""Load already-parsed candle history from a local JSON or CSV file.

Rows are validated with pydantic; the label may be given as ``date``,
``time`` or ``label``. Row order in the file is taken as chronological.
"""

import csv
import json
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from forecaster.exceptions import CandleFormatError
from forecaster.logging import get_logger
from forecaster.models import Candle

logger = get_logger(__name__)


class CandleRecord(BaseModel):
    """One OHLCV row as found in a candle file."""

    label: str = Field(validation_alias=AliasChoices("label", "date", "time"))
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def to_candle(self) -> Candle:
        return Candle(
            label=self.label,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            volume=self.volume,
        )


def parse_candles(rows: list[dict[str, Any]]) -> list[Candle]:
    """Validate raw row dicts into Candles.

    Raises:
        CandleFormatError: If any row is missing a field or holds a non-numeric price.
    """
    candles: list[Candle] = []
    for i, row in enumerate(rows):
        try:
            candles.append(CandleRecord.model_validate(row).to_candle())
        except ValidationError as exc:
            raise CandleFormatError(f"row {i}: {exc.errors()[0]['msg']}") from exc
    return candles


def load_candles(path: str | Path) -> list[Candle]:
    """Read a ``.json`` (list of objects) or ``.csv`` (header row) candle file.

    Args:
        path: File location.

    Returns:
        Candles in file order.

    Raises:
        CandleFormatError: On an unsupported extension, malformed JSON, bad
            JSON shape or bad row.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with path.open(encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as exc:
                raise CandleFormatError(f"{path}: invalid JSON ({exc.msg})") from exc
        if not isinstance(payload, list):
            raise CandleFormatError(f"{path}: expected a JSON list of candle objects")
        rows = payload
    elif suffix == ".csv":
        with path.open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
    else:
        raise CandleFormatError(f"{path}: unsupported candle file type '{suffix}'")

    candles = parse_candles(rows)
    logger.info("candles_loaded", path=str(path), count=len(candles))
    return candles
