import logging
import threading
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime

from ..analytics import (
    Analysis,
    InsufficientSampleSize,
    NormalizationOutcome,
    Outcome,
    compute,
    normalize,
)
from ..config import get_settings
from .buffer import PriceBuffer
from .models import PriceSample

logger = logging.getLogger(__name__)


class AnalyzerEngine:
    """
    Buffer + normalize + compute.

    Request handlers run in a worker thread pool, so every buffer
    mutation and every read-then-analyze sequence holds `_lock`.
    Network fetches happen outside the engine and never hold it.
    """

    def __init__(self, buffer_size: int = 10000):
        self._buffer = PriceBuffer(maxlen=buffer_size)
        self._lock = threading.RLock()
        self._stats = self._fresh_stats()

    @staticmethod
    def _fresh_stats() -> Dict[str, Any]:
        return {
            "samples_ingested": 0,
            "analyses_run": 0,
            "errors": 0,
            "start_time": datetime.now()
        }

    def ingest(self, symbol: str, samples: List[PriceSample], replace: bool = True) -> int:
        with self._lock:
            if replace:
                count = self._buffer.replace(symbol, samples)
            else:
                count = self._buffer.extend(symbol, samples)
            self._stats["samples_ingested"] += count
        logger.info("Stored %d samples for %s", count, symbol.upper())
        return count

    def ingest_and_analyze(
        self,
        symbol: str,
        samples: List[PriceSample],
        target: Optional[int] = None,
        strict: bool = False
    ) -> Analysis:
        """Store `samples` and analyze them without another writer in between"""
        with self._lock:
            self.ingest(symbol, samples)
            return self.analyze(symbol, target, strict=strict)

    def get_prices(self, symbol: str, limit: Optional[int] = None) -> List[float]:
        with self._lock:
            return self._buffer.get_prices(symbol, limit)

    def get_symbols(self) -> List[str]:
        with self._lock:
            return sorted(self._buffer.symbols())

    def analyze(self, symbol: str, target: Optional[int] = None, strict: bool = False) -> Analysis:
        with self._lock:
            return self.analyze_prices(self._buffer.get_prices(symbol), target, strict=strict)

    def analyze_prices(
        self,
        prices: Sequence[float],
        target: Optional[int] = None,
        strict: bool = False
    ) -> Analysis:
        """
        Normalize and compute. A run only counts as successful when the
        full result, sample measures included, can be produced.
        """
        try:
            outcome = normalize(prices, target if target is not None else max(len(prices), 1))
            self._log_outcome(outcome)
            statistics = compute(outcome.series, strict=strict)
            if statistics.count < 2:
                raise InsufficientSampleSize(statistics.count)
        except Exception:
            with self._lock:
                self._stats["errors"] += 1
            raise
        with self._lock:
            self._stats["analyses_run"] += 1
        return Analysis(normalization=outcome, statistics=statistics)

    def clear(self, symbol: Optional[str] = None) -> None:
        with self._lock:
            self._buffer.clear(symbol)
            if not symbol:
                self._stats = self._fresh_stats()

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            uptime = (datetime.now() - self._stats["start_time"]).total_seconds()
            return {
                **self._stats,
                "uptime_seconds": uptime,
                "buffer": self._buffer.stats(),
                "symbols": self.get_symbols(),
            }

    def _log_outcome(self, outcome: NormalizationOutcome) -> None:
        if outcome.outcome is Outcome.TRIMMED:
            logger.info(
                "Trimmed series to %d samples (dropped %d oldest)",
                outcome.final_count, outcome.dropped
            )
        elif outcome.outcome is Outcome.DEFICIENT:
            logger.warning(
                "Insufficient samples: %d of %d expected",
                outcome.final_count, outcome.target
            )
        else:
            logger.info("Series has exactly %d samples", outcome.final_count)


_engine: Optional[AnalyzerEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> AnalyzerEngine:
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = AnalyzerEngine(buffer_size=get_settings().buffer_size)
    return _engine
