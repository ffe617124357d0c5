"""Run logger for recording client calls and their stages to JSON files."""

import dataclasses
import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class StageRecord(BaseModel):
    """Record of a single stage within a client call."""

    stage: str
    input: Any = None
    output: Any = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of one client call (latest, search or lookup)."""

    run_id: str
    operation: str
    params: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    final_article_count: int = 0
    used_fallback: bool = False


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, lists, tuples, dicts, and primitives.
    """
    if obj is None:
        return None
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Writes a JSON log file per client call.

    Each call gets its own :class:`RunRecord` from :meth:`start_run`, which the
    caller passes back to :meth:`log_stage` and :meth:`finish_run`. Concurrent
    calls therefore never share a record.

    When ``enabled=False``, ``start_run`` returns None and the other methods
    are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, operation: str, params: dict[str, Any]) -> RunRecord | None:
        """Create a record for a new client call.

        Args:
            operation: Client operation (e.g. "latest", "search", "lookup").
            params: Call parameters. Must not contain credentials.
        """
        if not self._enabled:
            return None

        return RunRecord(
            run_id=str(uuid.uuid4()),
            operation=operation,
            params=_serialize(params),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
        *,
        error: BaseException | None = None,
    ) -> None:
        """Append a stage record to a call record.

        Args:
            record: Record returned by :meth:`start_run`.
            stage: Stage name (e.g. "fetch", "unwrap", "normalize", "fallback").
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            duration_seconds: Wall-clock time for this stage.
            error: Exception that ended the stage, if any.
        """
        if not self._enabled or record is None:
            return

        record.stages.append(
            StageRecord(
                stage=stage,
                input=_serialize(input_data),
                output=_serialize(output_data),
                error=repr(error) if error is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        record: RunRecord | None,
        articles: list[Any],
        *,
        used_fallback: bool = False,
    ) -> Path | None:
        """Write a call record to a JSON file.

        Args:
            record: Record returned by :meth:`start_run`.
            articles: Final list of articles returned by the call.
            used_fallback: Whether the call fell back to local search.

        Returns:
            Path to the written JSON file, or None if logging is disabled or
            the file could not be written. A write failure is logged, never raised.
        """
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.final_article_count = len(articles)
        record.used_fallback = used_fallback

        # Build filename: search_2026-02-12T14-30-00_1a2b3c4d.json (colons → dashes)
        ts = record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"{record.operation}_{ts}_{record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            filepath.write_text(record.model_dump_json(indent=2))
        except OSError as e:
            logger.warning("Could not write run log %s: %s", filepath, e)
            return None
        self._last_log_path = filepath
        return filepath
