"""SQLite-backed usage log storage."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from datetime import datetime
from pathlib import Path

from resume_builder.logging.models import UsageLog

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".resume-builder" / "usage.db"


class UsageStore:
    """SQLite-backed store for improvement usage logs with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS usage_logs (
                    id TEXT PRIMARY KEY,
                    session_id TEXT NOT NULL,
                    timestamp TEXT NOT NULL,
                    action TEXT NOT NULL,
                    content_type TEXT,
                    provider TEXT NOT NULL,
                    model TEXT NOT NULL,
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    input_tokens INTEGER NOT NULL DEFAULT 0,
                    output_tokens INTEGER NOT NULL DEFAULT 0,
                    estimated_cost_usd REAL NOT NULL DEFAULT 0.0,
                    fallback_used INTEGER NOT NULL DEFAULT 0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_message TEXT
                )
            """)

    def save_log(self, log: UsageLog) -> None:
        """Persist a usage log entry."""
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO usage_logs
                   (id, session_id, timestamp, action, content_type, provider,
                    model, elapsed_seconds, input_tokens, output_tokens,
                    estimated_cost_usd, fallback_used, success, error_message)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    log.id,
                    log.session_id,
                    log.timestamp.isoformat(),
                    log.action,
                    log.content_type,
                    log.provider,
                    log.model,
                    log.elapsed_seconds,
                    log.input_tokens,
                    log.output_tokens,
                    log.estimated_cost_usd,
                    1 if log.fallback_used else 0,
                    1 if log.success else 0,
                    log.error_message,
                ),
            )

    def get_logs(
        self,
        session_id: str | None = None,
        limit: int = 50,
    ) -> list[UsageLog]:
        """Retrieve usage logs, optionally filtered by session_id."""
        with self._connect() as conn:
            if session_id is not None:
                rows = conn.execute(
                    "SELECT * FROM usage_logs WHERE session_id = ? ORDER BY timestamp DESC LIMIT ?",
                    (session_id, limit),
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM usage_logs ORDER BY timestamp DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        return [self._row_to_log(row) for row in rows]

    def get_monthly_stats(self) -> dict:
        """Get aggregated stats for the current month."""
        now = datetime.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) as total_calls,
                       SUM(input_tokens) as total_input,
                       SUM(output_tokens) as total_output,
                       SUM(estimated_cost_usd) as total_cost,
                       AVG(elapsed_seconds) as avg_elapsed,
                       SUM(CASE WHEN fallback_used = 1 THEN 1 ELSE 0 END) as fallback_count,
                       SUM(CASE WHEN success = 1 THEN 1 ELSE 0 END) as success_count
                   FROM usage_logs
                   WHERE timestamp >= ?""",
                (month_start.isoformat(),),
            ).fetchone()
        return {
            "total_calls": row[0] or 0,
            "total_input_tokens": row[1] or 0,
            "total_output_tokens": row[2] or 0,
            "total_cost_usd": row[3] or 0.0,
            "avg_elapsed_seconds": round(row[4], 2) if row[4] is not None else None,
            "fallback_count": row[5] or 0,
            "success_rate": (row[6] / row[0] * 100) if row[0] else 0.0,
            "month": now.strftime("%Y-%m"),
        }

    def get_action_counts(self) -> dict[str, int]:
        """Number of logged calls per action, most used first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT action, COUNT(*) FROM usage_logs GROUP BY action ORDER BY COUNT(*) DESC, action"
            ).fetchall()
        return {action: count for action, count in rows}

    def get_total_cost(self) -> float:
        """Get total estimated cost across all logs."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT SUM(estimated_cost_usd) FROM usage_logs"
            ).fetchone()
        return row[0] or 0.0

    @staticmethod
    def _row_to_log(row: tuple) -> UsageLog:
        return UsageLog(
            id=row[0],
            session_id=row[1],
            timestamp=datetime.fromisoformat(row[2]),
            action=row[3],
            content_type=row[4],
            provider=row[5],
            model=row[6],
            elapsed_seconds=row[7],
            input_tokens=row[8],
            output_tokens=row[9],
            estimated_cost_usd=row[10],
            fallback_used=bool(row[11]),
            success=bool(row[12]),
            error_message=row[13],
        )


async def record_usage(store: UsageStore | None, log: UsageLog) -> None:
    """Save a log entry in a worker thread. Store errors are logged, not raised."""
    if store is None:
        return
    try:
        await asyncio.to_thread(store.save_log, log)
    except Exception:
        logger.warning("Failed to save usage log", exc_info=True)
