"""On-disk cache for archive responses.

Layout under ``base_dir``::

    historical/archive/   archive responses for complete past years
    derived/site/         generated HTML page

Cached payloads are wrapped in an envelope::

    {"meta": {"source": ..., "fetched_at": ..., "expires_at": ..., ...},
     "data": {...}}

Forecasts are never cached: today's high changes through the day.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path  # noqa: TC003
from typing import Any


class DataStore:
    """Reads and writes enveloped JSON files with an expiry time."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.historical = base_dir / "historical"
        self.derived = base_dir / "derived"

    def load(self, path: Path) -> dict[str, Any] | None:
        """Return the cached payload, or None on a miss."""
        envelope = self._envelope(path)
        if envelope is None:
            return None
        data: dict[str, Any] | None = envelope.get("data")
        return data

    def meta(self, path: Path) -> dict[str, Any]:
        """Return the envelope metadata ({} on a miss)."""
        envelope = self._envelope(path)
        if envelope is None:
            return {}
        return dict(envelope.get("meta") or {})

    def save(
        self,
        path: Path,
        data: dict[str, Any],
        *,
        source: str,
        ttl: timedelta | None = None,
        **extra: Any,
    ) -> Path:
        """Write ``data`` in an envelope and return the absolute file path.

        Args:
            path: Path relative to the store root.
            data: JSON-serializable payload.
            source: Where the payload came from, e.g. ``"open-meteo.com (archive)"``.
            ttl: How long the entry stays fresh. None means it is never fresh.
            **extra: Additional metadata (location, year range, unit).
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        fetched_at = datetime.now(UTC)
        meta: dict[str, Any] = {"source": source, "fetched_at": fetched_at.isoformat()}
        if ttl is not None:
            meta["expires_at"] = (fetched_at + ttl).isoformat()
        meta.update(extra)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)
        return full

    def expires_at(self, path: Path) -> datetime | None:
        raw = self.meta(path).get("expires_at")
        if raw is None:
            return None
        expiry = datetime.fromisoformat(raw)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return expiry

    def is_fresh(self, path: Path, *, now: datetime | None = None) -> bool:
        """True if the entry exists and has not expired at ``now``."""
        expiry = self.expires_at(path)
        if expiry is None:
            return False
        return (now or datetime.now(UTC)) < expiry

    def evict(self, path: Path) -> bool:
        """Delete a cached entry. Returns True if a file was removed."""
        full = self._resolve(path)
        if not full.exists():
            return False
        full.unlink()
        return True

    def _envelope(self, path: Path) -> dict[str, Any] | None:
        full = self._resolve(path)
        if not full.exists():
            return None
        try:
            with full.open() as f:
                envelope = json.load(f)
        except json.JSONDecodeError:
            # Truncated writes count as a miss
            return None
        if not isinstance(envelope, dict):
            return None
        return envelope

    def _resolve(self, path: Path) -> Path:
        full = path if path.is_absolute() else self.base / path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
