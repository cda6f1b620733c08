"""FastAPI dependency injection and request helpers."""

import logging

from fastapi import HTTPException

from gestionloc.api.schemas import SnapshotIn
from gestionloc.config import settings
from gestionloc.data.snapshot import load_snapshot
from gestionloc.engine.reminders import ReminderConfig
from gestionloc.models.entities import EntitySnapshot

logger = logging.getLogger(__name__)


def get_stored_snapshot() -> EntitySnapshot:
    """Snapshot from the configured local-storage export file."""
    try:
        return load_snapshot(settings.snapshot_path)
    except FileNotFoundError:
        raise HTTPException(
            status_code=404, detail=f"No snapshot export at {settings.snapshot_path}"
        )
    except ValueError as e:  # SnapshotError included
        logger.warning("Rejected stored snapshot: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def get_reminder_config() -> ReminderConfig:
    return ReminderConfig(days_before=tuple(settings.reminder_days_before))


def to_entities(payload: SnapshotIn) -> EntitySnapshot:
    """Parse a request snapshot; malformed records are a client error."""
    try:
        return payload.to_entities()
    except ValueError as e:  # SnapshotError included
        logger.warning("Rejected snapshot: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
