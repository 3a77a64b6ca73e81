"""Startup data for the calendar and the ticket panel"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from .domain.calendar.schemas import MaintenanceTask, Technician
from .domain.tickets.schemas import ServiceTicket

logger = logging.getLogger(__name__)


class SeedData(BaseModel):
    technicians: list[Technician] = []
    tasks: list[MaintenanceTask] = []
    tickets: list[ServiceTicket] = []


def load_seed_data(path: Optional[Union[str, Path]]) -> SeedData:
    """
    Read technicians, tasks and tickets from a JSON file.

    Args:
        path: JSON file with "technicians", "tasks" and "tickets" lists

    Returns:
        The parsed data, or empty collections when the file is not configured,
        missing or invalid.
    """
    if not path:
        logger.info("No seed data file configured, starting with empty calendar")
        return SeedData()

    seed_path = Path(path)
    if not seed_path.is_file():
        logger.warning(f"⚠️ Seed data file not found: {seed_path}")
        return SeedData()

    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ Could not read seed data from {seed_path}: {e}")
        return SeedData()

    try:
        data = SeedData.model_validate(raw)
    except ValidationError as e:
        logger.error(f"❌ Invalid seed data in {seed_path}: {e.error_count()} errors")
        logger.debug(str(e))
        return SeedData()

    logger.info(
        f"✅ Loaded {len(data.technicians)} technicians, {len(data.tasks)} tasks "
        f"and {len(data.tickets)} tickets from {seed_path}"
    )
    return data
