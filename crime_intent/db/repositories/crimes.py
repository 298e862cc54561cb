"""
Crime store functions.

Read and upsert crime rows. Records are never deleted; writes always
overwrite every mutable column of the row.
"""
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crime_intent.db import models, schemas
from crime_intent.db.errors import StorageError

logger = logging.getLogger(__name__)


def get_crimes(db: Session) -> List[models.Crime]:
    """List every crime in creation order."""
    try:
        return db.query(models.Crime).order_by(models.Crime.position).all()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load crimes: {str(e)}") from e


def get_crime(db: Session, crime_id: uuid.UUID) -> Optional[models.Crime]:
    try:
        return db.query(models.Crime).filter(models.Crime.id == crime_id).first()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load crime {crime_id}: {str(e)}") from e


def count_crimes(db: Session) -> int:
    try:
        return db.query(func.count(models.Crime.id)).scalar() or 0
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to count crimes: {str(e)}") from e


def _next_position(db: Session) -> int:
    current = db.query(func.max(models.Crime.position)).scalar()
    return (current or 0) + 1


def upsert_crime(db: Session, crime: schemas.Crime) -> models.Crime:
    """Insert the crime if its id is unknown, else overwrite the stored row."""
    try:
        db_crime = db.query(models.Crime).filter(models.Crime.id == crime.id).first()
        if db_crime is None:
            db_crime = models.Crime(id=crime.id, position=_next_position(db))
            db.add(db_crime)
            logger.debug("Inserting crime %s", crime.id)
        else:
            logger.debug("Overwriting crime %s", crime.id)
        for key, value in crime.model_dump(exclude={'id'}).items():
            setattr(db_crime, key, value)
        db.commit()
        db.refresh(db_crime)
        return db_crime
    except SQLAlchemyError as e:
        try:
            db.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error("Rollback after failed write of crime %s failed: %s", crime.id, rollback_error)
        logger.error("Failed to store crime %s: %s", crime.id, e)
        raise StorageError(f"Failed to store crime {crime.id}: {str(e)}") from e
