from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vault_gateway.db_models import TransitEntry
from vault_gateway.errors import StorageError
from vault_gateway.logger import gateway_logger as logger


@dataclass(frozen=True)
class TransitRecord:
    id: int
    created_at: datetime
    plaintext: str
    ciphertext: str

    @classmethod
    def from_row(cls, row: TransitEntry) -> "TransitRecord":
        return cls(
            id=row.id,
            created_at=row.created_at,
            plaintext=row.plaintext,
            ciphertext=row.ciphertext,
        )


class TransitRecordStore:
    """Append-only log of (plaintext, ciphertext) pairs. Rows are never updated."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def append(self, plaintext: str, ciphertext: str) -> TransitRecord:
        row = TransitEntry(plaintext=plaintext, ciphertext=ciphertext)
        try:
            self._db.add(row)
            self._db.commit()
            self._db.refresh(row)
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error(f"Failed to store transit entry: {exc}")
            raise StorageError("failed to store transit entry") from exc
        return TransitRecord.from_row(row)

    def list_recent(self, limit: int) -> List[TransitRecord]:
        stmt = select(TransitEntry).order_by(TransitEntry.id.desc()).limit(limit)
        try:
            rows = self._db.execute(stmt).scalars().all()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error(f"Failed to list transit entries: {exc}")
            raise StorageError("failed to list transit entries") from exc
        return [TransitRecord.from_row(r) for r in rows]

    def clear(self) -> int:
        try:
            result = self._db.execute(delete(TransitEntry))
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error(f"Failed to delete transit entries: {exc}")
            raise StorageError("failed to delete transit entries") from exc
        return result.rowcount or 0


__all__ = ["TransitRecord", "TransitRecordStore"]
