"""
Collection client over the SQLite tables.

A ``Collection`` offers the small document-store surface the services
depend on: ``find_all``, ``find_by_id``, ``create``, ``update_by_id``
and ``delete_by_id``.  Records go in and come out as plain ``dict``
objects, so services never touch SQL or ``sqlite3.Row`` directly.

Column names used in filters and payloads are checked against the
collection's whitelist before being interpolated into SQL.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .db import MAX_RECORD_ID, get_cursor
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

TIMESTAMP_FIELDS = ("created_at", "updated_at")


def coerce_id(raw: Any, label: str) -> int:
    """Turn a path identifier into a record id.

    Anything that is not a positive integer cannot name a record, so it
    is reported the same way as a missing one.
    """
    try:
        record_id = int(str(raw).strip())
    except (TypeError, ValueError):
        raise NotFoundError(f"{label} not found") from None
    if record_id < 1 or record_id > MAX_RECORD_ID:
        raise NotFoundError(f"{label} not found")
    return record_id


class Collection:
    """CRUD access to one table."""

    def __init__(self, table: str, fields: Iterable[str]) -> None:
        self.table = table
        self.fields = tuple(fields)

    @property
    def columns(self) -> tuple:
        return ("id",) + self.fields + TIMESTAMP_FIELDS

    def _check_keys(self, keys: Iterable[str]) -> None:
        unknown = [k for k in keys if k not in self.fields]
        if unknown:
            raise ValueError(f"Unknown {self.table} field(s): {', '.join(sorted(unknown))}")

    def _select(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table}"

    def find_all(self, filter: Optional[Record] = None) -> List[Record]:
        """Return every record matching ``filter`` (equality on each key), oldest first."""
        query = self._select()
        params: list = []
        if filter:
            self._check_keys(filter)
            query += " WHERE " + " AND ".join(f"{key} = ?" for key in filter)
            params.extend(filter.values())
        query += " ORDER BY id ASC"
        with get_cursor() as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        return [dict(row) for row in rows]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        with get_cursor() as cursor:
            row = cursor.execute(
                self._select() + " WHERE id = ?", (record_id,)
            ).fetchone()
        return dict(row) if row else None

    def create(self, record: Record) -> Record:
        """Insert ``record`` and return the stored version including id and timestamps."""
        self._check_keys(record)
        keys = list(record)
        placeholders = ", ".join("?" for _ in keys)
        with get_cursor() as cursor:
            cursor.execute(
                f"INSERT INTO {self.table} ({', '.join(keys)}) VALUES ({placeholders})",
                tuple(record[k] for k in keys),
            )
            record_id = cursor.lastrowid
            row = cursor.execute(
                self._select() + " WHERE id = ?", (record_id,)
            ).fetchone()
        logger.debug("Created %s %s", self.table, record_id)
        return dict(row)

    def update_by_id(self, record_id: int, fields: Record) -> Optional[Record]:
        """Overwrite the given fields and bump ``updated_at``.

        Returns the updated record, or ``None`` if no record has this id.
        Concurrent updates are last-write-wins.
        """
        self._check_keys(fields)
        assignments = [f"{key} = ?" for key in fields]
        assignments.append("updated_at = CURRENT_TIMESTAMP")
        with get_cursor() as cursor:
            cursor.execute(
                f"UPDATE {self.table} SET {', '.join(assignments)} WHERE id = ?",
                tuple(fields.values()) + (record_id,),
            )
            if cursor.rowcount == 0:
                return None
            row = cursor.execute(
                self._select() + " WHERE id = ?", (record_id,)
            ).fetchone()
        return dict(row)

    def delete_by_id(self, record_id: int) -> Optional[Record]:
        """Delete a record and return it, or ``None`` if it did not exist."""
        with get_cursor() as cursor:
            row = cursor.execute(
                self._select() + " WHERE id = ?", (record_id,)
            ).fetchone()
            if not row:
                return None
            cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        return dict(row)


class ParkingStore(Collection):
    """Parking collection with owner population."""

    def __init__(self) -> None:
        super().__init__("parkings", ("name", "address", "city", "lat", "long", "user_id"))

    def find_all_with_owner(self, filter: Optional[Record] = None) -> List[Record]:
        """Like ``find_all`` but attach the referenced user as ``owner``.

        ``owner`` is ``None`` when ``user_id`` points at a user that no
        longer exists.
        """
        cols = ", ".join(f"p.{c}" for c in self.columns)
        query = (
            f"SELECT {cols}, u.id AS owner_id, u.name AS owner_name, u.email AS owner_email "
            "FROM parkings p LEFT JOIN users u ON u.id = p.user_id"
        )
        params: list = []
        if filter:
            self._check_keys(filter)
            query += " WHERE " + " AND ".join(f"p.{key} = ?" for key in filter)
            params.extend(filter.values())
        query += " ORDER BY p.id ASC"
        with get_cursor() as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        records: List[Record] = []
        for row in rows:
            record = {c: row[c] for c in self.columns}
            if row["owner_id"] is None:
                record["owner"] = None
            else:
                record["owner"] = {
                    "id": row["owner_id"],
                    "name": row["owner_name"],
                    "email": row["owner_email"],
                }
            records.append(record)
        return records


users = Collection("users", ("name", "email"))
parkings = ParkingStore()
reviews = Collection("reviews", ("owner_id", "user_id", "rating", "comment"))
