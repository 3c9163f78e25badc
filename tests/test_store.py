"""
Unit tests for the collection client and database setup.
"""

import pytest

from rent_a_spot_api.app.core import store
from rent_a_spot_api.app.core.db import DatabaseStatus, check_connection, get_cursor, init_db
from rent_a_spot_api.app.core.exceptions import NotFoundError


def _parking(user_id, name="Spot"):
    return {
        "name": name,
        "address": "1 Nile St",
        "city": "Giza",
        "lat": 30.0131,
        "long": 31.2089,
        "user_id": user_id,
    }


@pytest.mark.unit
class TestMigrations:
    """Tests for init_db."""

    def test_tables_created(self, db_path):
        with get_cursor() as cursor:
            names = {
                row["name"]
                for row in cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
            }
        assert {"users", "parkings", "reviews", "migrations"} <= names

    def test_init_is_repeatable(self, db_path):
        init_db()
        with get_cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM migrations").fetchone()
        assert row["count"] == 2

    def test_check_connection(self, db_path):
        assert check_connection() is DatabaseStatus.CONNECTED


@pytest.mark.unit
class TestCollection:
    """Tests for the generic collection operations."""

    def test_create_and_find_by_id(self, db_path):
        created = store.users.create({"name": "Ali", "email": "ali@example.com"})
        assert created["id"] >= 1
        assert created["created_at"] is not None
        assert store.users.find_by_id(created["id"]) == created

    def test_find_by_id_missing(self, db_path):
        assert store.users.find_by_id(404) is None

    def test_find_all_in_insertion_order(self, db_path):
        for i in range(3):
            store.parkings.create(_parking(1, name=f"Spot {i}"))
        names = [p["name"] for p in store.parkings.find_all()]
        assert names == ["Spot 0", "Spot 1", "Spot 2"]

    def test_find_all_filter(self, db_path):
        store.parkings.create(_parking(1))
        store.parkings.create(_parking(2))
        store.parkings.create(_parking(1))
        assert [p["user_id"] for p in store.parkings.find_all({"user_id": 1})] == [1, 1]

    def test_unknown_filter_key_rejected(self, db_path):
        with pytest.raises(ValueError, match="Unknown parkings field"):
            store.parkings.find_all({"1=1; DROP TABLE parkings; --": 1})

    def test_unknown_create_key_rejected(self, db_path):
        with pytest.raises(ValueError):
            store.reviews.create({"owner_id": 1, "rating": 5, "stars": 5})

    def test_update_by_id(self, db_path):
        created = store.parkings.create(_parking(1))
        updated = store.parkings.update_by_id(created["id"], {"city": "Alexandria"})
        assert updated["city"] == "Alexandria"
        assert updated["name"] == created["name"]

    def test_update_missing_returns_none(self, db_path):
        assert store.parkings.update_by_id(123, {"city": "Alexandria"}) is None

    def test_delete_by_id(self, db_path):
        created = store.parkings.create(_parking(1))
        deleted = store.parkings.delete_by_id(created["id"])
        assert deleted["id"] == created["id"]
        assert store.parkings.find_by_id(created["id"]) is None

    def test_delete_missing_returns_none(self, db_path):
        store.parkings.create(_parking(1))
        assert store.parkings.delete_by_id(999) is None
        assert len(store.parkings.find_all()) == 1


@pytest.mark.unit
class TestParkingStore:
    """Tests for owner population."""

    def test_owner_populated(self, db_path):
        user = store.users.create({"name": "Ali", "email": "ali@example.com"})
        store.parkings.create(_parking(user["id"]))
        [record] = store.parkings.find_all_with_owner()
        assert record["owner"] == {"id": user["id"], "name": "Ali", "email": "ali@example.com"}

    def test_owner_none_after_user_deleted(self, db_path):
        user = store.users.create({"name": "Ali", "email": "ali@example.com"})
        store.parkings.create(_parking(user["id"]))
        store.users.delete_by_id(user["id"])
        [record] = store.parkings.find_all_with_owner()
        assert record["owner"] is None
        assert record["user_id"] == user["id"]

    def test_filter_by_owner(self, db_path):
        store.parkings.create(_parking(1, name="a"))
        store.parkings.create(_parking(2, name="b"))
        records = store.parkings.find_all_with_owner({"user_id": 2})
        assert [r["name"] for r in records] == ["b"]


@pytest.mark.unit
class TestCoerceId:
    """Tests for path identifier parsing."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), (" 42 ", 42), (7, 7)])
    def test_valid(self, raw, expected):
        assert store.coerce_id(raw, "Parking") == expected

    @pytest.mark.parametrize("raw", ["abc", "", "0", "-3", "1.5", None])
    def test_invalid_is_not_found(self, raw):
        with pytest.raises(NotFoundError, match="Parking not found"):
            store.coerce_id(raw, "Parking")

    @pytest.mark.parametrize("raw", ["99999999999999999999", str(2**63)])
    def test_beyond_sqlite_integer_is_not_found(self, raw):
        with pytest.raises(NotFoundError, match="Parking not found"):
            store.coerce_id(raw, "Parking")

    def test_largest_sqlite_integer_accepted(self):
        assert store.coerce_id(str(2**63 - 1), "Parking") == 2**63 - 1
