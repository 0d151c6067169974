"""Integration tests for the raw SQL client with SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError


class TestDatabase:

    @pytest.mark.asyncio
    async def test_positional_params_are_bound(self, database):
        rows = await database.query("SELECT $1 AS a, $2 AS b", ["x", 2])

        assert rows == [{"a": "x", "b": 2}]

    @pytest.mark.asyncio
    async def test_repeated_placeholder_binds_same_value(self, database):
        rows = await database.query("SELECT $1 AS a, $1 AS b", [7])

        assert rows == [{"a": 7, "b": 7}]

    @pytest.mark.asyncio
    async def test_statement_without_rows_returns_empty_list(self, database):
        result = await database.query(
            "UPDATE users SET email = $1 WHERE id = $2", ["a@b.com", 999]
        )

        assert result == []

    @pytest.mark.asyncio
    async def test_missing_param_raises(self, database):
        with pytest.raises(IndexError, match=r"\$2"):
            await database.query("SELECT $1, $2", ["only one"])

    @pytest.mark.asyncio
    async def test_username_unique_constraint(self, database):
        insert = """INSERT INTO users (username, password, first_name, last_name, email)
                    VALUES ($1, $2, $3, $4, $5)"""
        params = ["dup", "hash", "D", "U", "dup@example.com"]
        await database.query(insert, params)

        with pytest.raises(IntegrityError):
            await database.query(insert, params)
