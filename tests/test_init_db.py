# tests/test_init_db.py
import re

from db.init_db import SCHEMA_SQL


def _normalized():
    return " ".join(SCHEMA_SQL.split()).lower()


def test_schema_columns_and_constraints():
    sql = _normalized()

    assert "create table if not exists waitlist_entries (" in sql
    assert "id serial primary key" in sql
    assert "twitter_username varchar(255) not null" in sql
    assert "wallet_address varchar(42) not null" in sql
    assert "created_at timestamp default current_timestamp" in sql
    assert "constraint unique_twitter unique (twitter_username)" in sql
    assert "constraint unique_wallet unique (wallet_address)" in sql


def test_schema_recency_index():
    sql = _normalized()

    assert re.search(
        r"create index if not exists idx_created_at on waitlist_entries \(created_at desc\)",
        sql,
    )
