from __future__ import annotations

import os
from pathlib import Path

import pytest
from sqlalchemy.engine import make_url

from db.session import engine


@pytest.mark.skipif("DATABASE_URL" in os.environ, reason="DATABASE_URL overridden")
def test_default_engine_uses_psycopg2_driver():
    assert engine.url.drivername == "postgresql+psycopg2"


def test_env_example_database_url_uses_psycopg2_driver():
    env_example = Path(__file__).resolve().parents[1] / ".env.example"
    lines = env_example.read_text(encoding="utf-8").splitlines()
    url = next(line for line in lines if line.startswith("DATABASE_URL=")).split("=", 1)[1]
    assert make_url(url).drivername == "postgresql+psycopg2"
