"""DDL helpers for the registry tables."""

from __future__ import annotations

import logging

from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table
from sqlalchemy.engine import Engine

LOGGER = logging.getLogger(__name__)

TABLE_NAMES = ("students", "clubs", "registrations")

metadata = MetaData()

students_table = Table(
    "students",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("fname", String(255), nullable=False),
    Column("studid", String(64), nullable=False, index=True),
    Column("grlev", String(32)),
    Column("maill", String(255)),
    Column("phno", String(64)),
)

clubs_table = Table(
    "clubs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("club_name", String(255), nullable=False),
)

registrations_table = Table(
    "registrations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "student_id",
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # NULL club means "Not Assigned".
    Column("club_id", Integer, ForeignKey("clubs.id", ondelete="SET NULL"), nullable=True),
    Column("consent", Integer, nullable=False, default=0),
)


def create_schema(engine: Engine) -> None:
    """Create the registry tables in dependency order when missing."""

    metadata.create_all(engine, checkfirst=True)
    LOGGER.info("registry schema ensured tables=%s", ",".join(TABLE_NAMES))
