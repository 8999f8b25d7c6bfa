# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Table definitions — SQLAlchemy Core, shared MetaData.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

waitlist = Table(
    "waitlist",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    Column("source", String(100), nullable=False),
    Column("ip_address", String(64)),
    Column("user_agent", String(512)),
)

thoughts = Table(
    "thoughts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(320)),
    Column("message", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    Column("source", String(100), nullable=False),
    Column("ip_address", String(64)),
    Column("user_agent", String(512)),
)
