"""
Sample schema and demo rows for the agents/customer tables.

Used by scripts/seed_sample_db.py and the test suite. The DDL sticks to types
that both MariaDB and SQLite accept.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS: list[str] = [
    """
    CREATE TABLE IF NOT EXISTS agents (
        AGENT_CODE CHAR(6) NOT NULL PRIMARY KEY,
        AGENT_NAME CHAR(40),
        WORKING_AREA CHAR(35),
        COMMISSION DECIMAL(10,2),
        PHONE_NO CHAR(15),
        COUNTRY VARCHAR(25)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS customer (
        CUST_CODE VARCHAR(6) NOT NULL PRIMARY KEY,
        CUST_NAME VARCHAR(40) NOT NULL,
        CUST_CITY CHAR(35),
        WORKING_AREA VARCHAR(35) NOT NULL,
        CUST_COUNTRY VARCHAR(20) NOT NULL,
        GRADE INTEGER,
        OPENING_AMT DECIMAL(12,2) NOT NULL,
        RECEIVE_AMT DECIMAL(12,2) NOT NULL,
        PAYMENT_AMT DECIMAL(12,2) NOT NULL,
        OUTSTANDING_AMT DECIMAL(12,2) NOT NULL,
        PHONE_NO VARCHAR(17) NOT NULL,
        AGENT_CODE CHAR(6) NOT NULL
    )
    """,
]

INSERT_AGENT: str = (
    "INSERT INTO agents (AGENT_CODE, AGENT_NAME, WORKING_AREA, COMMISSION, PHONE_NO, COUNTRY) "
    "VALUES (:AGENT_CODE, :AGENT_NAME, :WORKING_AREA, :COMMISSION, :PHONE_NO, :COUNTRY)"
)

INSERT_CUSTOMER: str = (
    "INSERT INTO customer (CUST_CODE, CUST_NAME, CUST_CITY, WORKING_AREA, CUST_COUNTRY, GRADE, "
    "OPENING_AMT, RECEIVE_AMT, PAYMENT_AMT, OUTSTANDING_AMT, PHONE_NO, AGENT_CODE) "
    "VALUES (:CUST_CODE, :CUST_NAME, :CUST_CITY, :WORKING_AREA, :CUST_COUNTRY, :GRADE, "
    ":OPENING_AMT, :RECEIVE_AMT, :PAYMENT_AMT, :OUTSTANDING_AMT, :PHONE_NO, :AGENT_CODE)"
)

SEED_AGENTS: list[dict] = [
    {"AGENT_CODE": "A007", "AGENT_NAME": "Ramasundar", "WORKING_AREA": "Bangalore", "COMMISSION": 0.15, "PHONE_NO": "077-25814763", "COUNTRY": "India"},
    {"AGENT_CODE": "A003", "AGENT_NAME": "Alex", "WORKING_AREA": "London", "COMMISSION": 0.13, "PHONE_NO": "075-12458969", "COUNTRY": "UK"},
    {"AGENT_CODE": "A008", "AGENT_NAME": "Alford", "WORKING_AREA": "New York", "COMMISSION": 0.12, "PHONE_NO": "044-25874365", "COUNTRY": "USA"},
    {"AGENT_CODE": "A011", "AGENT_NAME": "Ravi Kumar", "WORKING_AREA": "Bangalore", "COMMISSION": 0.15, "PHONE_NO": "077-45625874", "COUNTRY": "India"},
    {"AGENT_CODE": "A010", "AGENT_NAME": "Santakumar", "WORKING_AREA": "Chennai", "COMMISSION": 0.14, "PHONE_NO": "007-22388644", "COUNTRY": "India"},
    # Integer-formatted code, reachable by legacy clients
    {"AGENT_CODE": "1", "AGENT_NAME": "Benjamin", "WORKING_AREA": "Hampshair", "COMMISSION": 0.11, "PHONE_NO": "008-22536178", "COUNTRY": "UK"},
]

SEED_CUSTOMERS: list[dict] = [
    {"CUST_CODE": "C00013", "CUST_NAME": "Holmes", "CUST_CITY": "London", "WORKING_AREA": "London", "CUST_COUNTRY": "UK", "GRADE": 2,
     "OPENING_AMT": 6000, "RECEIVE_AMT": 5000, "PAYMENT_AMT": 7000, "OUTSTANDING_AMT": 4000, "PHONE_NO": "BBBBBBB", "AGENT_CODE": "A003"},
    {"CUST_CODE": "C00001", "CUST_NAME": "Micheal", "CUST_CITY": "New York", "WORKING_AREA": "New York", "CUST_COUNTRY": "USA", "GRADE": 2,
     "OPENING_AMT": 3000, "RECEIVE_AMT": 5000, "PAYMENT_AMT": 2000, "OUTSTANDING_AMT": 6000, "PHONE_NO": "CCCCCCC", "AGENT_CODE": "A008"},
    {"CUST_CODE": "C00020", "CUST_NAME": "Albert", "CUST_CITY": "New York", "WORKING_AREA": "New York", "CUST_COUNTRY": "USA", "GRADE": 3,
     "OPENING_AMT": 5000, "RECEIVE_AMT": 7000, "PAYMENT_AMT": 6000, "OUTSTANDING_AMT": 6000, "PHONE_NO": "BBBBSBB", "AGENT_CODE": "A008"},
    {"CUST_CODE": "C00025", "CUST_NAME": "Ravindran", "CUST_CITY": "Bangalore", "WORKING_AREA": "Bangalore", "CUST_COUNTRY": "India", "GRADE": 2,
     "OPENING_AMT": 5000, "RECEIVE_AMT": 7000, "PAYMENT_AMT": 4000, "OUTSTANDING_AMT": 8000, "PHONE_NO": "AVAVAVA", "AGENT_CODE": "A011"},
]


async def init_schema(engine: AsyncEngine) -> None:
    """Create the agents and customer tables if they do not exist."""
    async with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(text(statement))
    logger.info("[sample_db] schema ready")


async def clear_all(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.execute(text("DELETE FROM customer"))
        await conn.execute(text("DELETE FROM agents"))
    logger.info("[sample_db] cleared agents and customers")


async def seed(engine: AsyncEngine) -> None:
    """Insert the demo agents and customers."""
    async with engine.begin() as conn:
        await conn.execute(text(INSERT_AGENT), SEED_AGENTS)
        await conn.execute(text(INSERT_CUSTOMER), SEED_CUSTOMERS)
    logger.info("[sample_db] seeded agents=%d customers=%d", len(SEED_AGENTS), len(SEED_CUSTOMERS))
