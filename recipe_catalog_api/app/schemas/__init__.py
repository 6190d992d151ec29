"""
Pydantic schema definitions for API payloads.

Request bodies, stored records and aggregate responses are declared
as pydantic models so FastAPI can validate input and serialise output
with the same definitions.
"""
