"""
Pydantic models for records and API payloads.

Each entity (authors, collectors, quotes) defines its stored record
model alongside the create and update payloads that feed it.  Stored
records are frozen: updates always produce a new record.
"""
