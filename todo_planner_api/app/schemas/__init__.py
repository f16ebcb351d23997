"""
Pydantic schema definitions for API payloads.

Each domain (users, todos) defines its own Pydantic models for request
and response bodies.  Schemas are separated from the store records to
decouple API representation from storage.
"""
