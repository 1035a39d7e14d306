"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store so that the wire representation
of a pet is defined in exactly one place.
"""
