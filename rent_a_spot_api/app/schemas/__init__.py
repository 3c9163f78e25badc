"""
Pydantic schema definitions for API payloads.

Each domain (parking spots, reviews, users) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the stored records to decouple API representation from persistence.
"""
