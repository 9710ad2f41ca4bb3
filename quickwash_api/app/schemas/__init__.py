"""
Pydantic schema definitions for API payloads.

Each domain (users, services, bookings, statistics) defines its own
Pydantic models for request and response bodies.  Schemas are
separated from table layouts so the password column never leaks into
a response model.
"""
