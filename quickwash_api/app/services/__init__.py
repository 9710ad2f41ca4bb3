"""
Service layer abstraction.

Each service encapsulates the database access and business rules for
a domain, so API handlers only translate results and errors into HTTP
responses.
"""
