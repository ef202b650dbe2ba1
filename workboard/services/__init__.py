"""
High-level use cases for the Workboard API.

Routers call these services instead of touching the record store directly;
services raise domain exceptions and routers map them to HTTP responses.
"""
