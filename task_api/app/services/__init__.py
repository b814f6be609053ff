"""
Service layer.

Services hold business rules and delegate persistence to a store
passed in at construction time, so API handlers never talk to the
database directly.
"""
