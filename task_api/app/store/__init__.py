"""
Persistence layer.  Stores translate CRUD calls into SQL statements.
"""
