"""
Endpoint handlers, one module per resource.
"""
