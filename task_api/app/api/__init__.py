"""
HTTP layer.

``router.build_router`` registers the endpoints defined in
``endpoints`` on a router bound to a specific handler instance.
"""
