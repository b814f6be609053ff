"""
Application package initializer.

The API is organised in layers: ``api`` maps HTTP requests to the
``services`` layer, which validates input and calls the ``store``
layer for persistence.  ``schemas`` holds the pydantic models shared
by all layers and ``core`` holds configuration, logging, errors and
database bootstrap.  The application itself is assembled in ``main``.
"""
