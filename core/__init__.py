"""
Shared kernel of the store admin service.

Domain exceptions, value objects, listing and pricing helpers, the
event bus, caching, metrics and middleware used by every catalog app.
"""
