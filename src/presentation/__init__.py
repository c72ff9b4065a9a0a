"""Presentation layer - HTTP surface of the identity and log API.

Routers parse requests into commands/queries, run the request validators,
dispatch to handlers and map Results onto status codes and RFC 7807 bodies.
No business rules live here.
"""
