"""HTTP routers.

Versioned API resources live under api/v1/; request-scoped middleware and
auth dependencies under api/middleware/.
"""
