"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and dependency providers. No business logic belongs here.
"""
