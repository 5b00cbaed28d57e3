"""FastAPI routers, one module per entity area."""
