"""Recommendations API (v1 routers and schemas)."""
