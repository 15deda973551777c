"""Plant management API (v1 routers and schemas)."""
