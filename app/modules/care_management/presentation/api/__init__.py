"""Care management API (v1 routers and schemas)."""
