"""
User Management Presentation Layer

- API Routers: current-user endpoint
- Pydantic Schemas: response serialization
- Dependencies: Supabase-backed authentication (get_current_user)
"""
