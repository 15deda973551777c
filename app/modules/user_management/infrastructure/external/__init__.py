# 📄 File: app/modules/user_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the connection to Supabase, the outside service that handles sign-in.
#
# 🧪 Purpose (Technical Summary):
# External services integration layer exporting the Supabase Auth token verifier.
#
# 🔗 Dependencies:
# - supabase client, python-jose
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies

from .supabase_auth import SupabaseAuthService

__all__ = ["SupabaseAuthService"]
