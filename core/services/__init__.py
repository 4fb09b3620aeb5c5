"""
Services Module

- database: Supabase / in-memory storage behind one async API
- repositories: Supabase table access
- models: Pydantic entities
- money: Decimal helpers
- domains: read-side aggregations (admin dashboard)
"""
