"""
Shared infrastructure: configuration, structured logging and the Supabase store client.
"""
