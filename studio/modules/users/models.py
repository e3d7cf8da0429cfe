# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Credentials live in Supabase Auth (auth.users); this table never holds a password

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, equals auth.users.id)
- email: text (unique, not null) - stored lower-cased
- full_name: text (nullable)
- avatar_url: text (nullable)
- credits: integer (default: 5)
- email_verified: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

products, models and photoshoots reference users.id with ON DELETE CASCADE.
"""
