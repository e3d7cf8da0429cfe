# Supabase table: models
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - owner
- name: text (not null) - unique per owner, see core/naming.py
- tag: text (not null) - slug of name
- image_url: text (nullable)
- dimensions: jsonb (nullable) - {width, height, unit}
- metadata: jsonb (nullable) - storage details such as the image public id
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now(), maintained by trigger)
"""
