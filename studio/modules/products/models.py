# Supabase table: products
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - owner
- name: text (not null) - unique per owner, see core/naming.py
- tag: text (nullable) - slug of name, indexed
- category: text (nullable)
- image_url: text (not null)
- dimensions: jsonb - pixel size of the image {width, height, unit}
- physical_dimensions: jsonb (nullable) - real-world size supplied by the user
- ai_description: text (nullable)
- metadata: jsonb (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
