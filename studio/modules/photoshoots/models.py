# Supabase table: photoshoots
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - owner
- product_id: uuid (foreign key to products.id, not null)
- model_id: uuid (foreign key to models.id, nullable) - set only for "with_model" shoots
- style_type: text (not null) - 'professional' | 'ugc'
- scene_description: text (not null)
- ai_suggested: boolean (default: false)
- generation_settings: jsonb (default: '{}') - the request that created the shoot
- status: text (default: 'pending') - 'pending' | 'processing' | 'completed' | 'failed'
- generated_image_url: text (nullable)
- generated_images: jsonb (default: '[]') - [{url, created_at, is_primary}]
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
