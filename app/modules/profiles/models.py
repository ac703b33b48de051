# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- email: text (unique, not null) - conversations reference profiles by email
- ikigai: text (not null)
- skills: text[] (default: '{}')
- interests: text[] (default: '{}')
- intent: text (not null) - values: cofounder, client, teammate
- portfolio_url: text (nullable)
- linkedin: text (nullable)
- twitter: text (nullable)
- working_style: text (not null)
- availability: text (not null)
- created_at: timestamp (default: now())

Rows are created once from the profile form and never updated or deleted.
A duplicate email is rejected by the unique constraint (code 23505).
"""
