# Supabase table: messages
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

messages:
- id: uuid (primary key, default: gen_random_uuid())
- from_email: text (not null) - sender's profiles.email
- to_email: text (not null) - recipient's profiles.email
- message: text (not null)
- timestamp: timestamp (default: now())

Rows are immutable. A conversation between A and B is every row with
(from_email=A, to_email=B) or (from_email=B, to_email=A), oldest first.
"""
