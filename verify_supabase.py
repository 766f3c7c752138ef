"""
Verify every console table exists and is readable.
Run: python verify_supabase.py
"""
import sys

from ramen_console.config import configure_logging, settings
from ramen_console.entities import ALL_KINDS
from ramen_console.supabase_store import SupabaseStore, open_store, verify_tables

configure_logging()

if not settings.supabase_configured:
    print("ERROR: SUPABASE_URL and SUPABASE_KEY must be set in .env")
    sys.exit(1)

store = open_store(settings)
if not isinstance(store, SupabaseStore):
    print("ERROR: could not connect to Supabase")
    sys.exit(1)

print("=" * 60)
print("Supabase Table Verification")
print("=" * 60)

all_ok = True
for name, status, detail in verify_tables(store, [k.collection for k in ALL_KINDS]):
    print(f"  {status:12s} {name:20s} {detail}")
    all_ok = all_ok and status == "OK"

print("=" * 60)
if all_ok:
    print("All tables OK!")
else:
    print("Some tables failed. Run supabase_schema.sql in the SQL editor.")
    sys.exit(1)
