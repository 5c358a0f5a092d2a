from functools import lru_cache

from supabase import Client, create_client

from vitae import config


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    # Created on first use so the renderer runs without Supabase credentials
    if not config.SUPABASE_URL:
        raise ValueError("SUPABASE_URL is not set in environment")
    if not config.SUPABASE_KEY:
        raise ValueError("SUPABASE_KEY is not set in environment")

    return create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
