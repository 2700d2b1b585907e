import secrets
from typing import Optional
from urllib.parse import urlencode

from talentgrid.config import AVATAR_BASE_URL


def random_avatar_url(seed: Optional[str] = None) -> str:
    """DiceBear initials avatar. Random seed unless one is given."""
    seed = seed or secrets.token_hex(4)
    return f"{AVATAR_BASE_URL}?{urlencode({'seed': seed})}"
