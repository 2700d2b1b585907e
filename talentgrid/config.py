# talentgrid/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Load env from talentgrid/.env OR .env (whichever exists) ---
# Works whether you run from repo root or talentgrid/
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "talentgrid" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

# === 🌍 App Configuration ===
ENV = os.getenv("ENV", "dev").lower()
AUTO_MIGRATE = os.getenv("AUTO_MIGRATE", "false").strip().lower() == "true"
APP_NAME = "TalentGrid API"
APP_VERSION = "1.0.0"

# === 🧮 Matching / leaderboard knobs ===
# Upper bound on profiles read per request (no pagination beyond this)
PROFILE_LIST_LIMIT = int(os.getenv("PROFILE_LIST_LIMIT", "1000"))
LEADERBOARD_SIZE = int(os.getenv("LEADERBOARD_SIZE", "10"))
MAX_TEAM_SIZE = int(os.getenv("MAX_TEAM_SIZE", "10"))

# === 🖼️ Avatars ===
AVATAR_BASE_URL = os.getenv("AVATAR_BASE_URL", "https://api.dicebear.com/6.x/initials/svg")

# === 🌍 CORS Settings ===
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]

# === 🗄️ Database Configuration ===
def _resolve_sqlite_url(url: str) -> str:
    """Turn 'sqlite:///relative.db' into an absolute path under project root.
    Keep ':memory:' as-is. Ensure absolute paths use 4 slashes."""
    if not url.startswith("sqlite:"):
        return url
    # ':memory:' or bare 'sqlite://'
    if ":memory:" in url or url.rstrip("/") == "sqlite:":
        return url
    prefix = "sqlite:///"
    if url.startswith(prefix):
        path = url[len(prefix):]
        if Path(path).is_absolute():
            return f"sqlite:////{Path(path).as_posix().lstrip('/')}"
        abs_path = (root / path).resolve()
        return f"sqlite:////{abs_path.as_posix().lstrip('/')}"
    return url

# Prefer env DATABASE_URL; if missing, persist to ./data/talentgrid.db
_env_db = os.getenv("DATABASE_URL")
if _env_db:
    DATABASE_URL = _resolve_sqlite_url(_env_db)
else:
    data_dir = (root / "data").resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    sqlite_path = (data_dir / "talentgrid.db").resolve()
    DATABASE_URL = f"sqlite:////{sqlite_path.as_posix().lstrip('/')}"

# Optional SQL echo for debugging (SQL_ECHO=true)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
