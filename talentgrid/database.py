# talentgrid/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from talentgrid.config import DATABASE_URL, SQL_ECHO

url = make_url(DATABASE_URL)

engine_kwargs = {}
connect_args = {}
# Required for SQLite when used with FastAPI/threads
if url.drivername.startswith("sqlite"):
    connect_args["check_same_thread"] = False
    # In-memory DB must share one connection or every session sees an empty schema
    if not url.database or url.database == ":memory:":
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True
else:
    engine_kwargs["pool_pre_ping"] = True  # avoid stale connections on resume

engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    connect_args=connect_args,
    **engine_kwargs,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
