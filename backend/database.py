import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from config import DATABASE_URL
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Only use connect_args if we are using SQLite
engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    # Production settings for PostgreSQL
    engine_args.update({
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    })

try:
    engine = create_engine(
        DATABASE_URL,
        **engine_args,
        echo=False,
    )
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
except Exception as e:
    logger.error(f"Failed to create engine: {e}")
    raise e

Base = declarative_base()


def init_db(bind=None):
    """Create the data/ directory if needed, then create the journal tables."""
    if bind is None and DATABASE_URL.startswith("sqlite:///./data"):
        os.makedirs("data", exist_ok=True)

    # Import models so they register with Base.metadata
    from models.amalan_record import AmalanRecord  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database initialized successfully.")
    except Exception as e:
        # Hosted databases may refuse CREATE; the app still runs against existing tables.
        logger.error(f"Error during database initialization: {e}")
