import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from hotel_booking.config import DATABASE_URL


connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_database():
    if DATABASE_URL.startswith("sqlite:///./data/") and not os.path.exists("./data"):
        os.makedirs("./data")
    # models must be registered on Base before create_all
    from hotel_booking.models import booking, hotel, invoice, room, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    """Provide a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
