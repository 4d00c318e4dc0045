from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from worklog.config.settings import settings


def build_engine(database_url, sslmode: str = settings.DB_SSLMODE, echo: bool = settings.SQL_ECHO):
    # sslmode is a libpq option, other backends reject it
    connect_args = {}
    if str(database_url).startswith("postgresql"):
        connect_args["sslmode"] = sslmode

    return create_engine(database_url, connect_args=connect_args, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.database_url())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Request scoped session, injected with Depends(get_db)
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
