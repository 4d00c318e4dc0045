# create_tables.py
import argparse

from sqlalchemy import text

from worklog.database import Base, engine
from worklog.models import WorkLog

# Expression indexes backing the ranked search; they must match the
# expressions built in worklog/services/query_builder.py
SEARCH_INDEXES = [
    """
    CREATE INDEX IF NOT EXISTS ix_logs_search_tsv ON logs
    USING gin (to_tsvector('english'::regconfig, task_name || ' ' || coalesce(notes, '')))
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_logs_search_trgm ON logs
    USING gin ((task_name || ' ' || coalesce(notes, '')) gin_trgm_ops)
    """,
]

def create_tables(drop_existing: bool = False):
    """Create the logs table, the pg_trgm extension and the search indexes"""
    try:
        with engine.connect() as conn:
            if drop_existing:
                conn.execute(text("DROP TABLE IF EXISTS logs CASCADE"))

            # similarity() comes from pg_trgm
            conn.execute(text("CREATE EXTENSION IF NOT EXISTS pg_trgm"))
            conn.commit()

        Base.metadata.create_all(bind=engine, tables=[WorkLog.__table__])
        print("✅ logs table created successfully!")

        with engine.connect() as conn:
            for statement in SEARCH_INDEXES:
                conn.execute(text(statement))
            conn.commit()
        print("✅ Search indexes created successfully!")

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the work log schema")
    parser.add_argument("--drop", action="store_true", help="Drop the logs table first")
    args = parser.parse_args()
    create_tables(drop_existing=args.drop)
