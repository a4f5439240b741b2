import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

load_dotenv()


def get_database_url() -> str:
  url = os.getenv('DATABASE_URL')
  if url:
    return url

  db_host = os.getenv('DB_HOST', 'localhost')
  db_port = os.getenv('DB_PORT', '5432')
  db_user = os.getenv('POSTGRES_USER')
  db_pass = os.getenv('POSTGRES_PASS')
  db_name = os.getenv('POSTGRES_DB', 'voyager')
  return f"postgresql+psycopg2://{db_user}:{db_pass}@{db_host}:{db_port}/{db_name}"


def make_engine(url: str):
  # In-memory sqlite has to share one connection or every session sees an empty db
  if url.startswith('sqlite') and ':memory:' in url:
    return create_engine(url, connect_args={'check_same_thread': False}, poolclass=StaticPool)
  if url.startswith('sqlite'):
    return create_engine(url, connect_args={'check_same_thread': False})
  return create_engine(url, pool_pre_ping=True)


engine = make_engine(get_database_url())
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()
