# Di dalam file: database.py

import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings

_connect_args = {}
_engine_kwargs = {}
if settings.DATABASE_URL.startswith("sqlite"):
    _connect_args = {"check_same_thread": False}
    if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # Satu koneksi dipakai bersama agar tabel in-memory tidak hilang per sesi
        _engine_kwargs = {"poolclass": StaticPool}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args,
    echo=settings.SQL_ECHO,
    **_engine_kwargs,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# StaticPool = satu koneksi (satu transaksi) untuk semua thread, jadi akses
# sesi dari request FastAPI harus bergiliran
session_lock = threading.Lock()
