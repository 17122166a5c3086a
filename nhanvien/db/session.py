from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..core.config import settings

DATABASE_URL = str(settings.DATABASE_URL)

# SQLite chỉ cho phép dùng connection trên thread đã tạo ra nó;
# FastAPI chạy endpoint sync trong threadpool nên phải tắt kiểm tra này.
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Tạo engine kết nối đến database từ URL trong đối tượng settings
engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
    echo=False
)

# Tạo một lớp Session để quản lý các phiên làm việc với DB
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class cho các model. Tất cả các model trong models.py
# sẽ kế thừa từ lớp Base này.
Base = declarative_base()
