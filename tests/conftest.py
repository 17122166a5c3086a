import os
import shutil
import tempfile

import pytest

# Dùng một DB tạm cho cả phiên test: phải đặt biến môi trường trước khi import package
_TMP_DIR = tempfile.mkdtemp(prefix="nhanvien_test_db_")
_DB_PATH = os.path.join(_TMP_DIR, "test_nhanvien.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nhanvien.db.session import Base
from nhanvien.schemas.employee import Employee
from nhanvien.services.employee_service import EmployeeDirectory
from nhanvien.services.employee_store import InMemoryEmployeeStore, SqlEmployeeStore


@pytest.fixture(scope="session", autouse=True)
def session_db_cleanup():
    yield
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture
def sample_employees():
    return [
        Employee(id="NV001", name="An", position="IT", department="IT",
                 salary=10000000, status="Thử việc"),
        Employee(id="NV002", name="Bình", position="Kế toán", department="Kế toán",
                 salary=20000000, status="Đã ký hợp đồng"),
    ]


@pytest.fixture
def valid_input():
    return {
        "name": "Cường",
        "position": "Nhân viên",
        "department": "Kinh doanh",
        "salary": 12000000,
        "status": "Thử việc",
    }


@pytest.fixture
def store(sample_employees):
    return InMemoryEmployeeStore(sample_employees)


@pytest.fixture
def directory(store):
    d = EmployeeDirectory(store)
    d.load()
    return d


@pytest.fixture
def session_factory():
    """SQLite trong bộ nhớ, dùng chung một connection cho mọi session."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def sql_store(session_factory):
    return SqlEmployeeStore(session_factory)
