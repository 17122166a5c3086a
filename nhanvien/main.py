# nhanvien/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

# --- IMPORT MODULES ---
from .api import employees, utils

from .core.config import settings, logger
from .db.session import SessionLocal, engine, Base
from .db.utils import seed_employees_on_startup
from .services.employee_service import EmployeeDirectory
from .services.employee_store import SqlEmployeeStore


def init_directory() -> EmployeeDirectory:
    """
    Khởi tạo DB và nạp danh bạ nhân viên.
    """
    # Tạo bảng nếu chưa có
    Base.metadata.create_all(bind=engine)

    store = SqlEmployeeStore(SessionLocal)
    try:
        if settings.SEED_ON_STARTUP:
            seed_employees_on_startup(store)
    except Exception as e:
        logger.error(f"❌ Lỗi khi nạp dữ liệu mẫu: {e}", exc_info=True)

    # Danh bạ chỉ nạp một lần, không tự làm mới từ DB sau đó
    directory = EmployeeDirectory(store)
    directory.load()
    return directory


# --- STARTUP ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Bắt đầu quá trình khởi động ứng dụng...")
    app.state.directory = init_directory()
    logger.info("✅ Startup hoàn tất.")
    yield


# --- KHỞI TẠO APP ---
app = FastAPI(
    title="Quản lý nhân viên",
    description="Danh bạ nhân viên nội bộ: thêm, sửa, xoá, tìm kiếm và lọc.",
    version="1.0.0",
    lifespan=lifespan,
)


# --- ROUTERS ---
app.include_router(employees.router, tags=["Employees"])
app.include_router(utils.router, tags=["Utilities"])


# --- ROOT ENDPOINT ---
@app.get("/", include_in_schema=False)
def root(request: Request):
    """
    Điều hướng về danh sách nhân viên
    """
    return RedirectResponse(url="/api/employees", status_code=303)
