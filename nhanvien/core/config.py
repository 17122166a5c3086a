import logging
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    """
    Quản lý cấu hình của ứng dụng bằng Pydantic.
    Tự động đọc các biến từ file .env bằng pydantic-settings.
    """
    # --- BIẾN MÔI TRƯỜNG & CẤU HÌNH ---
    DATABASE_URL: str = "sqlite:///./nhanvien.db"
    LOG_LEVEL: str = "INFO"
    # Nạp danh sách nhân viên mẫu từ `employees.py` khi bảng còn trống
    SEED_ON_STARTUP: bool = True

    @field_validator("DATABASE_URL", mode='before')
    def build_db_connection(cls, v: Optional[str]) -> str:
        if not v:
            raise ValueError("DATABASE_URL is not set in .env file!")

        # Sửa prefix postgres:// -> postgresql://
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)

        return v

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

# Khởi tạo một đối tượng settings duy nhất để dùng trong toàn bộ ứng dụng
settings = Settings()


# --- CẤU HÌNH LOGGING ---
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
)
logger = logging.getLogger("nhanvien-app")


# --- CÁC HẰNG SỐ CỦA ỨNG DỤNG ---
# Danh sách đóng, form chỉ cho chọn trong các giá trị này.

# Danh sách các chức vụ
POSITIONS = ["Nhân viên", "Trưởng phòng", "Giám đốc"]

# Danh sách các phòng ban
DEPARTMENTS = ["Kế toán", "Nhân sự", "IT", "Kinh doanh"]

# Trạng thái hợp đồng. Nhân viên "Đã ký hợp đồng" không được phép xoá.
STATUS_CONTRACT = "Đã ký hợp đồng"
STATUS_PROBATION = "Thử việc"
STATUSES = [STATUS_CONTRACT, STATUS_PROBATION]

# Mã nhân viên: NV001, NV002, ...
ID_PREFIX = "NV"
ID_WIDTH = 3

NAME_MAX_LENGTH = 50
