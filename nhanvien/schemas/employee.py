# nhanvien/schemas/employee.py
import enum
from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

from ..core.config import STATUS_CONTRACT, STATUS_PROBATION


class EmployeeStatus(str, enum.Enum):
    """Trạng thái hợp đồng của nhân viên."""
    CONTRACT = STATUS_CONTRACT
    PROBATION = STATUS_PROBATION


# ====================================================================
# SCHEMA BẢN GHI (dùng trong service và store)
# ====================================================================

class Employee(BaseModel):
    """Một bản ghi nhân viên trong danh bạ. `id` không đổi sau khi tạo."""
    id: str
    name: str
    position: str
    department: str
    salary: float
    status: EmployeeStatus

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_under_contract(self) -> bool:
        return self.status == EmployeeStatus.CONTRACT


# ====================================================================
# SCHEMAS DÙNG CHO REQUEST BODY (Dữ liệu API nhận vào)
# ====================================================================

class EmployeeInput(BaseModel):
    """
    Dữ liệu form thêm/sửa nhân viên.
    Không ép kiểu ở đây; việc kiểm tra (bắt buộc, kiểu, độ dài, giá trị cho phép) do
    `services.validation` đảm nhận để luôn báo đúng trường đầu tiên không đạt.
    """
    name: Optional[Any] = None
    position: Optional[Any] = None
    department: Optional[Any] = None
    salary: Optional[Any] = None  # Form có thể gửi dạng chuỗi "15000000"
    status: Optional[Any] = None


class DeleteEmployeePayload(BaseModel):
    # Người dùng đã bấm OK ở hộp thoại "Bạn có chắc chắn muốn xóa?"
    confirmed: bool = False


# ====================================================================
# SCHEMAS DÙNG CHO RESPONSE (Dữ liệu API trả về)
# ====================================================================

class EmployeeDetails(BaseModel):
    id: str
    name: str
    position: str
    department: str
    salary: float
    salary_display: str
    status: str

    model_config = ConfigDict(from_attributes=True)


class EmployeesResponse(BaseModel):
    """Schema cho toàn bộ phản hồi của API /api/employees."""
    records: List[EmployeeDetails]
    total: int


class EmployeeOptions(BaseModel):
    positions: List[str]
    departments: List[str]
    statuses: List[str]
