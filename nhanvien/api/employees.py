# nhanvien/api/employees.py
# Trang "Quản lý nhân viên": bảng, ô tìm kiếm, bộ lọc và form thêm/sửa/xoá.
# Trạng thái giao diện (tìm kiếm, bộ lọc, nhân viên đang sửa) nằm ở phía client
# và được gửi lên qua query/path; danh bạ chỉ giữ danh sách nhân viên.

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from typing import Optional, Protocol
import threading

from ..core.config import logger, POSITIONS, DEPARTMENTS, STATUSES
from ..core.exceptions import ValidationError, DeleteGuardError, NotFoundError
from ..core.utils import format_salary
from ..services.employee_service import EmployeeDirectory, sort_by_salary

# --- IMPORT CÁC SCHEMAS ---
from ..schemas.employee import (
    Employee, EmployeeInput, DeleteEmployeePayload,
    EmployeeDetails, EmployeesResponse, EmployeeOptions
)

router = APIRouter(prefix="/api/employees")

FORM_INCOMPLETE_MESSAGE = "Vui lòng điền đầy đủ thông tin!"
DELETE_GUARD_MESSAGE = "Không thể xóa nhân viên đã ký hợp đồng!"

# Endpoint sync chạy trong threadpool; thêm/sửa/xoá phải chạy lần lượt để không cấp trùng mã
_mutation_lock = threading.Lock()


class Notifier(Protocol):
    """Hiển thị thông báo cho người dùng (toast), mức info hoặc error."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LogNotifier:
    """Notifier mặc định: ghi thông báo ra log của ứng dụng."""

    def info(self, message: str) -> None:
        logger.info(f"[NOTIFY] {message}")

    def error(self, message: str) -> None:
        logger.error(f"[NOTIFY] {message}")


def get_directory(request: Request) -> EmployeeDirectory:
    """Dependency lấy danh bạ đã nạp lúc khởi động."""
    directory = getattr(request.app.state, "directory", None)
    if directory is None:
        raise HTTPException(status_code=503, detail="Danh bạ nhân viên chưa sẵn sàng.")
    return directory


def get_notifier() -> Notifier:
    return LogNotifier()


def _serialize_employee(employee: Employee) -> dict:
    """Chuyển Employee thành dict JSON, kèm lương đã định dạng để hiển thị."""
    details = EmployeeDetails(
        id=employee.id,
        name=employee.name,
        position=employee.position,
        department=employee.department,
        salary=employee.salary,
        salary_display=format_salary(employee.salary),
        status=employee.status.value,
    )
    return jsonable_encoder(details)


@router.get("", response_model=EmployeesResponse)
def list_employees(
    search: Optional[str] = None,
    position: Optional[str] = None,
    department: Optional[str] = None,
    sort_salary: bool = False,
    directory: EmployeeDirectory = Depends(get_directory),
):
    """
    Danh sách nhân viên đã lọc theo ô tìm kiếm (mã, họ tên), chức vụ và phòng ban.
    `sort_salary=true` sắp xếp lương giảm dần như khi bấm vào cột "Lương".
    """
    employees = list(directory.filtered_view(search or "", position or "", department or ""))
    if sort_salary:
        employees = sort_by_salary(employees)

    return {
        "records": [_serialize_employee(e) for e in employees],
        "total": len(employees),
    }


@router.get("/options", response_model=EmployeeOptions)
def employee_options():
    """Các giá trị cho ô chọn chức vụ, phòng ban, trạng thái."""
    return {"positions": POSITIONS, "departments": DEPARTMENTS, "statuses": STATUSES}


def _save(directory: EmployeeDirectory, notifier: Notifier, payload: EmployeeInput, editing_id: Optional[str] = None) -> dict:
    try:
        with _mutation_lock:
            employee = directory.save(payload.model_dump(), editing_id=editing_id)
    except ValidationError as e:
        notifier.error(FORM_INCOMPLETE_MESSAGE)
        raise HTTPException(status_code=400, detail=f"{FORM_INCOMPLETE_MESSAGE} {e.message}")
    except NotFoundError as e:
        notifier.error(str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Lỗi khi lưu nhân viên: {e}", exc_info=True)
        notifier.error("Lỗi server khi lưu nhân viên.")
        raise HTTPException(status_code=500, detail="Lỗi server khi lưu nhân viên.")

    message = "Đã cập nhật nhân viên." if editing_id else "Đã thêm nhân viên."
    notifier.info(message)
    return {"status": "success", "message": message, "employee": _serialize_employee(employee)}


@router.post("", status_code=201, response_model=dict)
def add_employee(
    payload: EmployeeInput,
    directory: EmployeeDirectory = Depends(get_directory),
    notifier: Notifier = Depends(get_notifier),
):
    return _save(directory, notifier, payload)


@router.post("/edit/{employee_id}", response_model=dict)
def edit_employee(
    employee_id: str,
    payload: EmployeeInput,
    directory: EmployeeDirectory = Depends(get_directory),
    notifier: Notifier = Depends(get_notifier),
):
    return _save(directory, notifier, payload, editing_id=employee_id)


@router.post("/delete/{employee_id}", response_class=JSONResponse)
def delete_employee(
    employee_id: str,
    payload: DeleteEmployeePayload,
    directory: EmployeeDirectory = Depends(get_directory),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Xoá nhân viên. Client đã hiển thị hộp thoại "Bạn có chắc chắn muốn xóa?"
    và gửi kết quả qua `confirmed`.
    """
    if directory.get(employee_id) is None:
        raise HTTPException(status_code=404, detail="Employee not found")

    try:
        with _mutation_lock:
            deleted = directory.delete(employee_id, confirm=lambda _employee: payload.confirmed)
    except DeleteGuardError:
        notifier.error(DELETE_GUARD_MESSAGE)
        raise HTTPException(status_code=409, detail=DELETE_GUARD_MESSAGE)
    except Exception as e:
        logger.error(f"Lỗi khi xoá nhân viên {employee_id}: {e}", exc_info=True)
        notifier.error("Lỗi server khi xóa.")
        raise HTTPException(status_code=500, detail="Lỗi server khi xóa.")

    if not deleted:
        return JSONResponse({"status": "cancelled", "message": "Đã huỷ thao tác xoá."})

    notifier.info("Đã xóa nhân viên.")
    return JSONResponse({
        "status": "success",
        "message": "Đã xóa nhân viên.",
        "deleted_id": employee_id,
    })
