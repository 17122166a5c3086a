# nhanvien/services/employee_service.py
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..core.config import ID_PREFIX, ID_WIDTH, logger
from ..core.exceptions import DeleteGuardError, NotFoundError
from ..core.utils import employee_id_sequence
from ..schemas.employee import Employee
from .employee_store import EmployeeStore
from .validation import validate

# Hộp thoại xác nhận: nhận nhân viên sắp bị xoá, trả về True nếu người dùng đồng ý
ConfirmCallback = Callable[[Employee], bool]


def generate_id(current_count: int) -> str:
    """Tạo mã nhân viên từ số lượng hiện tại: 0 -> 'NV001', 9 -> 'NV010', 999 -> 'NV1000'."""
    return f"{ID_PREFIX}{str(current_count + 1).zfill(ID_WIDTH)}"


def sort_by_salary(employees: Iterable[Employee]) -> List[Employee]:
    """Sắp xếp lương giảm dần cho bảng hiển thị. Giữ nguyên thứ tự khi lương bằng nhau."""
    return sorted(employees, key=lambda e: e.salary, reverse=True)


class EmployeeDirectory:
    """
    Danh bạ nhân viên trong bộ nhớ.

    Chỉ giữ danh sách nhân viên; trạng thái giao diện (ô tìm kiếm, bộ lọc, nhân viên
    đang sửa) do tầng trình bày truyền vào từng lời gọi.
    Mọi thay đổi được ghi xuống `store` trước, sau đó mới cập nhật danh sách trong bộ nhớ;
    nếu store ném lỗi thì danh sách giữ nguyên.
    """

    def __init__(self, store: EmployeeStore):
        self.store = store
        self._employees: List[Employee] = []
        # Số thứ tự lớn nhất đã cấp trong phiên, để không cấp lại mã của người đã bị xoá
        self._last_issued = 0

    def __len__(self) -> int:
        return len(self._employees)

    @property
    def employees(self) -> Tuple[Employee, ...]:
        return tuple(self._employees)

    def load(self) -> int:
        """Nạp lại toàn bộ danh sách từ store. Gọi một lần khi khởi động."""
        try:
            loaded = list(self.store.list())
        except Exception as e:
            logger.error(f"[DIRECTORY] Không nạp được danh sách nhân viên: {e}", exc_info=True)
            return 0

        self._employees = loaded
        logger.info(f"[DIRECTORY] Đã nạp {len(loaded)} nhân viên.")
        return len(loaded)

    def get(self, employee_id: str) -> Optional[Employee]:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def _index_of(self, employee_id: str) -> int:
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return index
        return -1

    def next_id(self) -> str:
        """
        Mã cho nhân viên mới.
        Lấy số lớn nhất trong: số lượng hiện tại, hậu tố số của các mã đang có và
        số đã cấp trong phiên; sau khi xoá vẫn không trùng mã cũ.
        """
        sequences = [employee_id_sequence(e.id) for e in self._employees]
        highest = max([len(self._employees), self._last_issued] + [s for s in sequences if s is not None])
        return generate_id(highest)

    def save(self, values: Mapping[str, Any], editing_id: Optional[str] = None) -> Employee:
        """
        Thêm mới (khi không có `editing_id`) hoặc cập nhật nhân viên.
        Ném ValidationError nếu form không hợp lệ, NotFoundError nếu `editing_id` không tồn tại.
        """
        cleaned = validate(values)

        if editing_id:
            index = self._index_of(editing_id)
            if index < 0:
                raise NotFoundError(editing_id)
            updated = Employee(id=editing_id, **cleaned)
            self.store.update(updated)
            self._employees[index] = updated
            logger.info(f"[DIRECTORY] Cập nhật nhân viên {updated.id} - {updated.name}")
            return updated

        new_employee = Employee(id=self.next_id(), **cleaned)
        self.store.create(new_employee)
        self._employees.append(new_employee)
        self._last_issued = max(self._last_issued, employee_id_sequence(new_employee.id))
        logger.info(f"[DIRECTORY] Thêm nhân viên mới {new_employee.id} - {new_employee.name}")
        return new_employee

    def delete(self, employee_id: str, confirm: ConfirmCallback) -> bool:
        """
        Xoá nhân viên sau khi `confirm` trả về True.
        Nhân viên đã ký hợp đồng không bao giờ bị xoá (DeleteGuardError).
        Trả về True nếu đã xoá; False nếu không tìm thấy hoặc người dùng huỷ.
        """
        employee = self.get(employee_id)
        if employee is None:
            return False

        if employee.is_under_contract:
            logger.warning(f"[DIRECTORY] Từ chối xoá {employee_id}: nhân viên đã ký hợp đồng.")
            raise DeleteGuardError(employee_id)

        if not confirm(employee):
            return False

        self.store.remove(employee_id)
        self._employees = [e for e in self._employees if e.id != employee_id]
        logger.info(f"[DIRECTORY] Đã xoá nhân viên {employee_id} - {employee.name}")
        return True

    def filtered_view(self, search_text: str = "", position: str = "", department: str = "") -> Iterator[Employee]:
        """
        Lọc danh sách theo chức vụ, phòng ban và ô tìm kiếm (mã hoặc họ tên).
        Mã so khớp phân biệt hoa thường, họ tên thì không. Giữ nguyên thứ tự danh sách.
        """
        search_text = search_text or ""
        needle = search_text.casefold()
        for employee in list(self._employees):
            if position and employee.position != position:
                continue
            if department and employee.department != department:
                continue
            if search_text and search_text not in employee.id and needle not in employee.name.casefold():
                continue
            yield employee
