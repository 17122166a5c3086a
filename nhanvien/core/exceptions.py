# nhanvien/core/exceptions.py
# Các lỗi nghiệp vụ của danh bạ nhân viên. Tầng API sẽ dịch chúng sang HTTP status.


class DirectoryError(Exception):
    """Lỗi gốc cho mọi thao tác trên danh bạ nhân viên."""


class ValidationError(DirectoryError):
    """Dữ liệu form không hợp lệ. `field` là trường đầu tiên không đạt."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class DeleteGuardError(DirectoryError):
    """Không được xoá nhân viên đã ký hợp đồng."""

    def __init__(self, employee_id: str):
        super().__init__(f"Không thể xóa nhân viên đã ký hợp đồng: {employee_id}")
        self.employee_id = employee_id


class NotFoundError(DirectoryError):
    def __init__(self, employee_id: str):
        super().__init__(f"Không tìm thấy nhân viên: {employee_id}")
        self.employee_id = employee_id
