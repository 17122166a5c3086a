from datetime import datetime
from pytz import timezone
from typing import Optional, Union
import re

from .config import ID_PREFIX

# --- CÁC HẰNG SỐ CỦA ỨNG DỤNG ---
VN_TZ = timezone("Asia/Ho_Chi_Minh")

_EMPLOYEE_ID_RE = re.compile(rf"^{ID_PREFIX}(\d+)$")

def now_vn() -> datetime:
    """Thời điểm hiện tại theo giờ Việt Nam (có timezone)."""
    return datetime.now(VN_TZ)

def employee_id_sequence(employee_id: str) -> Optional[int]:
    """
    Lấy phần số của mã nhân viên, ví dụ 'NV007' -> 7.
    Trả về None nếu mã không theo định dạng NVxxx.
    """
    match = _EMPLOYEE_ID_RE.match(employee_id or "")
    if not match:
        return None
    return int(match.group(1))

def format_salary(salary: Union[int, float, None]) -> str:
    """
    Định dạng lương để hiển thị trên bảng, ví dụ 15000000 -> '$15,000,000'.
    Số lẻ được giữ tối đa 2 chữ số thập phân.
    """
    if salary is None:
        return ""
    if float(salary).is_integer():
        return f"${int(salary):,}"
    return f"${salary:,.2f}".rstrip("0").rstrip(".")
