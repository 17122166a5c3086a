# nhanvien/services/validation.py
"""
Kiểm tra dữ liệu form nhân viên bằng một bảng ràng buộc khai báo.

Mỗi trường có một `FieldRule` (bắt buộc, độ dài tối đa, tập giá trị cho phép).
`validate()` duyệt bảng theo thứ tự và dừng ở trường đầu tiên không đạt.
"""
from dataclasses import dataclass
import math
from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.config import DEPARTMENTS, NAME_MAX_LENGTH, POSITIONS, STATUSES
from ..core.exceptions import ValidationError
from ..schemas.employee import EmployeeStatus


@dataclass(frozen=True)
class FieldRule:
    field: str
    required_message: str
    max_length: Optional[int] = None
    max_length_message: str = ""
    allowed: Optional[Sequence[str]] = None
    numeric: bool = False


# Thứ tự trong bảng cũng là thứ tự báo lỗi
FIELD_RULES = (
    FieldRule("name", "Nhập họ tên!", max_length=NAME_MAX_LENGTH, max_length_message="Tối đa 50 ký tự!"),
    FieldRule("position", "Chọn chức vụ!", allowed=POSITIONS),
    FieldRule("department", "Chọn phòng ban!", allowed=DEPARTMENTS),
    FieldRule("salary", "Nhập lương!", numeric=True),
    FieldRule("status", "Chọn trạng thái!", allowed=STATUSES),
)

INVALID_SALARY_MESSAGE = "Lương không hợp lệ!"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_salary(value: Any) -> float:
    # bool là lớp con của int nhưng không phải là lương
    if isinstance(value, bool):
        raise ValueError(value)
    salary = float(str(value).strip()) if isinstance(value, str) else float(value)
    if not math.isfinite(salary) or salary < 0:  # NaN, vô cực hoặc âm
        raise ValueError(value)
    return salary


def check_field(rule: FieldRule, value: Any) -> Any:
    """Kiểm tra một trường theo rule, trả về giá trị đã chuẩn hoá."""
    if _is_blank(value):
        raise ValidationError(rule.field, rule.required_message)

    # Họ tên và các ô chọn chỉ nhận chuỗi
    if rule.max_length is not None or rule.allowed is not None:
        if not isinstance(value, str):
            raise ValidationError(rule.field, rule.required_message)

    if isinstance(value, str):
        value = value.strip()

    if rule.max_length is not None and len(str(value)) > rule.max_length:
        raise ValidationError(rule.field, rule.max_length_message)

    if rule.allowed is not None and value not in rule.allowed:
        raise ValidationError(rule.field, rule.required_message)

    if rule.numeric:
        try:
            value = _to_salary(value)
        except (TypeError, ValueError):
            raise ValidationError(rule.field, INVALID_SALARY_MESSAGE)

    return value


def validate(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Kiểm tra toàn bộ dữ liệu form.
    Trả về dict đã chuẩn hoá (chỉ gồm các trường trong bảng) hoặc ném ValidationError
    cho trường đầu tiên không đạt. Không có tác dụng phụ.
    """
    cleaned: Dict[str, Any] = {}
    for rule in FIELD_RULES:
        cleaned[rule.field] = check_field(rule, values.get(rule.field))
    cleaned["status"] = EmployeeStatus(cleaned["status"])
    return cleaned
