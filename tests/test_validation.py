import pytest

from nhanvien.core.exceptions import ValidationError
from nhanvien.schemas.employee import EmployeeStatus
from nhanvien.services.validation import FIELD_RULES, validate


def test_validate_ok(valid_input):
    cleaned = validate(valid_input)
    assert cleaned == {
        "name": "Cường",
        "position": "Nhân viên",
        "department": "Kinh doanh",
        "salary": 12000000.0,
        "status": EmployeeStatus.PROBATION,
    }


def test_rule_order_matches_form():
    assert [r.field for r in FIELD_RULES] == ["name", "position", "department", "salary", "status"]


def test_empty_form_reports_name_first():
    with pytest.raises(ValidationError) as exc:
        validate({})
    assert exc.value.field == "name"
    assert exc.value.message == "Nhập họ tên!"


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("name", "", "Nhập họ tên!"),
        ("name", "   ", "Nhập họ tên!"),
        ("name", "A" * 51, "Tối đa 50 ký tự!"),
        ("name", 12345, "Nhập họ tên!"),
        ("position", ["IT"], "Chọn chức vụ!"),
        ("department", 1, "Chọn phòng ban!"),
        ("position", None, "Chọn chức vụ!"),
        ("position", "Thực tập sinh", "Chọn chức vụ!"),
        ("department", "Marketing", "Chọn phòng ban!"),
        ("salary", None, "Nhập lương!"),
        ("salary", "", "Nhập lương!"),
        ("salary", "abc", "Lương không hợp lệ!"),
        ("salary", -1, "Lương không hợp lệ!"),
        ("salary", True, "Lương không hợp lệ!"),
        ("salary", "inf", "Lương không hợp lệ!"),
        ("salary", "1e999", "Lương không hợp lệ!"),
        ("salary", float("inf"), "Lương không hợp lệ!"),
        ("salary", "nan", "Lương không hợp lệ!"),
        ("status", "Nghỉ việc", "Chọn trạng thái!"),
    ],
)
def test_validate_bad_field(valid_input, field, value, message):
    valid_input[field] = value
    with pytest.raises(ValidationError) as exc:
        validate(valid_input)
    assert exc.value.field == field
    assert exc.value.message == message


def test_first_unmet_field_wins(valid_input):
    valid_input["department"] = ""
    valid_input["status"] = ""
    with pytest.raises(ValidationError) as exc:
        validate(valid_input)
    assert exc.value.field == "department"


def test_name_at_max_length_and_stripped(valid_input):
    valid_input["name"] = "  " + "A" * 50 + "  "
    assert validate(valid_input)["name"] == "A" * 50


def test_salary_from_form_text(valid_input):
    valid_input["salary"] = " 15000000 "
    assert validate(valid_input)["salary"] == 15000000.0


def test_zero_salary_allowed(valid_input):
    valid_input["salary"] = 0
    assert validate(valid_input)["salary"] == 0.0


def test_extra_fields_are_dropped(valid_input):
    valid_input["id"] = "NV999"
    assert "id" not in validate(valid_input)
