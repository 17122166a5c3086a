from ..core.config import logger
from ..core.exceptions import ValidationError
from ..schemas.employee import Employee
from ..services.employee_store import EmployeeStore
from ..services.validation import validate

# Import the `employees` list from the `employees` module
from ..employees import employees


def seed_employees_from_source(store: EmployeeStore, employees_source: list[dict]) -> int:
    """
    Nạp danh sách nhân viên mẫu vào store nếu store đang trống.
    - Sử dụng employee_id trong file nguồn làm mã nhân viên.
    - Bản ghi không hợp lệ sẽ bị bỏ qua và ghi log cảnh báo.
    Trả về số nhân viên đã thêm.
    """
    existing = store.list()
    if existing:
        logger.info(f"[SEED] Đã có {len(existing)} nhân viên trong DB, bỏ qua nạp dữ liệu mẫu.")
        return 0

    added = 0
    seen_ids = set()
    for emp in employees_source:
        employee_id = (emp.get("employee_id") or "").strip()
        if not employee_id or employee_id in seen_ids:
            logger.warning(f"[SEED] Bỏ qua nhân viên '{emp.get('name')}' vì mã '{employee_id}' trống hoặc bị trùng.")
            continue

        try:
            cleaned = validate(emp)
        except ValidationError as e:
            logger.warning(f"[SEED] Bỏ qua nhân viên '{employee_id}': {e.message}")
            continue

        store.create(Employee(id=employee_id, **cleaned))
        seen_ids.add(employee_id)
        added += 1
        logger.debug(f"[SEED] Thêm nhân viên mẫu: {employee_id} - {cleaned['name']}")

    logger.info(f"[SEED] Đã thêm {added} nhân viên mẫu.")
    return added


def seed_employees_on_startup(store: EmployeeStore) -> int:
    """Nạp dữ liệu từ file `employees.py` vào DB khi khởi động."""
    logger.info("Starting employee seed on startup...")
    added = seed_employees_from_source(store=store, employees_source=employees)
    logger.info("Employee seed on startup finished.")
    return added
