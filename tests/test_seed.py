from nhanvien.db.utils import seed_employees_from_source, seed_employees_on_startup
from nhanvien.employees import employees
from nhanvien.services.employee_store import InMemoryEmployeeStore


def test_seed_source_is_valid():
    store = InMemoryEmployeeStore()
    assert seed_employees_on_startup(store) == len(employees)
    assert [e.id for e in store.list()] == [emp["employee_id"] for emp in employees]


def test_seed_skips_non_empty_store(sample_employees):
    store = InMemoryEmployeeStore(sample_employees)
    assert seed_employees_on_startup(store) == 0
    assert store.list() == sample_employees


def test_seed_skips_invalid_and_duplicate_rows():
    source = [
        {"employee_id": "NV001", "name": "An", "position": "Nhân viên",
         "department": "IT", "salary": 1000, "status": "Thử việc"},
        {"employee_id": "NV001", "name": "Trùng", "position": "Nhân viên",
         "department": "IT", "salary": 1000, "status": "Thử việc"},
        {"employee_id": "NV002", "name": "", "position": "Nhân viên",
         "department": "IT", "salary": 1000, "status": "Thử việc"},
        {"employee_id": "", "name": "Không mã", "position": "Nhân viên",
         "department": "IT", "salary": 1000, "status": "Thử việc"},
    ]
    store = InMemoryEmployeeStore()
    assert seed_employees_from_source(store, source) == 1
    assert [e.name for e in store.list()] == ["An"]
