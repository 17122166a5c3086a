import pytest
from sqlalchemy.exc import IntegrityError

from nhanvien.core.exceptions import NotFoundError
from nhanvien.db.models import EmployeeRecord
from nhanvien.schemas.employee import Employee
from nhanvien.services.employee_service import EmployeeDirectory
from nhanvien.services.employee_store import InMemoryEmployeeStore


def test_in_memory_store_crud(sample_employees):
    store = InMemoryEmployeeStore()
    for e in sample_employees:
        store.create(e)
    assert store.list() == sample_employees

    changed = sample_employees[0].model_copy(update={"name": "An Trần"})
    store.update(changed)
    assert store.list()[0].name == "An Trần"

    store.remove("NV001")
    assert [e.id for e in store.list()] == ["NV002"]

    with pytest.raises(NotFoundError):
        store.update(changed)
    with pytest.raises(NotFoundError):
        store.remove("NV001")


def test_in_memory_store_list_is_a_copy(sample_employees):
    store = InMemoryEmployeeStore(sample_employees)
    store.list().clear()
    assert len(store.list()) == 2


def test_sql_store_keeps_insertion_order(sql_store, sample_employees):
    for e in reversed(sample_employees):
        sql_store.create(e)
    assert [e.id for e in sql_store.list()] == ["NV002", "NV001"]


def test_sql_store_round_trip(sql_store, sample_employees, session_factory):
    sql_store.create(sample_employees[1])
    loaded = sql_store.list()[0]
    assert loaded == sample_employees[1]
    assert loaded.is_under_contract

    with session_factory() as db:
        record = db.query(EmployeeRecord).filter(EmployeeRecord.employee_id == "NV002").one()
        assert record.status == "Đã ký hợp đồng"
        assert record.created_at is not None


def test_sql_store_update_and_remove(sql_store, sample_employees):
    for e in sample_employees:
        sql_store.create(e)

    sql_store.update(Employee(**{**sample_employees[0].model_dump(), "salary": 11000000.0, "status": "Đã ký hợp đồng"}))
    first = sql_store.list()[0]
    assert first.salary == 11000000.0
    assert first.is_under_contract

    sql_store.remove("NV002")
    assert [e.id for e in sql_store.list()] == ["NV001"]


def test_sql_store_unknown_id(sql_store, sample_employees):
    with pytest.raises(NotFoundError):
        sql_store.update(sample_employees[0])
    with pytest.raises(NotFoundError):
        sql_store.remove("NV404")


def test_sql_store_rejects_duplicate_id(sql_store, sample_employees):
    sql_store.create(sample_employees[0])
    with pytest.raises(IntegrityError):
        sql_store.create(sample_employees[0])


def test_directory_over_sql_store(sql_store, sample_employees, valid_input):
    for e in sample_employees:
        sql_store.create(e)
    directory = EmployeeDirectory(sql_store)
    assert directory.load() == 2

    created = directory.save(valid_input)
    assert created.id == "NV003"
    directory.delete("NV001", lambda _employee: True)

    reloaded = EmployeeDirectory(sql_store)
    reloaded.load()
    assert [e.id for e in reloaded.employees] == ["NV002", "NV003"]
