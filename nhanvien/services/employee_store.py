# nhanvien/services/employee_store.py
"""
Nơi lưu trữ nhân viên (persistence collaborator) mà danh bạ gọi tới.

`EmployeeDirectory` chỉ biết 4 thao tác: list / create / update / remove.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from sqlalchemy.orm import Session

from ..core.config import logger
from ..core.exceptions import NotFoundError
from ..core.utils import now_vn
from ..db.models import EmployeeRecord
from ..schemas.employee import Employee, EmployeeStatus


class EmployeeStore(ABC):
    @abstractmethod
    def list(self) -> List[Employee]:
        """Trả về toàn bộ nhân viên theo thứ tự thêm vào."""

    @abstractmethod
    def create(self, employee: Employee) -> None:
        pass

    @abstractmethod
    def update(self, employee: Employee) -> None:
        """Ghi đè bản ghi có cùng `id`."""

    @abstractmethod
    def remove(self, employee_id: str) -> None:
        pass


class InMemoryEmployeeStore(EmployeeStore):
    """Lưu trong bộ nhớ, dùng cho test và khi chạy không có database."""

    def __init__(self, employees=None):
        self._employees: List[Employee] = list(employees or [])

    def list(self) -> List[Employee]:
        return list(self._employees)

    def create(self, employee: Employee) -> None:
        self._employees.append(employee)

    def update(self, employee: Employee) -> None:
        for index, existing in enumerate(self._employees):
            if existing.id == employee.id:
                self._employees[index] = employee
                return
        raise NotFoundError(employee.id)

    def remove(self, employee_id: str) -> None:
        remaining = [e for e in self._employees if e.id != employee_id]
        if len(remaining) == len(self._employees):
            raise NotFoundError(employee_id)
        self._employees = remaining


class SqlEmployeeStore(EmployeeStore):
    """
    Lưu nhân viên vào bảng `employees` qua SQLAlchemy.
    Mỗi thao tác mở một session riêng và commit ngay.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    @staticmethod
    def _to_schema(record: EmployeeRecord) -> Employee:
        return Employee(
            id=record.employee_id,
            name=record.name,
            position=record.position,
            department=record.department,
            salary=float(record.salary),
            status=record.status,
        )

    @staticmethod
    def _get_record(db: Session, employee_id: str) -> EmployeeRecord:
        record = db.query(EmployeeRecord).filter(EmployeeRecord.employee_id == employee_id).first()
        if not record:
            raise NotFoundError(employee_id)
        return record

    def list(self) -> List[Employee]:
        with self.session_factory() as db:
            records = db.query(EmployeeRecord).order_by(EmployeeRecord.id).all()
            return [self._to_schema(r) for r in records]

    def create(self, employee: Employee) -> None:
        with self.session_factory() as db:
            db.add(EmployeeRecord(
                employee_id=employee.id,
                name=employee.name,
                position=employee.position,
                department=employee.department,
                salary=employee.salary,
                status=EmployeeStatus(employee.status).value,
                created_at=now_vn(),
            ))
            db.commit()
        logger.debug(f"[STORE] Đã lưu nhân viên mới {employee.id}.")

    def update(self, employee: Employee) -> None:
        with self.session_factory() as db:
            record = self._get_record(db, employee.id)
            record.name = employee.name
            record.position = employee.position
            record.department = employee.department
            record.salary = employee.salary
            record.status = EmployeeStatus(employee.status).value
            db.commit()
        logger.debug(f"[STORE] Đã cập nhật nhân viên {employee.id}.")

    def remove(self, employee_id: str) -> None:
        with self.session_factory() as db:
            record = self._get_record(db, employee_id)
            db.delete(record)
            db.commit()
        logger.debug(f"[STORE] Đã xoá nhân viên {employee_id}.")
