# models.py
from sqlalchemy import Column, String, Integer, DateTime, NUMERIC, Index

from .session import Base

# ====================================================================
# BẢNG NHÂN VIÊN (EMPLOYEES)
# ====================================================================

class EmployeeRecord(Base):
    """
    Bảng lưu danh bạ nhân viên.
    `id` là khóa tự tăng, giữ thứ tự thêm vào; `employee_id` là mã nghiệp vụ (NV001, ...).
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(50), nullable=False)
    position = Column(String(50), nullable=False)
    department = Column(String(50), nullable=False)
    salary = Column(NUMERIC(15, 2), nullable=False)
    status = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True))

    __table_args__ = (
        Index("ix_employees_position_department", "position", "department"),
    )

    def __repr__(self) -> str:
        return f"EmployeeRecord(employee_id={self.employee_id}, name={self.name}, status={self.status})"
