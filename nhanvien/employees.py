# employees.py
# Danh sách nhân viên mẫu - chỉ được nạp khi bảng `employees` còn trống.
# Mã nhân viên đi liền nhau NV001, NV002, ... giống cách danh bạ tự cấp mã.

employees = [
#--------------------------------------- KẾ TOÁN --------------------------------------------#
    {
        "employee_id": "NV001", "name": "Phạm Thị Quỳnh Như", "position": "Trưởng phòng",
        "department": "Kế toán", "salary": 25000000, "status": "Đã ký hợp đồng"
    },
    {
        "employee_id": "NV002", "name": "Trần Thị Mỹ Diễm", "position": "Nhân viên",
        "department": "Kế toán", "salary": 12000000, "status": "Thử việc"
    },
#--------------------------------------- NHÂN SỰ --------------------------------------------#
    {
        "employee_id": "NV003", "name": "Đỗ Kim Phượng", "position": "Trưởng phòng",
        "department": "Nhân sự", "salary": 22000000, "status": "Đã ký hợp đồng"
    },
    {
        "employee_id": "NV004", "name": "Phan Phương Thúy", "position": "Nhân viên",
        "department": "Nhân sự", "salary": 11000000, "status": "Thử việc"
    },
#--------------------------------------- IT --------------------------------------------#
    {
        "employee_id": "NV005", "name": "Ngô Bảo Trân", "position": "Nhân viên",
        "department": "IT", "salary": 18000000, "status": "Đã ký hợp đồng"
    },
    {
        "employee_id": "NV006", "name": "Nguyễn Thị Ngọc Linh", "position": "Nhân viên",
        "department": "IT", "salary": 15000000, "status": "Thử việc"
    },
#--------------------------------------- KINH DOANH --------------------------------------------#
    {
        "employee_id": "NV007", "name": "Lê Văn Hùng", "position": "Giám đốc",
        "department": "Kinh doanh", "salary": 45000000, "status": "Đã ký hợp đồng"
    },
    {
        "employee_id": "NV008", "name": "Võ Minh Tâm", "position": "Nhân viên",
        "department": "Kinh doanh", "salary": 13500000, "status": "Thử việc"
    },
]
