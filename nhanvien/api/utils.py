from datetime import datetime
from fastapi import APIRouter

from ..core.utils import VN_TZ

router = APIRouter(tags=["Utilities"])

@router.get("/ping")
async def ping():
    """
    Endpoint để kiểm tra "sức khỏe" của ứng dụng, hữu ích cho các dịch vụ giám sát.
    """
    return {"status": "ok", "timestamp": datetime.now(VN_TZ).isoformat()}
