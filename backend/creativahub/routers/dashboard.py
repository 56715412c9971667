from fastapi import APIRouter, Depends

from ..db import get_session
from ..schemas import DashboardData
from ..services.dashboard import get_dashboard_data


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardData, response_model_exclude_none=True)
def dashboard(user_id: int, role: str, session=Depends(get_session)):
    return get_dashboard_data(session, user_id, role)
