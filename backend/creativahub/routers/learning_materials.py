from fastapi import APIRouter, Depends, status
from typing import List

from ..db import get_session
from ..models import LearningMaterial
from ..schemas import LearningMaterialCreate
from ..services import materials as material_service


router = APIRouter(prefix="/learning-materials", tags=["learning-materials"])


@router.post("/", response_model=LearningMaterial, status_code=status.HTTP_201_CREATED)
def create_material(payload: LearningMaterialCreate, session=Depends(get_session)):
    return material_service.create_learning_material(session, payload)


@router.get("/", response_model=List[LearningMaterial])
def list_course_materials(course_id: int, session=Depends(get_session)):
    return material_service.get_course_learning_materials(session, course_id)
