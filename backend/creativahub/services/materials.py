import logging
from typing import List

from sqlmodel import Session, select

from ..models import LearningMaterial
from ..schemas import LearningMaterialCreate
from ..utils.course_access import ensure_teacher_course_permission, require_course


logger = logging.getLogger(__name__)


def create_learning_material(session: Session, payload: LearningMaterialCreate) -> LearningMaterial:
    course = require_course(session, payload.course_id)
    if payload.created_by is not None:
        ensure_teacher_course_permission(session, payload.created_by, course)

    material = LearningMaterial(
        course_id=course.id,
        title=payload.title,
        description=payload.description,
        content_url=payload.content_url,
        file_url=payload.file_url,
        material_type=payload.material_type,
        order_index=payload.order_index,
    )
    session.add(material)
    session.commit()
    session.refresh(material)
    logger.info("Created learning material %s in course %s", material.id, course.id)
    return material


def get_course_learning_materials(session: Session, course_id: int) -> List[LearningMaterial]:
    stmt = (
        select(LearningMaterial)
        .where(LearningMaterial.course_id == course_id)
        .order_by(LearningMaterial.order_index, LearningMaterial.id)
    )
    return session.exec(stmt).all()
