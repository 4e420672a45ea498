import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from kcssc.models.program import Program
from kcssc.schemas.program import ProgramCreate, ProgramUpdate, ProgramResponse, ProgramFilters, recurrence_fields

logger = logging.getLogger(__name__)


class ProgramService:

    @staticmethod
    def to_response(program: Program) -> ProgramResponse:
        return ProgramResponse(
            id=program.id,
            title=program.title,
            category=program.category,
            icon=program.icon,
            schedule=program.schedule,
            age_group=program.age_group,
            description=program.description,
            spots=program.spots or "",
            image_url=program.image_url or None,
            **recurrence_fields(program.recurrence),
        )

    @staticmethod
    def list_programs(db: Session, filters: Optional[ProgramFilters] = None) -> List[Program]:
        query = db.query(Program)
        if filters is not None:
            if filters.category:
                query = query.filter(Program.category == filters.category)
            if filters.age_group:
                query = query.filter(Program.age_group == filters.age_group)
        return query.order_by(Program.title.asc()).all()

    @staticmethod
    def get_program(db: Session, program_id: int) -> Optional[Program]:
        return db.query(Program).filter(Program.id == program_id).first()

    @staticmethod
    def create_program(db: Session, data: ProgramCreate) -> Program:
        program = Program(
            title=data.title,
            category=data.category,
            icon=data.icon,
            age_group=data.age_group,
            description=data.description,
            spots=data.spots,
            image_url=data.image_url or None,
        )
        program.set_schedule(data.schedule)
        if program.schedule_days is None:
            logger.info(f"No weekday found in schedule {data.schedule!r}; program '{data.title}' won't appear on the calendar")

        try:
            db.add(program)
            db.commit()
            db.refresh(program)
        except Exception as e:
            logger.error(f"Error creating program: {e}")
            db.rollback()
            raise
        return program

    @staticmethod
    def update_program(db: Session, program: Program, data: ProgramUpdate) -> Program:
        changes = data.model_dump(exclude_unset=True)

        if changes.get("schedule"):
            program.set_schedule(changes["schedule"])
        for field in ("title", "category", "icon", "age_group", "description"):
            if changes.get(field) is not None:
                setattr(program, field, changes[field])
        if "spots" in changes:
            program.spots = changes["spots"] or ""
        if "image_url" in changes:
            program.image_url = changes["image_url"] or None

        try:
            db.commit()
            db.refresh(program)
        except Exception as e:
            logger.error(f"Error updating program {program.id}: {e}")
            db.rollback()
            raise
        return program

    @staticmethod
    def delete_program(db: Session, program: Program) -> None:
        try:
            db.delete(program)
            db.commit()
        except Exception as e:
            logger.error(f"Error deleting program {program.id}: {e}")
            db.rollback()
            raise
