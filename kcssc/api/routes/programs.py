from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from kcssc.core.database import get_db
from kcssc.schemas.program import ProgramCreate, ProgramUpdate, ProgramResponse, ProgramFilters
from kcssc.services.program_service import ProgramService

router = APIRouter()


@router.get("/programs", response_model=List[ProgramResponse], response_model_exclude_none=True)
def list_programs(
    category: Optional[str] = None,
    age_group: Optional[str] = Query(None, alias="ageGroup"),
    db: Session = Depends(get_db)
):
    filters = ProgramFilters(category=category, age_group=age_group)
    return [ProgramService.to_response(p) for p in ProgramService.list_programs(db, filters)]


@router.get("/programs/{program_id}", response_model=ProgramResponse, response_model_exclude_none=True)
def get_program(program_id: int, db: Session = Depends(get_db)):
    program = ProgramService.get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    return ProgramService.to_response(program)


@router.post("/programs", response_model=ProgramResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def create_program(data: ProgramCreate, db: Session = Depends(get_db)):
    program = ProgramService.create_program(db, data)
    return ProgramService.to_response(program)


@router.put("/programs/{program_id}", response_model=ProgramResponse, response_model_exclude_none=True)
def update_program(program_id: int, data: ProgramUpdate, db: Session = Depends(get_db)):
    program = ProgramService.get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    program = ProgramService.update_program(db, program, data)
    return ProgramService.to_response(program)


@router.delete("/programs/{program_id}")
def delete_program(program_id: int, db: Session = Depends(get_db)):
    program = ProgramService.get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    ProgramService.delete_program(db, program)
    return {"message": "Program deleted successfully", "id": program_id}
