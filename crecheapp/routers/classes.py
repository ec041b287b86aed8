"""
Router das turmas e do vínculo turma ↔ alunos.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from crecheapp.database import get_db
from crecheapp.schemas.school_class import (
    ClassCreate,
    ClassResponse,
    ClassStudentAdd,
    ClassStudentResponse,
    ClassUpdate,
)
from crecheapp.services import class_service

router = APIRouter(prefix="/turmas", tags=["Turmas"])


@router.get("", response_model=List[ClassResponse], summary="Listar as turmas")
def list_classes(db: Session = Depends(get_db)):
    return class_service.get_classes(db)


@router.post("", response_model=ClassResponse, status_code=201, summary="Criar uma turma")
def create_class(data: ClassCreate, db: Session = Depends(get_db)):
    return class_service.create_class(db, data)


@router.put("/{turma_id}", response_model=ClassResponse, summary="Atualizar uma turma")
def update_class(turma_id: int, data: ClassUpdate, db: Session = Depends(get_db)):
    """Substitui nome e ano. A foto só é alterada quando enviada."""
    result = class_service.update_class(db, turma_id, data)
    if result is None:
        raise HTTPException(status_code=404, detail="Turma não encontrada.")
    return result


@router.delete("/{turma_id}", status_code=204, summary="Excluir uma turma")
def delete_class(turma_id: int, db: Session = Depends(get_db)):
    """Exclui a turma definitivamente, junto com os vínculos dos alunos."""
    if not class_service.delete_class(db, turma_id):
        raise HTTPException(status_code=404, detail="Turma não encontrada.")


# --- Alunos da turma ---

@router.get("/{turma_id}/alunos", response_model=List[ClassStudentResponse],
            summary="Listar os alunos de uma turma")
def list_class_students(turma_id: int, db: Session = Depends(get_db)):
    return class_service.get_class_students(db, turma_id)


@router.post("/{turma_id}/alunos", status_code=201, summary="Adicionar um aluno à turma")
def add_student(turma_id: int, data: ClassStudentAdd, db: Session = Depends(get_db)):
    class_service.add_student(db, turma_id, data.aluno_id)
    return {"message": "Aluno adicionado à turma."}


@router.delete("/{turma_id}/alunos/{aluno_id}", status_code=204, summary="Retirar um aluno da turma")
def remove_student(turma_id: int, aluno_id: int, db: Session = Depends(get_db)):
    if not class_service.remove_student(db, turma_id, aluno_id):
        raise HTTPException(status_code=404, detail="Vínculo turma-aluno não encontrado.")
