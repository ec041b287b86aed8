"""
Router da listagem de alunos (GET /alunos).
O cadastro fica em routers/auth.py (POST /register/aluno).
"""

from collections import defaultdict
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from crecheapp.database import get_db
from crecheapp.models.school_class import ClassStudent
from crecheapp.models.student import Student
from crecheapp.schemas.student import StudentResponse

router = APIRouter(prefix="/alunos", tags=["Alunos"])


@router.get("", response_model=List[StudentResponse], summary="Listar todos os alunos")
def list_students(db: Session = Depends(get_db)):
    """Retorna todos os alunos ordenados por nome, com os ids das suas turmas."""
    students = db.execute(
        select(Student).order_by(Student.nome)
    ).scalars().all()

    memberships = defaultdict(list)
    for turma_id, aluno_id in db.execute(
        select(ClassStudent.turma_id, ClassStudent.aluno_id).order_by(ClassStudent.turma_id)
    ).all():
        memberships[aluno_id].append(turma_id)

    return [
        StudentResponse(
            id=s.id,
            nome=s.nome,
            matricula=s.matricula,
            avatar=s.avatar,
            turma_ids=memberships.get(s.id, []),
        )
        for s in students
    ]
