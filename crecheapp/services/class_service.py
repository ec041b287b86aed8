"""
Serviço de gestão das turmas e do vínculo turma ↔ alunos.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crecheapp.exceptions import ConflictError, NotFoundError
from crecheapp.models.school_class import ClassStudent, SchoolClass
from crecheapp.models.student import Student
from crecheapp.schemas.school_class import (
    ClassCreate,
    ClassResponse,
    ClassStudentResponse,
    ClassUpdate,
)

logger = logging.getLogger(__name__)


def create_class(db: Session, data: ClassCreate) -> ClassResponse:
    school_class = SchoolClass(nome=data.nome, ano=data.ano)
    db.add(school_class)
    db.commit()
    db.refresh(school_class)
    logger.info("Turma criada: %s (%s)", school_class.nome, school_class.id)
    return ClassResponse.model_validate(school_class)


def get_classes(db: Session) -> List[ClassResponse]:
    """Retorna todas as turmas, ordenadas por nome."""
    classes = db.execute(
        select(SchoolClass).order_by(SchoolClass.nome)
    ).scalars().all()
    return [ClassResponse.model_validate(c) for c in classes]


def update_class(db: Session, class_id: int, data: ClassUpdate) -> Optional[ClassResponse]:
    """
    Substitui nome e ano; a foto só é alterada quando enviada.
    Retorna None se a turma não existir.
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return None

    school_class.nome = data.nome
    school_class.ano = data.ano
    if data.foto:
        school_class.foto = data.foto

    db.commit()
    db.refresh(school_class)
    return ClassResponse.model_validate(school_class)


def delete_class(db: Session, class_id: int) -> bool:
    """
    Exclui a turma e seus vínculos com alunos.
    Os registros diários que citam a turma são mantidos.
    Retorna False se a turma não existir.
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return False

    db.execute(delete(ClassStudent).where(ClassStudent.turma_id == class_id))
    db.delete(school_class)
    db.commit()
    logger.info("Turma excluída: %s", class_id)
    return True


def get_class_students(db: Session, class_id: int) -> List[ClassStudentResponse]:
    """Alunos da turma ordenados por nome. Levanta NotFoundError se a turma não existir."""
    if db.get(SchoolClass, class_id) is None:
        raise NotFoundError("Turma não encontrada.")

    students = db.execute(
        select(Student)
        .join(ClassStudent, ClassStudent.aluno_id == Student.id)
        .where(ClassStudent.turma_id == class_id)
        .order_by(Student.nome)
    ).scalars().all()
    return [ClassStudentResponse.model_validate(s) for s in students]


def add_student(db: Session, class_id: int, student_id: int) -> None:
    """
    Vincula um aluno à turma.
    NotFoundError se a turma ou o aluno não existirem, ConflictError se o vínculo já existir.
    """
    if db.get(SchoolClass, class_id) is None:
        raise NotFoundError("Turma não encontrada.")
    if db.get(Student, student_id) is None:
        raise NotFoundError("Aluno não encontrado.")

    existing = db.execute(
        select(ClassStudent.id).where(
            ClassStudent.turma_id == class_id,
            ClassStudent.aluno_id == student_id,
        )
    ).scalar()
    if existing is not None:
        raise ConflictError("Aluno já está nesta turma.")

    db.add(ClassStudent(turma_id=class_id, aluno_id=student_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Aluno já está nesta turma.")


def remove_student(db: Session, class_id: int, student_id: int) -> bool:
    """Retira um aluno da turma. Retorna False se o vínculo não existir."""
    link = db.execute(
        select(ClassStudent).where(
            ClassStudent.turma_id == class_id,
            ClassStudent.aluno_id == student_id,
        )
    ).scalar()
    if link is None:
        return False
    db.delete(link)
    db.commit()
    return True
