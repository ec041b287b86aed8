"""
Serviço de cadastro de alunos e docentes.

A verificação prévia (SELECT) dá uma mensagem clara ao usuário, mas a garantia
real de unicidade vem das constraints UNIQUE do banco: um INSERT concorrente
rejeitado com IntegrityError vira o mesmo ConflictError.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crecheapp.exceptions import ConflictError, ValidationError
from crecheapp.models.student import Student
from crecheapp.models.teacher import Teacher
from crecheapp.schemas.auth import StudentRegister, TeacherRegister
from crecheapp.security import hash_password, normalize_cpf

logger = logging.getLogger(__name__)

# Largura da coluna alunos.cpf
CPF_MAX_DIGITS = 20


def register_student(db: Session, data: StudentRegister) -> int:
    """
    Cadastra um aluno e retorna o id gerado.
    Levanta ConflictError se a matrícula ou o CPF (normalizado) já existirem.
    """
    cpf = normalize_cpf(data.cpf)
    if not cpf:
        raise ValidationError("CPF inválido: informe ao menos um dígito.")
    if len(cpf) > CPF_MAX_DIGITS:
        raise ValidationError(f"CPF inválido: no máximo {CPF_MAX_DIGITS} dígitos.")
    matricula = data.matricula.strip()

    existing = db.execute(
        select(Student.id)
        .where(or_(Student.matricula == matricula, Student.cpf == cpf))
        .limit(1)
    ).scalar()
    if existing is not None:
        raise ConflictError("Aluno já cadastrado.")

    student = Student(nome=data.nome, cpf=cpf, matricula=matricula)
    db.add(student)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Aluno já cadastrado.")
    db.refresh(student)

    logger.info("Aluno cadastrado: id=%s matricula=%s", student.id, matricula)
    return student.id


def register_teacher(db: Session, data: TeacherRegister) -> int:
    """
    Cadastra um docente com a senha em hash bcrypt e retorna o id gerado.
    Levanta ConflictError se o identificador já existir.
    """
    existing = db.execute(
        select(Teacher.id).where(Teacher.identificador == data.identificador).limit(1)
    ).scalar()
    if existing is not None:
        raise ConflictError("Docente já cadastrado.")

    teacher = Teacher(
        nome=data.nome,
        identificador=data.identificador,
        senha=hash_password(data.senha),
        email=data.email,
    )
    db.add(teacher)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Docente já cadastrado.")
    db.refresh(teacher)

    logger.info("Docente cadastrado: id=%s identificador=%s", teacher.id, data.identificador)
    return teacher.id
