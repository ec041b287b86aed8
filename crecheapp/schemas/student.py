"""
Schemas Pydantic da listagem de alunos.
"""

from typing import List, Optional

from pydantic import BaseModel


class StudentResponse(BaseModel):
    """Schema de resposta de GET /alunos (sem o CPF)."""
    id: int
    nome: str
    matricula: str
    avatar: Optional[str] = None
    turma_ids: List[int] = []

    model_config = {"from_attributes": True}
