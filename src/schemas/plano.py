# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Plano de Mensalidade.
"""

from pydantic import Field
from typing import Optional

from src.models.enums import TipoAssinatura
from src.schemas.base import SchemaBase


# Schema base para Plano
class PlanoBase(SchemaBase):
    descricao: str = Field(..., max_length=255)
    valor: float = Field(..., gt=0)
    numero_treinos_semana: int = Field(..., gt=0)
    tipo_assinatura: TipoAssinatura


class PlanoCreate(PlanoBase):
    pass


# Atualização parcial: só os campos enviados são aplicados
class PlanoUpdate(SchemaBase):
    descricao: Optional[str] = Field(None, max_length=255)
    valor: Optional[float] = Field(None, gt=0)
    numero_treinos_semana: Optional[int] = Field(None, gt=0)
    tipo_assinatura: Optional[TipoAssinatura] = None


class PlanoRead(PlanoBase):
    id: int
    # Valores antigos gravados no banco não devem quebrar a leitura
    tipo_assinatura: str
