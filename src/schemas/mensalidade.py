# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Mensalidade.
"""

from pydantic import Field
from typing import Optional
from datetime import date, datetime

from src.schemas.base import SchemaBase
from src.schemas.cliente import ClienteRead
from src.schemas.plano import PlanoRead


class MensalidadeResumo(SchemaBase):
    id: int
    cliente_id: int
    plano_id: int
    valor: float
    vencimento: date
    situacao: str
    data_geracao: Optional[datetime] = None


# Schema para leitura/retorno de Mensalidade
class MensalidadeRead(MensalidadeResumo):
    cliente: Optional[ClienteRead] = None
    plano: Optional[PlanoRead] = None


class RegistrarPagamento(SchemaBase):
    valor: Optional[float] = Field(None, gt=0)
    forma_pagamento_id: Optional[int] = None
    data: Optional[datetime] = None
