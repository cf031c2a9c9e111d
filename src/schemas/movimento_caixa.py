# -*- coding: utf-8 -*-
"""
Schemas Pydantic para os lançamentos de caixa.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from src.models.enums import TipoMovimento
from src.schemas.base import SchemaBase
from src.schemas.cliente import ClienteRead
from src.schemas.forma_pagamento import FormaPagamentoRead
from src.schemas.mensalidade import MensalidadeResumo


class MovimentoCaixaBase(SchemaBase):
    data: datetime
    descricao: str = Field(..., min_length=1, max_length=255)
    cliente_id: Optional[int] = None
    valor: float = Field(..., gt=0)
    tipo: TipoMovimento
    forma_pagamento_id: int
    mensalidade_id: Optional[int] = None


class MovimentoCaixaCreate(MovimentoCaixaBase):
    pass


class MovimentoCaixaUpdate(SchemaBase):
    data: Optional[datetime] = None
    descricao: Optional[str] = Field(None, min_length=1, max_length=255)
    cliente_id: Optional[int] = None
    valor: Optional[float] = Field(None, gt=0)
    tipo: Optional[TipoMovimento] = None
    forma_pagamento_id: Optional[int] = None
    mensalidade_id: Optional[int] = None


class MovimentoCaixaRead(MovimentoCaixaBase):
    id: int
    tipo: str
    cliente: Optional[ClienteRead] = None
    forma_pagamento: Optional[FormaPagamentoRead] = None
    mensalidade: Optional[MensalidadeResumo] = None
