# -*- coding: utf-8 -*-
"""
Schemas Pydantic para as formas de pagamento.
"""
from pydantic import Field
from typing import Optional

from src.models.enums import TipoFormaPagamento
from src.schemas.base import SchemaBase


class FormaPagamentoBase(SchemaBase):
    descricao: str = Field(..., min_length=1, max_length=100)
    tipo: TipoFormaPagamento


class FormaPagamentoCreate(FormaPagamentoBase):
    pass


class FormaPagamentoUpdate(SchemaBase):
    descricao: Optional[str] = Field(None, min_length=1, max_length=100)
    tipo: Optional[TipoFormaPagamento] = None


class FormaPagamentoRead(FormaPagamentoBase):
    id: int
    tipo: str
