# -*- coding: utf-8 -*-
"""
Schemas de saída dos relatórios e do dashboard.
"""
from typing import List, Optional
from pydantic import Field
from datetime import date

from src.schemas.base import SchemaBase
from src.schemas.mensalidade import MensalidadeRead
from src.schemas.movimento_caixa import MovimentoCaixaRead


class Periodo(SchemaBase):
    data_inicio: date
    data_fim: date


class Realizados(SchemaBase):
    entradas: float
    saidas: float
    total: float


class PrevisaoCaixa(SchemaBase):
    periodo: Periodo
    realizados: Realizados
    a_realizar: float
    # chave mantida como o frontend já consome
    mensalidades_a_receber: List[MensalidadeRead] = Field(..., alias="mensalidadesARecber")
    movimentos: List[MovimentoCaixaRead]


class Recebimentos(SchemaBase):
    periodo: Periodo
    recebidos: List[MovimentoCaixaRead]
    pagos: List[MovimentoCaixaRead]
    total_entradas: float
    total_saidas: float
    saldo_caixa: float


class TotalPorPlano(SchemaBase):
    plano_id: int
    descricao: str
    tipo_assinatura: Optional[str] = None
    total_clientes: int


class Totalizadores(SchemaBase):
    por_plano: List[TotalPorPlano]
    total_clientes_ativos: int
