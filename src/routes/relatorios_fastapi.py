# -*- coding: utf-8 -*-
"""
Relatórios de caixa: previsão (realizado x a realizar) e recebimentos do período.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func
from datetime import date, datetime, time

from src.database import get_db
from src.models.mensalidade import Mensalidade
from src.models.movimento_caixa import MovimentoCaixa
from src.models.enums import SituacaoMensalidade, TipoMovimento
from src.schemas.relatorio import PrevisaoCaixa, Recebimentos

router = APIRouter(
    tags=["Relatórios"],
)


def _periodo_obrigatorio(data_inicio, data_fim):
    if not data_inicio or not data_fim:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="dataInicio e dataFim são obrigatórios")
    if data_fim < data_inicio:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="dataFim deve ser igual ou posterior a dataInicio")
    return datetime.combine(data_inicio, time.min), datetime.combine(data_fim, time.max)


def _totais_por_tipo(db, inicio, fim):
    """Soma dos movimentos do período agrupada por tipo (Entrada/Saida)."""
    linhas = db.query(MovimentoCaixa.tipo, func.sum(MovimentoCaixa.valor)).filter(
        MovimentoCaixa.data >= inicio,
        MovimentoCaixa.data <= fim,
    ).group_by(MovimentoCaixa.tipo).all()
    totais = {tipo: valor or 0.0 for tipo, valor in linhas}
    return totais.get(TipoMovimento.ENTRADA.value, 0.0), totais.get(TipoMovimento.SAIDA.value, 0.0)


def _movimentos_periodo(db, inicio, fim, tipo=None):
    query = db.query(MovimentoCaixa).options(
        joinedload(MovimentoCaixa.cliente),
        joinedload(MovimentoCaixa.forma_pagamento),
    ).filter(MovimentoCaixa.data >= inicio, MovimentoCaixa.data <= fim)
    if tipo:
        query = query.filter(MovimentoCaixa.tipo == tipo)
    return query.order_by(MovimentoCaixa.data.asc(), MovimentoCaixa.id.asc()).all()


@router.get("/previsao-caixa", response_model=PrevisaoCaixa)
def previsao_caixa(
    data_inicio: Optional[date] = Query(None, alias="dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim"),
    db: Session = Depends(get_db)
):
    """
    Compara o que já entrou/saiu do caixa com as mensalidades em aberto
    que vencem no período.
    """
    inicio, fim = _periodo_obrigatorio(data_inicio, data_fim)
    entradas, saidas = _totais_por_tipo(db, inicio, fim)

    filtro_abertas = (
        Mensalidade.vencimento >= data_inicio,
        Mensalidade.vencimento <= data_fim,
        Mensalidade.situacao == SituacaoMensalidade.NAO_PAGO.value,
    )
    a_realizar = db.query(func.sum(Mensalidade.valor)).filter(*filtro_abertas).scalar() or 0.0
    mensalidades = db.query(Mensalidade).options(
        joinedload(Mensalidade.cliente),
        joinedload(Mensalidade.plano),
    ).filter(*filtro_abertas).order_by(Mensalidade.vencimento.asc()).all()

    return {
        "periodo": {"data_inicio": data_inicio, "data_fim": data_fim},
        "realizados": {"entradas": entradas, "saidas": saidas, "total": entradas - saidas},
        "a_realizar": a_realizar,
        "mensalidades_a_receber": mensalidades,
        "movimentos": _movimentos_periodo(db, inicio, fim),
    }


@router.get("/recebimentos", response_model=Recebimentos)
def recebimentos(
    data_inicio: Optional[date] = Query(None, alias="dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim"),
    db: Session = Depends(get_db)
):
    """
    Entradas (recebidos) e saídas (pagos) do período com o saldo do caixa.
    """
    inicio, fim = _periodo_obrigatorio(data_inicio, data_fim)
    entradas, saidas = _totais_por_tipo(db, inicio, fim)

    return {
        "periodo": {"data_inicio": data_inicio, "data_fim": data_fim},
        "recebidos": _movimentos_periodo(db, inicio, fim, TipoMovimento.ENTRADA.value),
        "pagos": _movimentos_periodo(db, inicio, fim, TipoMovimento.SAIDA.value),
        "total_entradas": entradas,
        "total_saidas": saidas,
        "saldo_caixa": entradas - saidas,
    }
