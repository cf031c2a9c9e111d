# -*- coding: utf-8 -*-
"""
Rotas FastAPI para consulta e pagamento de Mensalidades.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from datetime import date

from src.database import get_db
from src.models.cliente import Cliente
from src.models.mensalidade import Mensalidade
from src.models.enums import SituacaoMensalidade
from src.schemas.mensalidade import MensalidadeRead, RegistrarPagamento
from src.services.mensalidades import get_relogio, registrar_pagamento


router = APIRouter(
    tags=["Mensalidades"],
    responses={404: {"description": "Não encontrado"}},
)


def _carregar(db, mensalidade_id):
    return db.query(Mensalidade).options(
        joinedload(Mensalidade.cliente).joinedload(Cliente.plano),
        joinedload(Mensalidade.plano),
    ).filter(Mensalidade.id == mensalidade_id).first()


@router.get("", response_model=List[MensalidadeRead])
def read_mensalidades(
    cliente_id: Optional[int] = Query(None, alias="clienteId"),
    situacao: Optional[SituacaoMensalidade] = None,
    data_inicio: Optional[date] = Query(None, alias="dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim"),
    db: Session = Depends(get_db)
):
    """
    Lista mensalidades por cliente, situação e intervalo de vencimento
    (dataFim inclusive), em ordem de vencimento.
    """
    query = db.query(Mensalidade).options(
        joinedload(Mensalidade.cliente),
        joinedload(Mensalidade.plano)
    )
    if cliente_id:
        query = query.filter(Mensalidade.cliente_id == cliente_id)
    if situacao:
        query = query.filter(Mensalidade.situacao == situacao.value)
    if data_inicio:
        query = query.filter(Mensalidade.vencimento >= data_inicio)
    if data_fim:
        query = query.filter(Mensalidade.vencimento <= data_fim)

    return query.order_by(Mensalidade.vencimento.asc(), Mensalidade.id.asc()).all()


@router.get("/{mensalidade_id}", response_model=MensalidadeRead)
def read_mensalidade(mensalidade_id: int, db: Session = Depends(get_db)):
    db_mensalidade = _carregar(db, mensalidade_id)
    if not db_mensalidade:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mensalidade não encontrada")
    return db_mensalidade


@router.post("/{mensalidade_id}/registrar-pagamento", response_model=MensalidadeRead)
def registrar_pagamento_mensalidade(
    mensalidade_id: int,
    pagamento: RegistrarPagamento,
    db: Session = Depends(get_db),
    relogio=Depends(get_relogio)
):
    """
    Registra o pagamento de uma mensalidade e lança a entrada no caixa.
    """
    if not pagamento.forma_pagamento_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="formaPagamentoId é obrigatório")

    registrar_pagamento(
        db,
        mensalidade_id,
        pagamento.forma_pagamento_id,
        valor=pagamento.valor,
        data=pagamento.data,
        relogio=relogio,
    )
    return _carregar(db, mensalidade_id)
