# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Movimentos de Caixa.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from datetime import date, datetime, time

from src.database import get_db
from src.models.cliente import Cliente
from src.models.forma_pagamento import FormaPagamento
from src.models.mensalidade import Mensalidade
from src.models.movimento_caixa import MovimentoCaixa
from src.models.enums import TipoMovimento
from src.schemas.movimento_caixa import MovimentoCaixaCreate, MovimentoCaixaRead, MovimentoCaixaUpdate

router = APIRouter(
    tags=["Movimento de Caixa"],
    responses={404: {"description": "Movimento não encontrado"}},
)


def _carregar(db, movimento_id):
    return db.query(MovimentoCaixa).options(
        joinedload(MovimentoCaixa.cliente),
        joinedload(MovimentoCaixa.forma_pagamento),
        joinedload(MovimentoCaixa.mensalidade),
    ).filter(MovimentoCaixa.id == movimento_id).first()


def _validar_referencias(db, dados):
    """Confere se cliente, forma de pagamento e mensalidade informados existem."""
    if dados.get("forma_pagamento_id") is not None:
        if not db.query(FormaPagamento).filter(FormaPagamento.id == dados["forma_pagamento_id"]).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Forma de pagamento não encontrada")
    if dados.get("cliente_id") is not None:
        if not db.query(Cliente).filter(Cliente.id == dados["cliente_id"]).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    if dados.get("mensalidade_id") is not None:
        if not db.query(Mensalidade).filter(Mensalidade.id == dados["mensalidade_id"]).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mensalidade não encontrada")


@router.get("", response_model=List[MovimentoCaixaRead])
def read_movimentos(
    tipo: Optional[TipoMovimento] = None,
    cliente_id: Optional[int] = Query(None, alias="clienteId"),
    data_inicio: Optional[date] = Query(None, alias="dataInicio"),
    data_fim: Optional[date] = Query(None, alias="dataFim"),
    db: Session = Depends(get_db)
):
    """
    Lista lançamentos, do mais recente para o mais antigo.
    dataFim inclui o dia inteiro.
    """
    query = db.query(MovimentoCaixa).options(
        joinedload(MovimentoCaixa.cliente),
        joinedload(MovimentoCaixa.forma_pagamento),
        joinedload(MovimentoCaixa.mensalidade),
    )
    if tipo:
        query = query.filter(MovimentoCaixa.tipo == tipo.value)
    if cliente_id:
        query = query.filter(MovimentoCaixa.cliente_id == cliente_id)
    if data_inicio:
        query = query.filter(MovimentoCaixa.data >= datetime.combine(data_inicio, time.min))
    if data_fim:
        query = query.filter(MovimentoCaixa.data <= datetime.combine(data_fim, time.max))
    return query.order_by(MovimentoCaixa.data.desc(), MovimentoCaixa.id.desc()).all()


@router.get("/{movimento_id}", response_model=MovimentoCaixaRead)
def read_movimento(movimento_id: int, db: Session = Depends(get_db)):
    db_movimento = _carregar(db, movimento_id)
    if not db_movimento:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movimento não encontrado")
    return db_movimento


@router.post("", response_model=MovimentoCaixaRead, status_code=status.HTTP_201_CREATED)
def create_movimento(movimento: MovimentoCaixaCreate, db: Session = Depends(get_db)):
    dados = movimento.model_dump()
    _validar_referencias(db, dados)
    db_movimento = MovimentoCaixa(**dados)
    db.add(db_movimento)
    db.commit()
    return _carregar(db, db_movimento.id)


@router.put("/{movimento_id}", response_model=MovimentoCaixaRead)
def update_movimento(movimento_id: int, dados: MovimentoCaixaUpdate, db: Session = Depends(get_db)):
    db_movimento = db.query(MovimentoCaixa).filter(MovimentoCaixa.id == movimento_id).first()
    if not db_movimento:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movimento não encontrado")

    update_data = dados.model_dump(exclude_unset=True)
    _validar_referencias(db, update_data)
    for key, value in update_data.items():
        # cliente e mensalidade aceitam null para desvincular
        if value is None and key not in ("cliente_id", "mensalidade_id"):
            continue
        setattr(db_movimento, key, value)

    db.commit()
    return _carregar(db, movimento_id)


@router.delete("/{movimento_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movimento(movimento_id: int, db: Session = Depends(get_db)):
    db_movimento = db.query(MovimentoCaixa).filter(MovimentoCaixa.id == movimento_id).first()
    if not db_movimento:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movimento não encontrado")
    db.delete(db_movimento)
    db.commit()
    return None
