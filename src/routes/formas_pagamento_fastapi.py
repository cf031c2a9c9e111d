# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Formas de Pagamento.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from src.database import get_db
from src.models.forma_pagamento import FormaPagamento
from src.schemas.forma_pagamento import FormaPagamentoCreate, FormaPagamentoRead, FormaPagamentoUpdate

router = APIRouter(
    tags=["Formas de Pagamento"],
    responses={404: {"description": "Forma de pagamento não encontrada"}},
)


def _buscar_ou_404(db, forma_id):
    db_forma = db.query(FormaPagamento).filter(FormaPagamento.id == forma_id).first()
    if not db_forma:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Forma de pagamento não encontrada")
    return db_forma


@router.get("", response_model=List[FormaPagamentoRead])
def read_formas_pagamento(db: Session = Depends(get_db)):
    return db.query(FormaPagamento).order_by(FormaPagamento.descricao).all()


@router.get("/{forma_id}", response_model=FormaPagamentoRead)
def read_forma_pagamento(forma_id: int, db: Session = Depends(get_db)):
    return _buscar_ou_404(db, forma_id)


@router.post("", response_model=FormaPagamentoRead, status_code=status.HTTP_201_CREATED)
def create_forma_pagamento(forma: FormaPagamentoCreate, db: Session = Depends(get_db)):
    db_forma = FormaPagamento(**forma.model_dump())
    db.add(db_forma)
    db.commit()
    db.refresh(db_forma)
    return db_forma


@router.put("/{forma_id}", response_model=FormaPagamentoRead)
def update_forma_pagamento(forma_id: int, dados: FormaPagamentoUpdate, db: Session = Depends(get_db)):
    db_forma = _buscar_ou_404(db, forma_id)
    for key, value in dados.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(db_forma, key, value)
    db.commit()
    db.refresh(db_forma)
    return db_forma


@router.delete("/{forma_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_forma_pagamento(forma_id: int, db: Session = Depends(get_db)):
    db_forma = _buscar_ou_404(db, forma_id)
    db.delete(db_forma)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Forma de pagamento usada em lançamentos do caixa não pode ser excluída."
        )
    return None
