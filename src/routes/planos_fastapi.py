# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Planos.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from src.database import get_db
from src.models.plano import Plano
from src.schemas.plano import PlanoCreate, PlanoRead, PlanoUpdate

router = APIRouter(
    tags=["Planos"],
    responses={404: {"description": "Plano não encontrado"}},
)

# --- CRUD Endpoints ---

@router.post("", response_model=PlanoRead, status_code=status.HTTP_201_CREATED)
def create_plano(plano: PlanoCreate, db: Session = Depends(get_db)):
    """
    Cria um novo plano de mensalidade.
    """
    db_plano = Plano(**plano.model_dump())
    db.add(db_plano)
    db.commit()
    db.refresh(db_plano)
    return db_plano


@router.get("", response_model=List[PlanoRead])
def read_planos(db: Session = Depends(get_db)):
    """
    Lista os planos ordenados pela descrição.
    """
    return db.query(Plano).order_by(Plano.descricao).all()


@router.get("/{plano_id}", response_model=PlanoRead)
def read_plano(plano_id: int, db: Session = Depends(get_db)):
    db_plano = db.query(Plano).filter(Plano.id == plano_id).first()
    if db_plano is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano não encontrado")
    return db_plano


@router.put("/{plano_id}", response_model=PlanoRead)
def update_plano(
    plano_id: int,
    plano_update: PlanoUpdate,
    db: Session = Depends(get_db)
):
    """
    Atualiza os dados de um plano existente.
    Um novo valor passa a valer nas próximas mensalidades geradas.
    """
    db_plano = db.query(Plano).filter(Plano.id == plano_id).first()
    if db_plano is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano não encontrado")

    update_data = plano_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        if value is not None:
            setattr(db_plano, key, value)
    db.commit()
    db.refresh(db_plano)
    return db_plano


@router.delete("/{plano_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plano(plano_id: int, db: Session = Depends(get_db)):
    """
    Exclui um plano. Planos com mensalidades não podem ser excluídos.
    """
    db_plano = db.query(Plano).filter(Plano.id == plano_id).first()
    if db_plano is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano não encontrado")

    db.delete(db_plano)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Plano possui mensalidades vinculadas e não pode ser excluído."
        )
    return None
