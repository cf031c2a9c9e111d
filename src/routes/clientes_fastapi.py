# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Clientes e contratação de planos.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from src.database import get_db
from src.cpf_utils import limpar_cpf, validar_cpf
from src.models.cliente import Cliente
from src.models.ficha_saude import FichaSaude
from src.models.plano import Plano
from src.models.enums import TipoCliente
from src.schemas.cliente import ClienteCreate, ClienteRead, ClienteUpdate, ContratarPlano
from src.services.mensalidades import gerar_primeira_mensalidade, get_relogio

router = APIRouter(
    tags=["Clientes"],
    responses={404: {"description": "Cliente não encontrado"}},
)

# Campos que aceitam null explícito no update
CAMPOS_ANULAVEIS = {"contato", "endereco", "plano_id"}


def _buscar_cliente(db, cliente_id):
    return db.query(Cliente).options(
        joinedload(Cliente.plano),
        joinedload(Cliente.ficha_saude),
    ).filter(Cliente.id == cliente_id).first()


def _cpf_valido_ou_400(cpf):
    cpf_limpo = limpar_cpf(cpf)
    if not validar_cpf(cpf_limpo):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CPF inválido")
    return cpf_limpo


def _aplicar_ficha(ficha, dados_ficha, hoje):
    dados = dados_ficha.model_dump()
    objetivos = dados.pop("objetivos", [])
    if dados.get("data_ficha") is None:
        dados["data_ficha"] = hoje
    for key, value in dados.items():
        setattr(ficha, key, value)
    ficha.objetivos = objetivos
    return ficha


def _plano_existe_ou_404(db, plano_id):
    if plano_id is not None and not db.query(Plano).filter(Plano.id == plano_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano não encontrado")


def _commit_cliente(db):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Erro de integridade ao salvar cliente: {e}")
        if "cpf" in str(e).lower():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Este CPF já está cadastrado.")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Erro de integridade ao salvar cliente.")


@router.get("", response_model=List[ClienteRead])
def read_clientes(
    ativo: Optional[bool] = None,
    plano_id: Optional[int] = Query(None, alias="planoId"),
    tipo: Optional[TipoCliente] = None,
    db: Session = Depends(get_db)
):
    """
    Lista clientes com filtros opcionais, ordenados pelo nome.
    """
    query = db.query(Cliente).options(joinedload(Cliente.plano), joinedload(Cliente.ficha_saude))
    if ativo is not None:
        query = query.filter(Cliente.ativo == ativo)
    if plano_id:
        query = query.filter(Cliente.plano_id == plano_id)
    if tipo:
        query = query.filter(Cliente.tipo == tipo.value)
    return query.order_by(Cliente.nome_completo.asc()).all()


@router.get("/{cliente_id}", response_model=ClienteRead)
def read_cliente(cliente_id: int, db: Session = Depends(get_db)):
    db_cliente = _buscar_cliente(db, cliente_id)
    if not db_cliente:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    return db_cliente


@router.post("", response_model=ClienteRead, status_code=status.HTTP_201_CREATED)
def create_cliente(cliente: ClienteCreate, db: Session = Depends(get_db), relogio=Depends(get_relogio)):
    """
    Cadastra um cliente e, se enviada, sua ficha de saúde.
    O CPF é gravado apenas com os dígitos.
    """
    cpf_limpo = _cpf_valido_ou_400(cliente.cpf)
    _plano_existe_ou_404(db, cliente.plano_id)

    dados = cliente.model_dump(exclude={"ficha_saude"})
    dados["cpf"] = cpf_limpo
    db_cliente = Cliente(**dados)
    if cliente.ficha_saude:
        db_cliente.ficha_saude = _aplicar_ficha(FichaSaude(), cliente.ficha_saude, relogio().date())

    db.add(db_cliente)
    _commit_cliente(db)
    return _buscar_cliente(db, db_cliente.id)


@router.put("/{cliente_id}", response_model=ClienteRead)
def update_cliente(
    cliente_id: int,
    cliente_update: ClienteUpdate,
    db: Session = Depends(get_db),
    relogio=Depends(get_relogio)
):
    """
    Atualiza apenas os campos enviados. A ficha de saúde, se enviada,
    é criada ou substituída.
    """
    db_cliente = _buscar_cliente(db, cliente_id)
    if not db_cliente:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")

    update_data = cliente_update.model_dump(exclude_unset=True, exclude={"ficha_saude"})
    if update_data.get("cpf") is not None:
        update_data["cpf"] = _cpf_valido_ou_400(update_data["cpf"])
    if "plano_id" in update_data:
        _plano_existe_ou_404(db, update_data["plano_id"])

    for key, value in update_data.items():
        if value is None and key not in CAMPOS_ANULAVEIS:
            continue
        setattr(db_cliente, key, value)

    if cliente_update.ficha_saude:
        ficha = db_cliente.ficha_saude or FichaSaude()
        db_cliente.ficha_saude = _aplicar_ficha(ficha, cliente_update.ficha_saude, relogio().date())

    _commit_cliente(db)
    return _buscar_cliente(db, cliente_id)


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cliente(cliente_id: int, db: Session = Depends(get_db)):
    db_cliente = db.query(Cliente).filter(Cliente.id == cliente_id).first()
    if not db_cliente:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    db.delete(db_cliente)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cliente possui mensalidades vinculadas e não pode ser excluído."
        )
    return None


@router.post("/{cliente_id}/contratar-plano", response_model=ClienteRead)
def contratar_plano(
    cliente_id: int,
    dados: ContratarPlano,
    db: Session = Depends(get_db),
    relogio=Depends(get_relogio)
):
    """
    Vincula o plano ao cliente e gera a primeira mensalidade.
    Sem dataInicio, a primeira mensalidade vence hoje.
    """
    if not dados.plano_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="planoId é obrigatório")

    db_cliente = db.query(Cliente).filter(Cliente.id == cliente_id).first()
    if not db_cliente:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    db_plano = db.query(Plano).filter(Plano.id == dados.plano_id).first()
    if not db_plano:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plano não encontrado")

    vencimento = dados.data_inicio or relogio().date()
    gerar_primeira_mensalidade(db, db_cliente.id, db_plano.id, db_plano.valor, vencimento, relogio=relogio)
    return _buscar_cliente(db, cliente_id)
