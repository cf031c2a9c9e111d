# -*- coding: utf-8 -*-
import os

# Precisa vir antes de importar a aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AGENDADOR_ATIVO"] = "false"

from datetime import date, datetime
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from src.database import Base, get_db
from src.models.cliente import Cliente
from src.models.forma_pagamento import FormaPagamento
from src.models.mensalidade import Mensalidade
from src.models.plano import Plano
from src.services.mensalidades import get_relogio

AGORA = datetime(2024, 3, 10, 9, 0, 0)
HOJE = AGORA.date()

CPFS_VALIDOS = ["52998224725", "11144477735", "12345678909"]


def relogio_fixo():
    return AGORA


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_relogio] = lambda: relogio_fixo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def criar_plano(db):
    def _criar(descricao="Musculação 3x", valor=100.0, tipo_assinatura="Mensal", numero_treinos_semana=3):
        plano = Plano(
            descricao=descricao,
            valor=valor,
            tipo_assinatura=tipo_assinatura,
            numero_treinos_semana=numero_treinos_semana,
        )
        db.add(plano)
        db.commit()
        db.refresh(plano)
        return plano
    return _criar


@pytest.fixture()
def criar_cliente(db):
    sequencia = count(1)

    def _criar(nome="Maria Silva", plano=None, ativo=True):
        cliente = Cliente(
            tipo="Cliente",
            nome_completo=nome,
            data_nascimento=date(1990, 5, 20),
            sexo="F",
            cpf=f"{next(sequencia):011d}",
            plano_id=plano.id if plano else None,
            ativo=ativo,
        )
        db.add(cliente)
        db.commit()
        db.refresh(cliente)
        return cliente
    return _criar


@pytest.fixture()
def criar_mensalidade(db):
    def _criar(cliente, plano, vencimento, valor=None, situacao="NaoPago"):
        mensalidade = Mensalidade(
            cliente_id=cliente.id,
            plano_id=plano.id,
            valor=plano.valor if valor is None else valor,
            vencimento=vencimento,
            situacao=situacao,
        )
        db.add(mensalidade)
        db.commit()
        db.refresh(mensalidade)
        return mensalidade
    return _criar


@pytest.fixture()
def forma_pix(db):
    forma = FormaPagamento(descricao="PIX", tipo="PIX")
    db.add(forma)
    db.commit()
    db.refresh(forma)
    return forma
