# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para o sistema de gestão da academia.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from src.config import Config
from src.database import engine, Base, SessionLocal
from src.models import cliente, ficha_saude, plano, mensalidade, forma_pagamento, movimento_caixa
from src.routes import (clientes_fastapi, planos_fastapi, mensalidades_fastapi, formas_pagamento_fastapi,
                        movimento_caixa_fastapi, relatorios_fastapi, dashboard_fastapi)
from src.jobs.mensalidades import AgendadorMensalidades
from src.services.erros import ErroNegocio

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=Config.LOG_FILE
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas no banco de dados com tratamento de erros
    try:
        Base.metadata.create_all(bind=engine)
        logging.info("Tabelas criadas com sucesso!")
    except Exception as e:
        logging.error(f"Erro ao criar tabelas: {e}")

    agendador = None
    if Config.AGENDADOR_ATIVO:
        agendador = AgendadorMensalidades(
            SessionLocal,
            hora=Config.HORA_VARREDURA,
            minuto=Config.MINUTO_VARREDURA,
            dias=Config.DIAS_ANTECEDENCIA,
        )
        agendador.iniciar()
    yield
    if agendador:
        agendador.parar()


env = Config.ENVIRONMENT

app = FastAPI(
    title="API Academia - Gestão",
    description="API para gestão de clientes, planos, mensalidades e caixa da academia",
    version="1.0.0",
    docs_url="/docs" if env != "production" else None,
    redoc_url="/redoc" if env != "production" else None,
    openapi_url="/openapi.json" if env != "production" else None,
    lifespan=lifespan,
)

origins = [
    Config.FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ErroNegocio)
async def erro_negocio_handler(request: Request, exc: ErroNegocio):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.mensagem})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Campos obrigatórios ausentes ou mal formatados viram 400 com mensagem legível
    erros = []
    for erro in exc.errors():
        campo = ".".join(str(p) for p in erro.get("loc", []) if p not in ("body", "query", "path"))
        erros.append(f"{campo}: {erro.get('msg')}" if campo else erro.get("msg"))
    return JSONResponse(status_code=400, content={"detail": "; ".join(erros)})


@app.exception_handler(SQLAlchemyError)
async def banco_exception_handler(request: Request, exc: SQLAlchemyError):
    logging.error(f"Erro no banco de dados em {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# Montagem dos routers
app.include_router(clientes_fastapi.router, prefix="/api/v1/clientes")
app.include_router(planos_fastapi.router, prefix="/api/v1/planos")
app.include_router(mensalidades_fastapi.router, prefix="/api/v1/mensalidades")
app.include_router(formas_pagamento_fastapi.router, prefix="/api/v1/formas-pagamento")
app.include_router(movimento_caixa_fastapi.router, prefix="/api/v1/movimento-caixa")
app.include_router(relatorios_fastapi.router, prefix="/api/v1/relatorios")
app.include_router(dashboard_fastapi.router, prefix="/api/v1/dashboard")


@app.get("/api/v1/health", tags=["Root"])
async def health():
    return {"ok": True}


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Academia - Sistema de Gestão",
        "documentacao": "/docs",
        "endpoints": [
            {"clientes": "/api/v1/clientes"},
            {"planos": "/api/v1/planos"},
            {"mensalidades": "/api/v1/mensalidades"},
            {"formas_pagamento": "/api/v1/formas-pagamento"},
            {"movimento_caixa": "/api/v1/movimento-caixa"},
            {"relatorios": "/api/v1/relatorios"},
            {"dashboard": "/api/v1/dashboard/totalizadores"}
        ]
    }
