# -*- coding: utf-8 -*-
"""
Configurações da aplicação lidas do ambiente (.env).
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _bool_env(nome, padrao):
    valor = os.environ.get(nome)
    if valor is None:
        return padrao
    return valor.strip().lower() in ("1", "true", "sim", "yes", "on")


class Config:
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./academia.db")
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")
    LOG_FILE = os.environ.get("LOG_FILE") or None

    # Varredura diária que gera as próximas mensalidades
    AGENDADOR_ATIVO = _bool_env("AGENDADOR_ATIVO", True)
    HORA_VARREDURA = int(os.environ.get("HORA_VARREDURA", 6))
    MINUTO_VARREDURA = int(os.environ.get("MINUTO_VARREDURA", 0))
    DIAS_ANTECEDENCIA = int(os.environ.get("DIAS_ANTECEDENCIA", 5))
