# -*- coding: utf-8 -*-
"""
Erros de negócio das regras de cobrança.

Cada erro carrega o status HTTP equivalente; o main.py registra um
handler que converte qualquer ErroNegocio em resposta JSON.
"""
from fastapi import status


class ErroNegocio(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, mensagem):
        super().__init__(mensagem)
        self.mensagem = mensagem


class ErroValidacao(ErroNegocio):
    status_code = status.HTTP_400_BAD_REQUEST


class NaoEncontrado(ErroNegocio):
    status_code = status.HTTP_404_NOT_FOUND


class Conflito(ErroNegocio):
    status_code = status.HTTP_409_CONFLICT


class EstadoInvalido(ErroNegocio):
    status_code = status.HTTP_400_BAD_REQUEST
