# -*- coding: utf-8 -*-
"""
Valores fixos usados pelos modelos e schemas.

As colunas continuam sendo String no banco; estes enums servem para
validação na entrada da API e como constantes no código.
"""
from enum import Enum


class TipoCliente(str, Enum):
    CLIENTE = "Cliente"
    FORNECEDOR = "Fornecedor"
    AMBOS = "Ambos"


class Sexo(str, Enum):
    MASCULINO = "M"
    FEMININO = "F"
    OUTRO = "Outro"


class TipoAssinatura(str, Enum):
    MENSAL = "Mensal"
    TRIMESTRAL = "Trimestral"
    SEMESTRAL = "Semestral"
    ANUAL = "Anual"


class SituacaoMensalidade(str, Enum):
    NAO_PAGO = "NaoPago"
    PAGO = "Pago"
    BONIFICADA = "Bonificada"


class TipoMovimento(str, Enum):
    ENTRADA = "Entrada"
    SAIDA = "Saida"


class TipoFormaPagamento(str, Enum):
    DINHEIRO = "Dinheiro"
    CARTAO_CREDITO = "CartaoCredito"
    CARTAO_DEBITO = "CartaoDebito"
    PIX = "PIX"
    TRANSFERENCIA = "Transferencia"


class NivelAtividade(str, Enum):
    NUNCA = "Nunca"
    INICIANTE = "Iniciante"
    INTERMEDIARIO = "Intermediario"
    AVANCADO = "Avancado"


class FrequenciaDesejada(str, Enum):
    TRES_POR_SEMANA = "TresPorSemana"
    CINCO_POR_SEMANA = "CincoPorSemana"
    SEIS_POR_SEMANA = "SeisPorSemana"
