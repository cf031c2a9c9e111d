# -*- coding: utf-8 -*-
"""
Relógio padrão da aplicação: horário local, sem fuso.

Serviços, job e rotas recebem o relógio por injeção; os defaults das
colunas usam este mesmo relógio para que todas as datas gravadas
fiquem no mesmo referencial.
"""
from datetime import datetime


def relogio_padrao():
    return datetime.now()


def hoje():
    return relogio_padrao().date()
