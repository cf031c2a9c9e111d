# -*- coding: utf-8 -*-
"""
Funções auxiliares para CPF.
"""
import re


def limpar_cpf(cpf):
    """Remove máscara e qualquer caractere que não seja dígito."""
    return re.sub(r'[^0-9]', '', str(cpf or ""))


def _digito_verificador(digitos, peso_inicial):
    soma = sum(int(d) * peso for d, peso in zip(digitos, range(peso_inicial, 1, -1)))
    resto = (soma * 10) % 11
    return 0 if resto == 10 else resto


def validar_cpf(cpf):
    """
    Valida um CPF pelos dois dígitos verificadores.

    Aceita o CPF com ou sem máscara. Sequências de um mesmo dígito
    (ex: 111.111.111-11) passam no cálculo mas não são CPFs válidos.
    """
    numeros = limpar_cpf(cpf)
    if len(numeros) != 11:
        return False
    if numeros == numeros[0] * 11:
        return False

    if _digito_verificador(numeros[:9], 10) != int(numeros[9]):
        return False
    if _digito_verificador(numeros[:10], 11) != int(numeros[10]):
        return False
    return True
