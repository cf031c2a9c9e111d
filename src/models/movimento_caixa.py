# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para os lançamentos do caixa.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base
from src.relogio import relogio_padrao


class MovimentoCaixa(Base):
    __tablename__ = "movimentos_caixa"

    id = Column(Integer, primary_key=True, index=True)
    data = Column(DateTime, nullable=False, default=relogio_padrao, index=True)
    descricao = Column(String(255), nullable=False)
    valor = Column(Float, nullable=False)
    tipo = Column(String(20), nullable=False)  # 'Entrada' ou 'Saida'

    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True, index=True)
    forma_pagamento_id = Column(Integer, ForeignKey("formas_pagamento.id"), nullable=False)
    # Preenchido apenas quando o lançamento vem do pagamento de uma mensalidade
    mensalidade_id = Column(Integer, ForeignKey("mensalidades.id"), nullable=True, index=True)

    cliente = relationship("Cliente", back_populates="movimentos")
    forma_pagamento = relationship("FormaPagamento", back_populates="movimentos")
    mensalidade = relationship("Mensalidade", back_populates="movimentos")
