# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para as formas de pagamento.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from src.database import Base


class FormaPagamento(Base):
    __tablename__ = "formas_pagamento"

    id = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(100), nullable=False)
    tipo = Column(String(20), nullable=False)

    movimentos = relationship("MovimentoCaixa", back_populates="forma_pagamento")
