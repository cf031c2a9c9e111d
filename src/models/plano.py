# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Plano de Mensalidade.
"""
from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from src.database import Base


class Plano(Base):
    __tablename__ = 'planos'

    id = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(255), nullable=False)
    valor = Column(Float, nullable=False)
    numero_treinos_semana = Column(Integer, nullable=False)
    # Define o período de cobrança: 'Mensal', 'Trimestral', 'Semestral' ou 'Anual'
    tipo_assinatura = Column(String(20), nullable=False, default="Mensal")

    clientes = relationship("Cliente", back_populates="plano")
    mensalidades = relationship("Mensalidade", back_populates="plano")
