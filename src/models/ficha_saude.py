# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a ficha de saúde (anamnese) do cliente.
"""
from sqlalchemy import Column, Integer, String, Date, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.ext.orderinglist import ordering_list
from src.database import Base
from src.relogio import hoje


class FichaSaude(Base):
    __tablename__ = "fichas_saude"

    id = Column(Integer, primary_key=True, index=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id", ondelete="CASCADE"), nullable=False, unique=True)

    doenca_diagnosticada = Column(Boolean, default=False, nullable=False)
    doenca_diagnosticada_qual = Column(String(255), nullable=True)
    medicamentos_continuos = Column(Boolean, default=False, nullable=False)
    medicamentos_continuos_qual = Column(String(255), nullable=True)
    lesao_cirurgia_ortopedia = Column(Boolean, default=False, nullable=False)
    lesao_cirurgia_ortopedia_qual = Column(String(255), nullable=True)
    problemas_cardiacos_diabetes = Column(Boolean, default=False, nullable=False)
    problemas_cardiacos_qual = Column(String(255), nullable=True)
    restricao_medica = Column(Boolean, default=False, nullable=False)
    restricao_medica_qual = Column(String(255), nullable=True)

    objetivo_outro = Column(String(255), nullable=True)
    nivel_atividade = Column(String(20), nullable=False, default="Nunca")
    frequencia_desejada = Column(String(20), nullable=False, default="TresPorSemana")
    data_ficha = Column(Date, nullable=False, default=hoje)

    cliente = relationship("Cliente", back_populates="ficha_saude")
    itens_objetivo = relationship(
        "ObjetivoFicha",
        order_by="ObjetivoFicha.posicao",
        collection_class=ordering_list("posicao"),
        cascade="all, delete-orphan",
    )

    @property
    def objetivos(self):
        return [item.descricao for item in self.itens_objetivo]

    @objetivos.setter
    def objetivos(self, valores):
        self.itens_objetivo = [ObjetivoFicha(descricao=v, posicao=i) for i, v in enumerate(valores or [])]


class ObjetivoFicha(Base):
    """Um objetivo da ficha; a ordem informada pelo cliente é preservada em `posicao`."""
    __tablename__ = "fichas_saude_objetivos"

    id = Column(Integer, primary_key=True, index=True)
    ficha_id = Column(Integer, ForeignKey("fichas_saude.id", ondelete="CASCADE"), nullable=False, index=True)
    posicao = Column(Integer, nullable=False)
    descricao = Column(String(100), nullable=False)
