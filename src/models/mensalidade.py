# src/models/mensalidade.py
from sqlalchemy import Column, Integer, String, Date, DateTime, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from src.database import Base
from src.relogio import relogio_padrao


class Mensalidade(Base):
    __tablename__ = "mensalidades"
    # No máximo uma cobrança por cliente/plano/vencimento
    __table_args__ = (
        UniqueConstraint("cliente_id", "plano_id", "vencimento", name="uq_mensalidade_cliente_plano_vencimento"),
    )

    id = Column(Integer, primary_key=True, index=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=False, index=True)
    plano_id = Column(Integer, ForeignKey("planos.id"), nullable=False, index=True)
    valor = Column(Float, nullable=False)  # cópia do valor do plano no momento da geração
    vencimento = Column(Date, nullable=False, index=True)
    situacao = Column(String(20), nullable=False, default="NaoPago")
    data_geracao = Column(DateTime, default=relogio_padrao)

    cliente = relationship("Cliente", back_populates="mensalidades")
    plano = relationship("Plano", back_populates="mensalidades")
    movimentos = relationship("MovimentoCaixa", back_populates="mensalidade")
