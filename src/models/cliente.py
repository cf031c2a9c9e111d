# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Cliente.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base
from src.relogio import hoje, relogio_padrao


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(String(20), nullable=False)  # 'Cliente', 'Fornecedor' ou 'Ambos'
    nome_completo = Column(String(150), nullable=False, index=True)
    data_nascimento = Column(Date, nullable=False)
    sexo = Column(String(10), nullable=False)
    cpf = Column(String(11), nullable=False, unique=True, index=True)
    contato = Column(String(255), nullable=True)
    endereco = Column(String(255), nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)
    data_cadastro = Column(DateTime, default=relogio_padrao)

    # Nulo significa "sem plano ativo"
    plano_id = Column(Integer, ForeignKey("planos.id"), nullable=True, index=True)

    plano = relationship("Plano", back_populates="clientes")
    mensalidades = relationship("Mensalidade", back_populates="cliente")
    movimentos = relationship("MovimentoCaixa", back_populates="cliente")
    ficha_saude = relationship(
        "FichaSaude",
        back_populates="cliente",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def idade_em(self, referencia):
        """Idade completa, em anos, na data de referência."""
        if not self.data_nascimento:
            return None
        nasc = self.data_nascimento
        return referencia.year - nasc.year - ((referencia.month, referencia.day) < (nasc.month, nasc.day))

    @property
    def idade(self):
        return self.idade_em(hoje())
