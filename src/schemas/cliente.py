# -*- coding: utf-8 -*-
"""
Schemas Pydantic para Cliente e sua ficha de saúde.
"""
from pydantic import Field, field_validator
from typing import List, Optional
from datetime import date

from src.models.enums import FrequenciaDesejada, NivelAtividade, Sexo, TipoCliente
from src.schemas.base import SchemaBase
from src.schemas.plano import PlanoRead


class FichaSaudeBase(SchemaBase):
    doenca_diagnosticada: bool = False
    doenca_diagnosticada_qual: Optional[str] = Field(None, max_length=255)
    medicamentos_continuos: bool = False
    medicamentos_continuos_qual: Optional[str] = Field(None, max_length=255)
    lesao_cirurgia_ortopedia: bool = False
    lesao_cirurgia_ortopedia_qual: Optional[str] = Field(None, max_length=255)
    problemas_cardiacos_diabetes: bool = False
    problemas_cardiacos_qual: Optional[str] = Field(None, max_length=255)
    restricao_medica: bool = False
    restricao_medica_qual: Optional[str] = Field(None, max_length=255)
    objetivos: List[str] = []
    objetivo_outro: Optional[str] = Field(None, max_length=255)
    nivel_atividade: NivelAtividade = NivelAtividade.NUNCA
    frequencia_desejada: FrequenciaDesejada = FrequenciaDesejada.TRES_POR_SEMANA
    data_ficha: Optional[date] = None

    @field_validator("objetivos", mode="before")
    @classmethod
    def objetivo_unico_vira_lista(cls, v):
        """Aceita um objetivo solto como lista de um item; descarta entradas vazias."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [o.strip() for o in v if isinstance(o, str) and o.strip()]


class FichaSaudeWrite(FichaSaudeBase):
    pass


class FichaSaudeRead(FichaSaudeBase):
    id: int
    cliente_id: int
    nivel_atividade: str
    frequencia_desejada: str
    data_ficha: date


class ClienteBase(SchemaBase):
    tipo: TipoCliente
    nome_completo: str = Field(..., min_length=1, max_length=150)
    data_nascimento: date
    sexo: Sexo
    cpf: str = Field(..., max_length=14)
    contato: Optional[str] = Field(None, max_length=255)
    endereco: Optional[str] = Field(None, max_length=255)
    plano_id: Optional[int] = None
    ativo: bool = True


class ClienteCreate(ClienteBase):
    ficha_saude: Optional[FichaSaudeWrite] = None


class ClienteUpdate(SchemaBase):
    tipo: Optional[TipoCliente] = None
    nome_completo: Optional[str] = Field(None, min_length=1, max_length=150)
    data_nascimento: Optional[date] = None
    sexo: Optional[Sexo] = None
    cpf: Optional[str] = Field(None, max_length=14)
    contato: Optional[str] = Field(None, max_length=255)
    endereco: Optional[str] = Field(None, max_length=255)
    plano_id: Optional[int] = None  # null explícito remove o plano
    ativo: Optional[bool] = None
    ficha_saude: Optional[FichaSaudeWrite] = None


class ClienteRead(ClienteBase):
    id: int
    tipo: str
    sexo: str
    idade: Optional[int] = None
    plano: Optional[PlanoRead] = None
    ficha_saude: Optional[FichaSaudeRead] = None


class ContratarPlano(SchemaBase):
    plano_id: Optional[int] = None
    data_inicio: Optional[date] = None
