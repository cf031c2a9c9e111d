# -*- coding: utf-8 -*-
"""
Configuração comum dos schemas: JSON em camelCase, aceitando também snake_case na entrada.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchemaBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )
