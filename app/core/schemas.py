from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Базовая схема: поля в JSON в camelCase (boardId, createdAt, ...)"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class SuccessResponse(CamelModel):
    """Ответ на успешную мутацию"""
    success: bool = True
