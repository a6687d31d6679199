from pydantic import BaseModel, Field
from typing import List


class Registration(BaseModel):
    """Проверенная регистрация команды (поля как в JSON запроса)"""
    event: str
    team_name: str = Field(alias="teamName")
    team_leader: str = Field(alias="teamLeader")
    phone_no: str = Field(alias="phoneNo")
    email: str
    roll_no: str = Field(alias="rollNo")
    members: List[str]

    class Config:
        populate_by_name = True
        frozen = True


class MessageResponse(BaseModel):
    """Ответ с ошибкой (400/500)"""
    message: str


class RegistrationResponse(BaseModel):
    message: str
    id: str
