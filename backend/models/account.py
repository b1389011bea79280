"""
Modelos do cadastro de conta: payload recebido e conta aprovada.
"""
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class SignupInput(BaseModel):
    """Payload de criação de conta. Campos ausentes ficam None e são rejeitados pelas validações."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    cpf: Optional[str] = None
    car_plate: Optional[str] = Field(default=None, alias="carPlate")
    is_passenger: bool = Field(default=False, alias="isPassenger")
    is_driver: bool = Field(default=False, alias="isDriver")


class Account(BaseModel):
    """Conta aprovada, pronta para ser persistida por quem chamou o serviço."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="accountId")
    name: str
    email: str
    cpf: str
    car_plate: Optional[str] = Field(default=None, alias="carPlate")
    is_passenger: bool = Field(default=False, alias="isPassenger")
    is_driver: bool = Field(default=False, alias="isDriver")
