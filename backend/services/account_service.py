"""
Serviço de cadastro de conta: encapsula as validações do payload de signup.
Não persiste nada; devolve a conta aprovada para quem chamou.
"""
from typing import Dict, Any, Optional
from pydantic import ValidationError
from backend.models.account import Account, SignupInput
from backend.utils.account_utils import AccountFieldUtils
from backend.utils.cpf_utils import CPFUtils
from backend.utils.log_utils import get_logger

INVALID_PAYLOAD = "Invalid payload"
INVALID_NAME = "Invalid name"
INVALID_EMAIL = "Invalid email"
INVALID_CPF = "Invalid cpf"
INVALID_CAR_PLATE = "Invalid car plate"


class AccountValidationError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de cadastro.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = get_logger("account_service")
        self.logger = logger

    def _parse(self, payload: Dict[str, Any]) -> SignupInput:
        try:
            return SignupInput.model_validate(payload)
        except ValidationError as exc:
            self.logger.warning(f"Payload com tipos inválidos: errors={exc.error_count()}")
            raise AccountValidationError(INVALID_PAYLOAD) from exc

    def _check(self, data: SignupInput) -> Optional[str]:
        """
        Aplica as validações na ordem do cadastro e devolve o primeiro motivo de rejeição.
        Parâmetros:
            data (SignupInput): payload já interpretado
        Retorno:
            str: Motivo de rejeição ou None se válido
        """
        if not AccountFieldUtils.is_valid_name(data.name):
            self.logger.warning(f"Nome inválido: name={data.name!r}")
            return INVALID_NAME
        if not AccountFieldUtils.is_valid_email(data.email):
            self.logger.warning(f"Email inválido: email={data.email!r}")
            return INVALID_EMAIL
        if not CPFUtils.is_valid_cpf(data.cpf):
            self.logger.warning(f"CPF inválido detectado: cpf={CPFUtils.mask_cpf(data.cpf)}")
            return INVALID_CPF
        # placa só é exigida de motoristas
        if data.is_driver and not AccountFieldUtils.is_valid_car_plate(data.car_plate):
            self.logger.warning(f"Placa inválida: car_plate={data.car_plate!r}")
            return INVALID_CAR_PLATE
        return None

    def find_rejection_reason(self, payload: Dict[str, Any]) -> Optional[str]:
        """
        Valida o payload sem levantar exceção.
        Parâmetros:
            payload (dict): dados do cadastro
        Retorno:
            str: Motivo de rejeição ou None se válido
        """
        try:
            data = self._parse(payload)
        except AccountValidationError as exc:
            return exc.message
        return self._check(data)

    def signup(self, payload: Dict[str, Any]) -> Account:
        """
        Valida o payload de cadastro e monta a conta aprovada.
        Parâmetros:
            payload (dict): dados do cadastro
        Retorno:
            Account: conta com account_id novo
        Exceções:
            AccountValidationError: com o motivo da rejeição
        """
        self.logger.info("Recebendo payload de cadastro")
        data = self._parse(payload)
        reason = self._check(data)
        if reason is not None:
            raise AccountValidationError(reason)
        account = Account(
            name=data.name,
            email=data.email,
            cpf=data.cpf,
            car_plate=data.car_plate,
            is_passenger=data.is_passenger,
            is_driver=data.is_driver,
        )
        self.logger.info(f"Conta aprovada: account_id={account.account_id}")
        return account
