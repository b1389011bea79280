import uuid
import pytest
import logging
from backend.models.account import Account
from backend.services.account_service import AccountService, AccountValidationError

logger = logging.getLogger("test_account_service")
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def service():
    return AccountService(logger=logger)


def passenger_payload(**overrides):
    payload = {
        "name": "John Doe",
        "email": f"john.doe{uuid.uuid4().hex[:6]}@gmail.com",
        "cpf": "97456321558",
        "isPassenger": True,
    }
    payload.update(overrides)
    return payload


def test_signup_passenger(service):
    payload = passenger_payload()
    account = service.signup(payload)
    logger.info(f"[PASS/FAIL] test_signup_passenger: account={account}")
    assert isinstance(account, Account)
    assert uuid.UUID(account.account_id).version == 4
    assert account.email == payload["email"]
    assert account.cpf == "97456321558"
    assert account.is_passenger is True
    assert account.is_driver is False


def test_signup_driver(service):
    account = service.signup(passenger_payload(isPassenger=False, isDriver=True, carPlate="AAA9999"))
    assert account.is_driver is True
    assert account.car_plate == "AAA9999"


def test_signup_generates_distinct_ids(service):
    first = service.signup(passenger_payload())
    second = service.signup(passenger_payload())
    assert first.account_id != second.account_id


def test_signup_accepts_field_names(service):
    account = service.signup(passenger_payload(is_driver=True, car_plate="ABC1234"))
    assert account.car_plate == "ABC1234"


def test_signup_keeps_formatted_cpf(service):
    account = service.signup(passenger_payload(cpf="974.563.215-58"))
    assert account.cpf == "974.563.215-58"


def test_account_dump_by_alias(service):
    dumped = service.signup(passenger_payload()).model_dump(by_alias=True)
    assert {"accountId", "carPlate", "isPassenger", "isDriver"} <= set(dumped)


@pytest.mark.parametrize("overrides, message", [
    ({"name": "John"}, "Invalid name"),
    ({"name": None}, "Invalid name"),
    ({"email": "john.doe.gmail.com"}, "Invalid email"),
    ({"cpf": "11111111111"}, "Invalid cpf"),
    ({"cpf": "12345678901"}, "Invalid cpf"),
    ({"cpf": ""}, "Invalid cpf"),
    ({"isDriver": True, "carPlate": "AAA999"}, "Invalid car plate"),
    ({"isDriver": True}, "Invalid car plate"),
    ({"cpf": 97456321558}, "Invalid payload"),
])
def test_signup_rejections(service, overrides, message):
    with pytest.raises(AccountValidationError) as exc_info:
        service.signup(passenger_payload(**overrides))
    logger.info(f"[PASS/FAIL] test_signup_rejections: overrides={overrides}, message={exc_info.value.message}")
    assert exc_info.value.message == message
    assert str(exc_info.value) == message


def test_passenger_without_car_plate_is_accepted(service):
    assert service.find_rejection_reason(passenger_payload(carPlate="invalid")) is None


def test_rejection_order_follows_signup_checks(service):
    payload = passenger_payload(name="John", email="invalid", cpf="123", isDriver=True)
    assert service.find_rejection_reason(payload) == "Invalid name"
    payload["name"] = "John Doe"
    assert service.find_rejection_reason(payload) == "Invalid email"
    payload["email"] = "john@doe.com"
    assert service.find_rejection_reason(payload) == "Invalid cpf"
    payload["cpf"] = "97456321558"
    assert service.find_rejection_reason(payload) == "Invalid car plate"
    payload["carPlate"] = "AAA9999"
    assert service.find_rejection_reason(payload) is None


def test_non_dict_payload_is_rejected(service):
    assert service.find_rejection_reason(None) == "Invalid payload"
    with pytest.raises(AccountValidationError):
        service.signup("not a payload")


def test_default_logger():
    assert AccountService().logger.name == "account_service"
