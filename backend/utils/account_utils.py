"""
Validações de formato dos demais campos do cadastro de conta.
Checagens mínimas de forma, não gramáticas completas.
"""
import re

NAME_PATTERN = re.compile(r'[a-zA-Z]\s+[a-zA-Z]+')
EMAIL_PATTERN = re.compile(r'^(.+)@(.+)$')
CAR_PLATE_PATTERN = re.compile(r'[A-Z]{3}[0-9]{4}')


class AccountFieldUtils:
    @staticmethod
    def is_valid_name(name) -> bool:
        """
        Exige ao menos dois termos alfabéticos separados por espaço (nome e sobrenome).
        Parâmetros:
            name (str): nome completo
        Retorno:
            bool: True se o formato for aceito
        """
        if not isinstance(name, str):
            return False
        return NAME_PATTERN.search(name) is not None

    @staticmethod
    def is_valid_email(email) -> bool:
        """
        Exige prefixo não vazio, "@" e sufixo não vazio.
        Parâmetros:
            email (str): endereço de email
        Retorno:
            bool: True se o formato for aceito
        """
        if not isinstance(email, str):
            return False
        return EMAIL_PATTERN.match(email) is not None

    @staticmethod
    def is_valid_car_plate(car_plate) -> bool:
        """
        Procura três letras maiúsculas seguidas de quatro dígitos em qualquer
        parte da string; caracteres antes ou depois são aceitos.
        """
        if not isinstance(car_plate, str):
            return False
        return CAR_PLATE_PATTERN.search(car_plate) is not None
