"""
Módulo utilitário para validação e normalização de CPF.
Funções puras: não registram log, não guardam estado e nunca levantam exceção
para entradas malformadas (o resultado é simplesmente False).
"""
import re

CPF_LENGTH = 11
FIRST_DIGIT_FACTOR = 10
SECOND_DIGIT_FACTOR = 11


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres que não sejam dígitos ASCII do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos
        Exemplo: '529.982.247-25' -> '52998224725'
        """
        return re.sub(r'[^0-9]', '', cpf)

    @staticmethod
    def is_valid_cpf(cpf) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores (módulo 11).
        Aceita qualquer valor: None, vazio ou tipos não-string retornam False.
        Parâmetros:
            cpf (str): CPF com ou sem formatação
        Retorno:
            bool: True se válido, False caso contrário
        """
        if not cpf or not isinstance(cpf, str):
            return False
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != CPF_LENGTH:
            return False
        if CPFUtils.all_digits_are_the_same(cpf):
            return False
        base = cpf[:9]
        digit1 = CPFUtils.calculate_digit(base, FIRST_DIGIT_FACTOR)
        digit2 = CPFUtils.calculate_digit(f"{base}{digit1}", SECOND_DIGIT_FACTOR)
        return CPFUtils.extract_check_digit(cpf) == f"{digit1}{digit2}"

    @staticmethod
    def calculate_digit(digits: str, factor: int) -> int:
        """
        Calcula um dígito verificador.
        Cada dígito é multiplicado pelo peso (factor - posição); só entram na
        soma os termos com peso maior que 1.
        Parâmetros:
            digits (str): dígitos de entrada (9 para o primeiro DV, 10 para o segundo)
            factor (int): peso inicial (10 ou 11)
        Retorno:
            int: dígito entre 0 e 9
        """
        total = sum(
            int(digit) * (factor - index)
            for index, digit in enumerate(digits)
            if factor - index > 1
        )
        rest = total % 11
        return 0 if rest < 2 else 11 - rest

    @staticmethod
    def all_digits_are_the_same(cpf: str) -> bool:
        # "00000000000", "11111111111"... passariam no cálculo
        return cpf == cpf[0] * len(cpf)

    @staticmethod
    def extract_check_digit(cpf: str) -> str:
        return cpf[9:]

    @staticmethod
    def mask_cpf(cpf) -> str:
        """
        Mascara o CPF para uso em logs, deixando visíveis só os dígitos verificadores.
        Exemplo: '529.982.247-25' -> '*********25'
        """
        if not isinstance(cpf, str):
            return ""
        digits = CPFUtils.normalize_cpf(cpf)
        if len(digits) <= 2:
            return "*" * len(digits)
        return "*" * (len(digits) - 2) + digits[-2:]
