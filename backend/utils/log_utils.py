import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
	"""
	Retorna logger nomeado com handler de console.
	O handler só é adicionado se o logger ainda não tiver nenhum.
	Parâmetros:
		name (str): nome do logger
	Retorno:
		logging.Logger: logger configurado
	"""
	logger = logging.getLogger(name)
	logger.setLevel(LOG_LEVEL.upper())
	if not logger.hasHandlers():
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
		logger.addHandler(handler)
	return logger
