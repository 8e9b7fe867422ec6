import logging

LOGGER = logging.getLogger("scinotation")
handler = logging.StreamHandler()
formatter = logging.Formatter("[%(levelname)s] %(message)s")
handler.setFormatter(formatter)
LOGGER.handlers.clear()
LOGGER.addHandler(handler)
