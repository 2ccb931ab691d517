"""
Generación del identificador público de bureau
"""
import secrets

BUREAU_ID_MIN = 1000000
BUREAU_ID_MAX = 9999999


def generate_bureau_id() -> str:
    """
    Número aleatorio de 7 dígitos en [1000000, 9999999]

    No se verifica colisión contra bureaus existentes.
    """
    return str(BUREAU_ID_MIN + secrets.randbelow(BUREAU_ID_MAX - BUREAU_ID_MIN + 1))
