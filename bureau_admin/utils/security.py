"""
Hash y verificación de contraseñas (bcrypt)
"""
import bcrypt
from fastapi.concurrency import run_in_threadpool

from ..config import settings

# bcrypt solo usa los primeros 72 bytes; bcryptjs los trunca en silencio
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = None) -> str:
    """
    Genera el hash bcrypt de una contraseña

    Args:
        password: Contraseña en texto plano
        rounds: Factor de costo (por defecto settings.BCRYPT_ROUNDS = 10)

    Returns:
        str: Hash en formato $2b$...
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Compara una contraseña contra su hash almacenado

    Un hash con formato inválido se considera como contraseña incorrecta.
    """
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        return False


async def hash_password_async(password: str) -> str:
    """bcrypt es costoso: se ejecuta en el threadpool para no bloquear el event loop"""
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await run_in_threadpool(verify_password, password, hashed)
