"""
Crear un administrador desde la línea de comandos

    python -m bureau_admin.seed admin@example.com secreto123
"""
import argparse
import logging

from .models import SessionLocal, init_db
from .services import create_admin

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Crear cuenta de administrador")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        admin = create_admin(db, args.email, args.password)
    finally:
        db.close()
    print(f"Administrador creado: id={admin.id} email={admin.email}")


if __name__ == "__main__":
    main()
