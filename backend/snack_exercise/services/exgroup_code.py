"""Random join codes for exgroups."""
import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_exgroup_code(length: int) -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
