"""
Token generation and at-rest protection for API keys.
"""

import hashlib
import hmac
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes


def generate_api_key() -> str:
    """Generate a secure API key."""
    return "sk_" + secrets.token_hex(16)


def hash_api_key(key: str, pepper: str) -> str:
    """Hash API key with HMAC-SHA256 and pepper."""
    return hmac.new(pepper.encode(), key.encode(), hashlib.sha256).hexdigest()


def _cipher_key(encryption_key: str) -> bytes:
    return encryption_key.ljust(32)[:32].encode()


def encrypt_api_key(key: str, encryption_key: str) -> str:
    """Encrypt API key for storage using AES-256-CBC."""
    iv = secrets.token_bytes(16)
    cipher = Cipher(algorithms.AES(_cipher_key(encryption_key)), modes.CBC(iv))
    encryptor = cipher.encryptor()

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded_data = padder.update(key.encode()) + padder.finalize()

    encrypted = encryptor.update(padded_data) + encryptor.finalize()
    return iv.hex() + ":" + encrypted.hex()


def decrypt_api_key(encrypted_key: str, encryption_key: str) -> str:
    """Decrypt a stored API key; raises ValueError on malformed input."""
    iv_hex, encrypted = encrypted_key.split(":")
    iv = bytes.fromhex(iv_hex)

    cipher = Cipher(algorithms.AES(_cipher_key(encryption_key)), modes.CBC(iv))
    decryptor = cipher.decryptor()
    padded_data = decryptor.update(bytes.fromhex(encrypted)) + decryptor.finalize()

    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    return (unpadder.update(padded_data) + unpadder.finalize()).decode()
