import pytest

from keysmith.crypto import KeyPair, generate_encryption_key_pair, generate_signing_key_pair


@pytest.fixture(scope="session")
def signing_pair() -> KeyPair:
    return generate_signing_key_pair()


@pytest.fixture(scope="session")
def encryption_pair() -> KeyPair:
    return generate_encryption_key_pair()
