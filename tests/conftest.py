import os

os.environ.pop("SEEDGEN_SEED", None)

import pytest

PUBLIC_SEED = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
PUBLIC_SEED_BYTES = bytes.fromhex(
    "f965a1d4cd5c0e5ee996e65db63bb922" "95960a0a1b247c029a94e724227410fd"
)
PUBLIC_SEED_VERIFY_KEY = (
    "84d50dea8599207014a20496be0d3969444467796395f2197ab987a7893cf8eb"
)


@pytest.fixture
def public_seed() -> str:
    return PUBLIC_SEED


@pytest.fixture
def public_seed_bytes() -> bytes:
    return PUBLIC_SEED_BYTES


@pytest.fixture
def public_seed_verify_key() -> str:
    return PUBLIC_SEED_VERIFY_KEY
