"""BIP-39 recovery phrases."""
from mnemonic import Mnemonic

# 256 bits of entropy -> 24 words
RECOVERY_PHRASE_STRENGTH = 256

_mnemonic = Mnemonic("english")


def generate_recovery_phrase() -> str:
    """Return a fresh 24-word English mnemonic."""
    return _mnemonic.generate(strength=RECOVERY_PHRASE_STRENGTH)

