"""Internal constants shared across the library."""

AES_BLOCK_BYTES = 16
VALID_AES_KEY_BYTES: frozenset[int] = frozenset({16, 24, 32})

DEFAULT_SYMMETRIC_KEY_BYTES = 32
DEFAULT_IV_BYTES = 16
DEFAULT_MAC_KEY_BYTES = 32

SHA256_DIGEST_BYTES = 32

DEFAULT_CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "FILECRYPT_CONFIG"

# ------------------------------------------------------------------
# Text sniffing
# ------------------------------------------------------------------

UTF16LE_BOM = b"\xff\xfe"
#: Only the first bytes are scanned for UTF-16 zero high bytes.
UTF16_SCAN_LIMIT = 200
#: More zero bytes than this at odd offsets marks the buffer as UTF-16LE.
UTF16_ZERO_THRESHOLD = 3

#: Characters shown by :meth:`CryptoSession.preview` for text output.
PREVIEW_MAX_CHARS = 10_000

# ------------------------------------------------------------------
# Key pair file
# ------------------------------------------------------------------

SYMMETRIC_KEY_PREFIX = "symmetric_key_hex:"
HMAC_KEY_PREFIX = "hmac_key_hex:"
KEYPAIR_SUFFIX = ".keypair.hex"
