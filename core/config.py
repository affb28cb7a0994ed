import os
from dotenv import load_dotenv
load_dotenv()

STORAGE_PATH = os.getenv("STORAGE_PATH", "./_data")
WIDE_KEYS = os.getenv("CIPHER_WIDE_KEYS", "0").strip().lower() in {"1", "true", "yes"}
