
import os
from dotenv import load_dotenv

load_dotenv()  # Automatically loads from `.env` or `.env.local`

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

## RPC gateway listener
GNSO_HOST = os.getenv("GNSO_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "50051"))
# Set TLS_ENABLED=false to serve plain HTTP; otherwise both files must exist
TLS_ENABLED = os.getenv("TLS_ENABLED", "true").lower() in ("true", "1", "yes")
TLS_CERT_FILE = os.getenv("TLS_CERT_FILE", "tls/cert.pem")
TLS_KEY_FILE = os.getenv("TLS_KEY_FILE", "tls/key.pem")

## Token checked against every inbound request; empty disables authorization
TOKEN = os.getenv("TOKEN", "")

## NSO RESTCONF Settings
# Base URL up to and including the /restconf root, e.g. https://nso:8888/restconf
NSO_URL = os.getenv("NSO_URL", "http://localhost:8080/restconf")
NSO_USERNAME = os.getenv("NSO_USERNAME", "admin")
NSO_PASSWORD = os.getenv("NSO_PASSWORD", "admin")
NSO_VERIFY_SSL = os.getenv("NSO_VERIFY_SSL", "false").lower() == "true"
