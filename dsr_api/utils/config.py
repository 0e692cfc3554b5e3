import os
import dotenv

# Load environment variables
dotenv.load_dotenv()

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()
# Empty string disables the log file
LOG_FILE = os.getenv("LOG_FILE", "dsr_api.log")

API_HOST = os.getenv("API_HOST") or "0.0.0.0"
API_PORT = int(os.getenv("API_PORT") or 8000)

SERVICE_NAME = "dsr_api"
# Resource segment of /api/<resource>/...
RESOURCE_NAME = "DsrTry"
