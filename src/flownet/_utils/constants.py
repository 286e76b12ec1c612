# Environment variables
ENV_BASE_URL = "FLOWNET_URL"
ENV_ACCESS_TOKEN = "FLOWNET_ACCESS_TOKEN"
ENV_LOG_LEVEL = "FLOWNET_LOG_LEVEL"
ENV_TIMEOUT = "FLOWNET_TIMEOUT"
ENV_CA_BUNDLE = "FLOWNET_CA_BUNDLE"

# Standard CA overrides, checked after ENV_CA_BUNDLE
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Files
DOTENV_FILE = ".env"
