import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./carwash.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    API_RELOAD = bool(data.get("API_RELOAD", False))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Tax configuration (ISV - Impuesto Sobre Ventas)
    ISV_RATE = str(data.get("ISV_RATE", "0.15"))  # Fraction, prices are ISV-inclusive
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "L.")

    # Invoice numbering: {branch}-{pos}-{type}-{000000000}
    INVOICE_BRANCH = str(data.get("INVOICE_BRANCH", "001"))
    INVOICE_POS = str(data.get("INVOICE_POS", "001"))
    INVOICE_DOC_TYPE = str(data.get("INVOICE_DOC_TYPE", "01"))
    INVOICE_SEQUENCE_RESUME = bool(data.get("INVOICE_SEQUENCE_RESUME", True))

    # Catalog bootstrap
    SEED_DEFAULT_SERVICES = bool(data.get("SEED_DEFAULT_SERVICES", True))

    # Business identity printed on receipts
    BUSINESS_NAME = data.get("BUSINESS_NAME", "CARWASH PEÑA BLANCA")
    BUSINESS_ADDRESS = data.get("BUSINESS_ADDRESS", "Peña Blanca, Cortés, Frente a Cielos y Pisos")
    BUSINESS_PHONE = data.get("BUSINESS_PHONE", "9464-8987")
    BUSINESS_RTN = data.get("BUSINESS_RTN", "08011987654321")

    # Receipt printing
    RECEIPT_PAPER_WIDTH = data.get("RECEIPT_PAPER_WIDTH", "58mm")  # 58mm or 80mm
    RECEIPT_FOOTER = data.get("RECEIPT_FOOTER", "¡Gracias por su preferencia!")
