# config.py
"""
Environment configuration for PropertyHub backend.

Values are read once from the process environment (and a local .env file).
"""
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env
load_dotenv()

# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"


def build_database_url() -> str:
     """
     DATABASE_URL wins when set (e.g. sqlite:// for tests).
     Otherwise build the MS SQL Server URL from the DB_* variables.
     """
     explicit = os.getenv("DATABASE_URL")
     if explicit:
          return explicit
     safe_user = quote_plus(DB_USER or "")
     safe_pass = quote_plus(DB_PASS or "")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{DB_SERVER}:{DB_PORT}/{DB_NAME}"


DATABASE_URL = build_database_url()

# Auth
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "1440"))
MIN_PASSWORD_LENGTH = 6

# HTTP
CORS_ORIGINS = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]
PORT = int(os.getenv("PORT", 10000))

# Reminders (Brevo transactional email)
BREVO_API_KEY = os.getenv("BREVO_API_KEY")
REMINDER_SENDER_EMAIL = os.getenv("REMINDER_SENDER_EMAIL", "noreply@propertyhub.com")
REMINDER_SENDER_NAME = os.getenv("REMINDER_SENDER_NAME", "PropertyHub")

# Reports
REPORT_CURRENCY = os.getenv("REPORT_CURRENCY", "KES")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
