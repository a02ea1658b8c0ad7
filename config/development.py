import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Company civil day is IST unless overridden
CIVIL_UTC_OFFSET_MINUTES = int(os.getenv("CIVIL_UTC_OFFSET_MINUTES", "330"))
DEFAULT_SATURDAY_POLICY = os.getenv("DEFAULT_SATURDAY_POLICY", "All Saturdays Working")
MINIMUM_WORKING_HOURS = float(os.getenv("MINIMUM_WORKING_HOURS", "8"))
MAX_RANGE_DAYS = int(os.getenv("MAX_RANGE_DAYS", "3660"))
