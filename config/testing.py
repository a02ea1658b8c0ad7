SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CIVIL_UTC_OFFSET_MINUTES = 330
DEFAULT_SATURDAY_POLICY = "All Saturdays Working"
MINIMUM_WORKING_HOURS = 8
MAX_RANGE_DAYS = 400
