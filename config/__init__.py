import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # An explicit dotted path wins; otherwise APP_ENV picks one of ours.
    explicit = os.getenv("SETTINGS_MODULE")
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").lower()
    return _ENV_MODULES.get(env, "config.development")
