import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Secret key required by Flask; nothing in the lending core uses sessions
    SECRET_KEY: str = os.environ.get('SECRET_KEY') or 'dev-secret-change-me'

    # Strict mode: insufficient funds and repeated processing raise instead of
    # clamping / returning the stored fee
    LENDING_STRICT: bool = _env_flag('LENDING_STRICT', False)

    # Discount used by `lending fee --student` when no explicit factor is given
    LENDING_DEFAULT_DISCOUNT: str = os.environ.get('LENDING_DEFAULT_DISCOUNT') or '0.8'

    # Level applied to the `lending` package logger
    LENDING_LOG_LEVEL: str = os.environ.get('LENDING_LOG_LEVEL') or 'WARNING'
