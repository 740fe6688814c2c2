import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Process configuration, built once at startup and passed to the app."""

    gmail_user: str = ""
    gmail_app_password: str = ""
    owner_email: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    port: int = 3000
    static_dir: str = "public"
    log_level: str = "INFO"

    @property
    def owner_address(self):
        return self.owner_email or self.gmail_user

    @classmethod
    def from_env(cls, env=None, dotenv_path=None):
        # .env never overrides variables already set in the process
        if env is None:
            load_dotenv(dotenv_path=dotenv_path)
            env = os.environ

        return cls(
            gmail_user=env.get("GMAIL_USER", ""),
            gmail_app_password=env.get("GMAIL_APP_PASSWORD", ""),
            owner_email=env.get("OWNER_EMAIL", ""),
            smtp_host=env.get("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(env.get("SMTP_PORT") or 465),
            port=int(env.get("PORT") or 3000),
            static_dir=env.get("STATIC_DIR", "public"),
            log_level=env.get("LOG_LEVEL", "INFO"),
        )
