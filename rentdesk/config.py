# rentdesk/config.py
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ---- App ----
    app_env: str = "local"  # local|dev|prod
    database_url: str = "sqlite:///./rentdesk.db"
    create_tables: bool = True

    # ---- CORS (used by main.py) ----
    cors_allow_origins: list[str] | str = ["*"]

    # ---- Session cookie ----
    session_cookie_name: str = "auth-session"
    session_max_age_seconds: int = 60 * 60 * 24 * 7  # 7 days
    session_cookie_secure: bool = False
    session_cookie_samesite: str = "lax"

    # ---- Uploads ----
    upload_dir: str = "./uploads"
    upload_base_url: str = "/uploads"
    # UPLOADTHING_TOKEN is the older name some deployments still set
    uploadthing_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("uploadthing_secret", "uploadthing_token"),
    )

    def model_post_init(self, __context) -> None:
        env = (self.app_env or "local").strip().lower()
        is_prod = env in ("prod", "production")

        if is_prod:
            if not self.session_cookie_secure:
                object.__setattr__(self, "session_cookie_secure", True)

            origins = self.cors_allow_origins
            if origins == "*" or origins == ["*"] or (isinstance(origins, str) and "*" in origins):
                raise ValueError("SECURITY: cors_allow_origins wildcard is not allowed in prod")


settings = Settings()
