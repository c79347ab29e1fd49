from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Landing page — which brand profile "/" and "/landing" render
    site_brand: str = "teaminsight"

    # Web3Forms (hosted form relay)
    web3forms_access_key: str = ""
    web3forms_endpoint: str = "https://api.web3forms.com/submit"
    contact_timeout_seconds: float | None = None

    @property
    def contact_form_configured(self) -> bool:
        return bool(self.web3forms_access_key.strip())


settings = Settings()
