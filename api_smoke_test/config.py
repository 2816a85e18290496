"""Configuration for the smoke test run."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:5000/api"


class SmokeTestSettings(BaseSettings):
    """Target API and test user credentials.

    Values come from the environment (or a local `.env` file):
    - API_URL: base URL every endpoint is appended to
    - TEST_USER_EMAIL / TEST_USER_PASSWORD: credentials of an existing user
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    api_url: str = DEFAULT_API_URL
    test_user_email: str = "test@example.com"
    test_user_password: SecretStr = SecretStr("Test123456")
