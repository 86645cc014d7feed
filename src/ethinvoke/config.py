from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rpc_url: str = "http://localhost:8545"
    rpc_rate_per_second: float = 10.0
    rpc_timeout: float = 30.0  # seconds

    class Config:
        env_file = ".env"
        env_prefix = "ETHINVOKE_"


settings = Settings()
