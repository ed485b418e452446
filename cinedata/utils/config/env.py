from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    mongo_port: int = 27017
    mongo_host: str = "localhost"
    mongo_db: str = "sample_mflix"
    mongo_password: str | None = None
    mongo_params: str | None = None
    mongo_user: str | None = None
    mongo_srv: bool = False
    mongo_tls: bool = False

    top_commenters_limit: int = 20

    model_config = SettingsConfigDict(env_file=(".env",), case_sensitive=True)

    @property
    def mongo_uri(self) -> str:
        auth = ""
        if self.mongo_user and self.mongo_password:
            auth = f"{self.mongo_user}:{self.mongo_password}@"
        params = f"?{self.mongo_params}" if self.mongo_params else "?retryWrites=true&w=majority"
        if self.mongo_srv:
            # SRV records carry the port
            return f"mongodb+srv://{auth}{self.mongo_host}/{self.mongo_db}{params}"
        return f"mongodb://{auth}{self.mongo_host}:{self.mongo_port}/{self.mongo_db}{params}"


settings = Settings()
