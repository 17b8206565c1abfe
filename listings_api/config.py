from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PORT: int = 3001
    HOST: str = "0.0.0.0"
    APP_ID: str = "default-app-id"
    # Service account key downloaded from the Firebase console; never commit it
    FIREBASE_CREDENTIALS_PATH: str = "serviceAccountKey.json"
    STORE_BACKEND: str = "firestore"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def collection_path(self) -> str:
        return f"artifacts/{self.APP_ID}/public/data/properties"

settings = Settings()
