import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    CHECKPARAMS_REGISTRY_PATH: str = os.getenv("CHECKPARAMS_REGISTRY_PATH", "checks.yml")
    CHECKPARAMS_DEFAULT_RESOLUTION: int = int(
        os.getenv("CHECKPARAMS_DEFAULT_RESOLUTION", "0")
    )


settings = Settings()
