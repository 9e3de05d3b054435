import os
from functools import lru_cache
from pathlib import Path

import dotenv

from nullable.core.settings import AppSettings, app_settings_constructor

CWD = Path(__file__).parent
BASE_DIR = CWD.parent.parent
ENV = BASE_DIR.joinpath(".env")

dotenv.load_dotenv(ENV)
PRODUCTION = os.getenv("PRODUCTION", "False") == "True"
TESTING = os.getenv("TESTING", "False") == "True"


@lru_cache
def get_app_settings() -> AppSettings:
    return app_settings_constructor(
        production=PRODUCTION,
        testing=TESTING,
        env_file=ENV,
    )
