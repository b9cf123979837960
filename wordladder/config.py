from __future__ import annotations
import logging
import os
from typing import List, Optional

from pydantic import BaseModel

LOG_FORMAT = '[%(asctime)s] {%(name)s:%(lineno)d} %(levelname)s - %(message)s'

ENV_PREFIX = 'WORDLADDER_'

class Settings(BaseModel):
    word_list: Optional[str] = None
    # words of this length or longer are left out of the index
    max_word_length: int = 10
    tick_interval: float = 0.1  # seconds
    notify_delay: float = 0.01  # seconds
    log_level: str = 'INFO'
    cors_origins: List[str] = ['*']

    @classmethod
    def from_env(cls, environ=None) -> 'Settings':
        env = os.environ if environ is None else environ
        values = {}
        for field in ('word_list', 'max_word_length', 'tick_interval', 'notify_delay', 'log_level'):
            raw = env.get(ENV_PREFIX + field.upper())
            if raw:
                values[field] = raw.strip()
        origins = env.get(ENV_PREFIX + 'CORS_ORIGINS')
        if origins:
            values['cors_origins'] = [o.strip() for o in origins.split(',') if o.strip()]
        return cls.model_validate(values)

def setup_logging(level: str = 'INFO'):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt='%H:%M:%S')

settings = Settings.from_env()
