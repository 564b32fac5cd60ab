from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Runtime options, taken from TICTACTOE_* environment variables."""
    debug: bool = False
    host: str = '127.0.0.1'
    port: int = 5000

    @classmethod
    def from_env(cls) -> 'Settings':
        port_s = os.getenv('TICTACTOE_PORT', '5000')
        try:
            port = int(port_s)
        except ValueError:
            raise ValueError(f"TICTACTOE_PORT must be an integer, got {port_s!r}") from None
        return cls(
            debug=_env_flag('TICTACTOE_DEBUG'),
            host=os.getenv('TICTACTOE_HOST', '127.0.0.1'),
            port=port,
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
