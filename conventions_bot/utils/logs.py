"""Logging setup"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s%(extras_str)s'

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED = set(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {
    'message', 'asctime', 'extras_str',
}


class ExtrasFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as key=value pairs"""
    def format(self, record):
        extras = {
            k: v for k, v in vars(record).items()
            if k not in _RESERVED and not k.startswith('_')
        }
        if extras:
            record.extras_str = ' - ' + ' - '.join(f'{k}={v}' for k, v in extras.items())
        else:
            record.extras_str = ''
        return super().format(record)


def configure_logging(level: str = 'INFO') -> None:
    """Install the console handler on the root logger"""
    handler = logging.StreamHandler()
    handler.setFormatter(ExtrasFormatter(LOG_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )
