"""Configuration management for the sample runner."""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class Settings:
    """Configuration settings for the sample runner.

    Describes the account the runner drives and where its log goes.
    """

    # Sample Account
    account_number: str = '123'
    account_holder_name: str = 'Alice'
    initial_balance: float = 100.0

    # Logging Configuration
    log_file: str = 'sample_runner.log'
    log_level: str = 'INFO'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables and a .env file.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If SAMPLE_INITIAL_BALANCE is not a number or
                SAMPLE_LOG_LEVEL is not a logging level name.
        """
        load_dotenv()
        defaults = cls()

        raw_balance = os.getenv('SAMPLE_INITIAL_BALANCE')
        if raw_balance is None:
            initial_balance = defaults.initial_balance
        else:
            try:
                initial_balance = float(raw_balance)
            except ValueError:
                raise ValueError(
                    f"SAMPLE_INITIAL_BALANCE must be a number, got {raw_balance!r}"
                ) from None

        log_level = os.getenv('SAMPLE_LOG_LEVEL', defaults.log_level).upper()
        # getLevelName maps a known name to its number
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(
                f"SAMPLE_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG, got {log_level!r}"
            )

        return cls(
            account_number=os.getenv('SAMPLE_ACCOUNT_NUMBER', defaults.account_number),
            account_holder_name=os.getenv('SAMPLE_ACCOUNT_HOLDER', defaults.account_holder_name),
            initial_balance=initial_balance,
            log_file=os.getenv('SAMPLE_LOG_FILE', defaults.log_file),
            log_level=log_level,
        )
