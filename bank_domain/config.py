"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class BankDomainConfig(BaseSettings):
    """Bank domain configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    # Feature flags
    enable_operation_logging: bool = True
    
    # Display configuration
    display_precision: int = 2  # Decimal places when rendering balances
    
    class Config:
        env_prefix = "BANK_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankDomainConfig()


def get_config() -> BankDomainConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankDomainConfig:
    """Reload configuration from environment"""
    global config
    config = BankDomainConfig()
    return config
