"""Configuration management for the food coach backend."""
import os
from typing import Dict, Final, Mapping, Optional, Tuple
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from the project .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# AI provider credentials, in selection priority order
PROVIDER_CREDENTIALS: Final[Tuple[Tuple[str, str], ...]] = (
    ("openai", "OPENAI_API_KEY"),
    ("anthropic", "ANTHROPIC_API_KEY"),
    ("gemini", "GEMINI_API_KEY"),
)

# Model Settings
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
ANTHROPIC_MODEL: Final[str] = os.getenv('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')
GEMINI_MODEL: Final[str] = os.getenv('GEMINI_MODEL', 'gemini-2.5-flash')
ANTHROPIC_API_BASE: Final[str] = os.getenv('ANTHROPIC_API_BASE', 'https://api.anthropic.com/v1').rstrip('/')
ANTHROPIC_API_VERSION: Final[str] = os.getenv('ANTHROPIC_API_VERSION', '2023-06-01')
AI_MAX_TOKENS: Final[int] = int(os.getenv('AI_MAX_TOKENS', '1024'))
AI_TIMEOUT_SECONDS: Final[float] = float(os.getenv('AI_TIMEOUT_SECONDS', '60'))


def provider_keys(env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return the trimmed credential for every provider (empty string when unset).

    Read on every call so a changed environment applies without a restart.
    """
    source = os.environ if env is None else env
    return {provider: (source.get(key) or '').strip() for provider, key in PROVIDER_CREDENTIALS}
