"""
Configuration management for siteimport
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration"""

    # Supabase
    SUPABASE_URL: str = os.getenv('SUPABASE_URL', '')
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv('SUPABASE_SERVICE_ROLE_KEY', '')

    # HTTP surface
    CORS_ORIGINS: List[str] = os.getenv('CORS_ORIGINS', '*').split(',')
    IMPORT_RATE_LIMIT: str = os.getenv('IMPORT_RATE_LIMIT', '10/minute')

    @classmethod
    def validate(cls) -> bool:
        """Validate required configuration"""
        required = {
            'SUPABASE_URL': cls.SUPABASE_URL,
            'SUPABASE_SERVICE_ROLE_KEY': cls.SUPABASE_SERVICE_ROLE_KEY,
        }

        missing = [k for k, v in required.items() if not v]

        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        return True
